"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def schemas_root() -> Path:
    """Return root directory for shipped JSON schemas."""
    return Path(__file__).resolve().parent.parent / "schemas"
