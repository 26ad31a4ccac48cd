"""Comparator construction exceptions."""

from __future__ import annotations

from matchwise.exceptions.base import MatchwiseError


class ComparatorError(MatchwiseError, ValueError):
    """Raised when comparator options are invalid."""
