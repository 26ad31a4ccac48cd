"""Shared fixtures and helpers for decision table tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

SHIPPING_TABLE_YAML: str = """\
name: shipping
cases:
  - when: {kind: letter}
    case: letter
  - when: {kind: parcel, weight: {$number: {max: 2}}}
    case: small
  - when: {kind: parcel}
    branch:
      cases:
        - when: {express: true}
          case: express
      otherwise: parcel
  - select: region
    map:
      eu: europe
      us:
        cases:
          - when: {state: {$string: {pattern: "^[A-Z]{2}$"}}}
            case: domestic
otherwise: unknown
results:
  letter: 1.2
  small: 4.5
  express: 20
  parcel: 9
  europe: 12
  domestic: 7
fallback: 0
"""


def _minimal_table(**overrides: Any) -> dict[str, Any]:
    """Return a minimal valid table dict, merged with *overrides*."""
    base: dict[str, Any] = {
        "cases": [
            {"when": {"kind": "a"}, "case": "A"},
        ],
        "otherwise": "Z",
    }
    base.update(overrides)
    return base


@pytest.fixture(scope="session")
def table_schema(schemas_root: Path) -> dict[str, Any]:
    """Load the decision table JSON Schema."""
    return json.loads((schemas_root / "decision_table.schema.json").read_text(encoding="utf-8"))
