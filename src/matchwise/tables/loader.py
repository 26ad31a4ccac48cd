"""YAML front end for decision tables."""

from __future__ import annotations

import yaml

from matchwise.constants.tables import DEFAULT_TABLE_SOURCE
from matchwise.exceptions import TableSchemaError
from matchwise.tables.compiler import DecisionTable, compile_table


def load_table(text: str, source: str = DEFAULT_TABLE_SOURCE) -> DecisionTable:
    """Parse YAML *text* and compile it into a DecisionTable."""
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise TableSchemaError(f"Invalid YAML in {source}: {exc}") from exc

    if not isinstance(raw, dict):
        raise TableSchemaError(f"Table {source} must contain a mapping")
    return compile_table(raw, source)
