"""Matchwise: fluent first-match-wins decision evaluation."""

from __future__ import annotations

from matchwise.api import MatcherFactory, matcher
from matchwise.comparators import Comparator, number, string, where
from matchwise.engine import Matcher
from matchwise.exceptions import (
    ComparatorError,
    MatchwiseError,
    TableCompileError,
    TableError,
    TableSchemaError,
)
from matchwise.tables import DecisionTable, compile_table, load_table

__version__ = "0.3.0"

__all__ = [
    "Comparator",
    "ComparatorError",
    "DecisionTable",
    "Matcher",
    "MatcherFactory",
    "MatchwiseError",
    "TableCompileError",
    "TableError",
    "TableSchemaError",
    "__version__",
    "compile_table",
    "load_table",
    "matcher",
    "number",
    "string",
    "where",
]
