"""Shared exception hierarchy for Matchwise."""

from __future__ import annotations

from .base import MatchwiseError
from .comparators import ComparatorError
from .tables import TableCompileError, TableError, TableSchemaError

__all__ = [
    "ComparatorError",
    "MatchwiseError",
    "TableCompileError",
    "TableError",
    "TableSchemaError",
]
