"""Decision table exceptions."""

from __future__ import annotations

from matchwise.exceptions.base import MatchwiseError


class TableError(MatchwiseError, ValueError):
    """Base for decision table failures."""


class TableSchemaError(TableError):
    """Raised when table data does not follow the table schema."""


class TableCompileError(TableError):
    """Raised when schema-valid table data cannot be compiled."""
