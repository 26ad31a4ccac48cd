"""Schema constants for decision tables."""

from __future__ import annotations

REQUIRED_TABLE_KEYS: frozenset[str] = frozenset({"cases"})
ALLOWED_TABLE_KEYS: frozenset[str] = REQUIRED_TABLE_KEYS | {
    "name",
    "otherwise",
    "results",
    "fallback",
}
# Nested tables only declare cases; result mapping belongs to the top level.
ALLOWED_BRANCH_KEYS: frozenset[str] = REQUIRED_TABLE_KEYS | {"name", "otherwise"}

GUARD_KEYS: frozenset[str] = frozenset({"when", "select"})
TARGET_KEYS: frozenset[str] = frozenset({"case", "branch"})
ALLOWED_CASE_KEYS: frozenset[str] = GUARD_KEYS | TARGET_KEYS | {"map"}

COMPARATOR_TAG_PREFIX: str = "$"
NUMBER_TAG: str = "$number"
STRING_TAG: str = "$string"
COMPARATOR_OPTION_KEYS: dict[str, frozenset[str]] = {
    NUMBER_TAG: frozenset({"min", "max", "integer", "finite"}),
    STRING_TAG: frozenset({"min_len", "max_len", "pattern"}),
}

DEFAULT_TABLE_SOURCE: str = "<table>"
