"""Tests for decision table schema validation."""

from __future__ import annotations

from typing import Any

import pytest

from matchwise.exceptions import TableSchemaError
from matchwise.tables import validate_table

from .conftest import _minimal_table


def test_valid_minimal_table() -> None:
    validate_table(_minimal_table(), "<test>")


def test_rejects_non_mapping() -> None:
    with pytest.raises(TableSchemaError, match="table must be a mapping"):
        validate_table(["cases"], "<test>")


def test_rejects_unknown_top_key() -> None:
    with pytest.raises(TableSchemaError, match="unknown keys in table"):
        validate_table(_minimal_table(bogus=1), "<test>")


def test_rejects_missing_cases() -> None:
    table = _minimal_table()
    del table["cases"]
    with pytest.raises(TableSchemaError, match="missing required key 'cases'"):
        validate_table(table, "<test>")


def test_rejects_non_list_cases() -> None:
    with pytest.raises(TableSchemaError, match="cases must be a list"):
        validate_table(_minimal_table(cases={}), "<test>")


def test_error_message_names_source() -> None:
    with pytest.raises(TableSchemaError, match="^rules.yaml: "):
        validate_table(_minimal_table(bogus=1), "rules.yaml")


@pytest.mark.parametrize(
    ("entry", "message"),
    [
        ("A", r"cases\[0\] must be a mapping"),
        ({"case": "A"}, "exactly one of 'when' or 'select'"),
        ({"when": True, "select": "k", "case": "A"}, "exactly one of 'when' or 'select'"),
        ({"when": True}, "exactly one of 'case' or 'branch'"),
        ({"when": True, "case": "A", "branch": {"cases": []}}, "exactly one of 'case' or 'branch'"),
        ({"when": True, "case": "A", "map": {"x": "B"}}, "only allowed with 'select'"),
        ({"when": "yes", "case": "A"}, "must be a boolean, null or a pattern"),
        ({"when": True, "case": ""}, "non-empty case key"),
        ({"when": True, "case": 3}, "non-empty case key"),
        ({"when": True, "case": "A", "extra": 1}, r"unknown keys in cases\[0\]"),
        ({"select": "", "map": {"x": "A"}}, "non-empty context key"),
        ({"select": "k", "case": "A"}, "takes 'map' instead"),
        ({"select": "k", "map": {}}, "non-empty mapping"),
        ({"select": "k", "map": {"x": 5}}, "non-empty case key"),
        ({"when": {1: "a"}, "case": "A"}, "keys must be strings"),
        ({"when": {"v": {"$date": {}}}, "case": "A"}, "unknown comparator '\\$date'"),
        ({"when": {"v": {"$number": [1]}}, "case": "A"}, "options must be a mapping"),
        ({"when": {"v": {"$number": {"minimum": 1}}}, "case": "A"}, "unknown options"),
    ],
)
def test_rejects_bad_case_entries(entry: Any, message: str) -> None:
    with pytest.raises(TableSchemaError, match=message):
        validate_table(_minimal_table(cases=[entry]), "<test>")


def test_accepts_null_guard_and_bare_comparator() -> None:
    validate_table(
        _minimal_table(cases=[{"when": None, "case": "A"}, {"when": {"v": {"$string": None}}, "case": "B"}]),
        "<test>",
    )


def test_literal_mapping_values_are_not_comparators() -> None:
    """Nested mappings without a $tag key are plain literals."""
    validate_table(_minimal_table(cases=[{"when": {"v": {"a": 1, "b": 2}}, "case": "A"}]), "<test>")


def test_rejects_bad_nested_branch() -> None:
    branch = {"cases": [{"when": True}]}
    with pytest.raises(TableSchemaError, match=r"cases\[0\]\.branch\.cases\[0\]"):
        validate_table(_minimal_table(cases=[{"when": True, "branch": branch}]), "<test>")


def test_rejects_results_in_nested_branch() -> None:
    branch = {"cases": [], "results": {}}
    with pytest.raises(TableSchemaError, match="unknown keys in cases\\[0\\].branch"):
        validate_table(_minimal_table(cases=[{"when": True, "branch": branch}]), "<test>")


def test_rejects_bad_otherwise() -> None:
    with pytest.raises(TableSchemaError, match="otherwise must be a non-empty case key"):
        validate_table(_minimal_table(otherwise=""), "<test>")


def test_rejects_bad_name() -> None:
    with pytest.raises(TableSchemaError, match="'name' must be a non-empty string"):
        validate_table(_minimal_table(name=" "), "<test>")


def test_rejects_non_mapping_results() -> None:
    with pytest.raises(TableSchemaError, match="'results' must be a mapping"):
        validate_table(_minimal_table(results=[1]), "<test>")


def test_fallback_requires_results() -> None:
    with pytest.raises(TableSchemaError, match="'fallback' requires 'results'"):
        validate_table(_minimal_table(fallback=0), "<test>")
