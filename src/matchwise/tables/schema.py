"""Strict schema validation for decision tables.

Validates table mappings before compilation. Raises TableSchemaError on the
first violation; nothing is skipped.
"""

from __future__ import annotations

from typing import Any

from matchwise.constants.tables import (
    ALLOWED_BRANCH_KEYS,
    ALLOWED_CASE_KEYS,
    ALLOWED_TABLE_KEYS,
    COMPARATOR_OPTION_KEYS,
    COMPARATOR_TAG_PREFIX,
    REQUIRED_TABLE_KEYS,
)
from matchwise.exceptions import TableSchemaError


def validate_table(data: Any, source: str) -> None:
    """Validate a top-level table mapping. Raises TableSchemaError."""
    _validate_chain(data, source, "", ALLOWED_TABLE_KEYS)

    if "name" in data and (not isinstance(data["name"], str) or not data["name"].strip()):
        raise TableSchemaError(f"{source}: 'name' must be a non-empty string")

    if "results" in data and not isinstance(data["results"], dict):
        raise TableSchemaError(f"{source}: 'results' must be a mapping")

    if "fallback" in data and "results" not in data:
        raise TableSchemaError(f"{source}: 'fallback' requires 'results'")


def is_comparator_leaf(value: Any) -> bool:
    """Return whether *value* is a ``{$tag: options}`` pattern leaf."""
    return (
        isinstance(value, dict)
        and len(value) == 1
        and isinstance(next(iter(value)), str)
        and next(iter(value)).startswith(COMPARATOR_TAG_PREFIX)
    )


def _validate_chain(data: Any, source: str, where: str, allowed: frozenset[str]) -> None:
    label = where or "table"
    if not isinstance(data, dict):
        raise TableSchemaError(f"{source}: {label} must be a mapping, got {type(data).__name__}")

    unknown = set(data.keys()) - allowed
    if unknown:
        raise TableSchemaError(f"{source}: unknown keys in {label}: {sorted(unknown, key=str)}")

    for key in REQUIRED_TABLE_KEYS:
        if key not in data:
            raise TableSchemaError(f"{source}: {label} missing required key '{key}'")

    cases = data["cases"]
    if not isinstance(cases, list):
        raise TableSchemaError(f"{source}: {_join(where, 'cases')} must be a list")
    for index, entry in enumerate(cases):
        _validate_case(entry, source, f"{_join(where, 'cases')}[{index}]")

    if "otherwise" in data:
        _validate_case_key(data["otherwise"], source, _join(where, "otherwise"))


def _validate_case(entry: Any, source: str, where: str) -> None:
    if not isinstance(entry, dict):
        raise TableSchemaError(f"{source}: {where} must be a mapping")

    unknown = set(entry.keys()) - ALLOWED_CASE_KEYS
    if unknown:
        raise TableSchemaError(f"{source}: unknown keys in {where}: {sorted(unknown, key=str)}")

    has_when = "when" in entry
    has_select = "select" in entry
    if has_when == has_select:
        raise TableSchemaError(f"{source}: {where} must declare exactly one of 'when' or 'select'")

    if has_when:
        _validate_when_case(entry, source, where)
    else:
        _validate_select_case(entry, source, where)


def _validate_when_case(entry: dict[str, Any], source: str, where: str) -> None:
    if "map" in entry:
        raise TableSchemaError(f"{source}: {where}.map is only allowed with 'select'")
    if ("case" in entry) == ("branch" in entry):
        raise TableSchemaError(f"{source}: {where} must declare exactly one of 'case' or 'branch'")

    guard = entry["when"]
    if guard is not None and not isinstance(guard, bool | dict):
        raise TableSchemaError(f"{source}: {where}.when must be a boolean, null or a pattern mapping")
    if isinstance(guard, dict):
        _validate_pattern(guard, source, f"{where}.when")

    if "case" in entry:
        _validate_case_key(entry["case"], source, f"{where}.case")
    else:
        _validate_chain(entry["branch"], source, f"{where}.branch", ALLOWED_BRANCH_KEYS)


def _validate_select_case(entry: dict[str, Any], source: str, where: str) -> None:
    if "case" in entry or "branch" in entry:
        raise TableSchemaError(f"{source}: {where} with 'select' takes 'map' instead of 'case' or 'branch'")

    selector = entry["select"]
    if not isinstance(selector, str) or not selector.strip():
        raise TableSchemaError(f"{source}: {where}.select must be a non-empty context key")

    if "map" not in entry:
        return
    case_map = entry["map"]
    if not isinstance(case_map, dict) or not case_map:
        raise TableSchemaError(f"{source}: {where}.map must be a non-empty mapping")
    for key, target in case_map.items():
        target_where = f"{where}.map.{key}"
        if isinstance(target, dict):
            _validate_chain(target, source, target_where, ALLOWED_BRANCH_KEYS)
        else:
            _validate_case_key(target, source, target_where)


def _validate_pattern(pattern: dict[Any, Any], source: str, where: str) -> None:
    for key, value in pattern.items():
        if not isinstance(key, str):
            raise TableSchemaError(f"{source}: {where} keys must be strings, got {key!r}")
        if is_comparator_leaf(value):
            _validate_comparator_leaf(value, source, f"{where}.{key}")


def _validate_comparator_leaf(leaf: dict[str, Any], source: str, where: str) -> None:
    ((tag, options),) = leaf.items()
    allowed = COMPARATOR_OPTION_KEYS.get(tag)
    if allowed is None:
        raise TableSchemaError(
            f"{source}: {where} uses unknown comparator '{tag}', must be one of {sorted(COMPARATOR_OPTION_KEYS)}"
        )
    if options is None:
        return
    if not isinstance(options, dict):
        raise TableSchemaError(f"{source}: {where}.{tag} options must be a mapping")
    unknown = set(options.keys()) - allowed
    if unknown:
        raise TableSchemaError(f"{source}: unknown options in {where}.{tag}: {sorted(unknown, key=str)}")


def _validate_case_key(value: Any, source: str, where: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise TableSchemaError(f"{source}: {where} must be a non-empty case key string, got {value!r}")


def _join(where: str, key: str) -> str:
    return f"{where}.{key}" if where else key
