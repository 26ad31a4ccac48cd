"""Compiler: turn validated table data into a replayable matcher chain."""

from __future__ import annotations

import hashlib
import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from matchwise.comparators import Comparator, number, string
from matchwise.constants.tables import DEFAULT_TABLE_SOURCE, NUMBER_TAG, STRING_TAG
from matchwise.engine import Matcher
from matchwise.engine.resolution import MISSING
from matchwise.exceptions import ComparatorError, TableCompileError
from matchwise.tables.schema import is_comparator_leaf, validate_table
from matchwise.types.common import Context

logger = logging.getLogger(__name__)

_COMPARATOR_FACTORIES: dict[str, Callable[..., Comparator]] = {
    NUMBER_TAG: number,
    STRING_TAG: string,
}


@dataclass(frozen=True, eq=False)
class CompiledCase:
    """One declared case: a guard (``when``) or a context-key selector."""

    guard: Any = None
    select: str | None = None
    target: str | CaseChain | None = None
    case_map: dict[Any, str | CaseChain] | None = None

    def apply(self, chain: Matcher) -> None:
        if self.select is None:
            chain.match_case(self.guard, _as_target(self.target))
            return
        key = self.select
        if self.case_map is None:
            chain.select_case(lambda context: context.get(key))
        else:
            targets = {value: _as_target(target) for value, target in self.case_map.items()}
            chain.select_case(lambda context: context.get(key), targets)


@dataclass(frozen=True)
class CaseChain:
    """Ordered cases plus an optional default, replayed onto a matcher."""

    cases: tuple[CompiledCase, ...]
    otherwise: str | None = None

    def apply(self, chain: Matcher) -> None:
        for case in self.cases:
            case.apply(chain)
        if self.otherwise is not None:
            chain.otherwise(self.otherwise)

    def case_keys(self) -> tuple[str, ...]:
        keys: list[str] = []
        for case in self.cases:
            targets = [case.target] if case.case_map is None else list(case.case_map.values())
            for target in targets:
                if isinstance(target, CaseChain):
                    keys.extend(target.case_keys())
                elif target is not None:
                    keys.append(target)
        if self.otherwise is not None:
            keys.append(self.otherwise)
        return tuple(dict.fromkeys(keys))


@dataclass(frozen=True, eq=False)
class DecisionTable:
    """Compiled decision table."""

    source: str
    chain: CaseChain
    name: str | None = None
    results: dict[Any, Any] | None = None
    fallback: Any = MISSING
    fingerprint: str = field(default="", compare=False)

    @property
    def case_keys(self) -> tuple[str, ...]:
        """Declared case keys in declaration order, without duplicates."""
        return self.chain.case_keys()

    def matcher(self, context: Context | None = None) -> Matcher:
        """Return a fresh matcher with every table case already declared."""
        evaluator = Matcher(context)
        self.chain.apply(evaluator)
        return evaluator

    def evaluate(self, context: Context | None = None) -> Any:
        """Resolve *context* against the table, mapped through ``results``."""
        evaluator = self.matcher(context)
        if self.results is None:
            return evaluator.resolve()
        return evaluator.resolve(self.results, self.fallback)


def compile_table(data: Mapping[str, Any], source: str = DEFAULT_TABLE_SOURCE) -> DecisionTable:
    """Validate and compile a table mapping into a DecisionTable.

    Raises TableSchemaError on schema violations, TableCompileError when a
    comparator cannot be built from its options.
    """
    validate_table(data, source)

    table = DecisionTable(
        source=source,
        chain=_compile_chain(data, source),
        name=data.get("name"),
        results=dict(data["results"]) if "results" in data else None,
        fallback=data.get("fallback", MISSING),
        fingerprint=_fingerprint(data),
    )
    logger.debug("Compiled decision table %s (%d top-level cases)", table.name or source, len(table.chain.cases))
    return table


def _compile_chain(data: Mapping[str, Any], source: str) -> CaseChain:
    return CaseChain(
        cases=tuple(_compile_case(entry, source) for entry in data["cases"]),
        otherwise=data.get("otherwise"),
    )


def _compile_case(entry: Mapping[str, Any], source: str) -> CompiledCase:
    if "select" in entry:
        case_map = entry.get("map")
        return CompiledCase(
            select=entry["select"],
            case_map=None
            if case_map is None
            else {key: _compile_target(target, source) for key, target in case_map.items()},
        )

    guard = entry["when"]
    if isinstance(guard, dict):
        guard = _compile_pattern(guard, source)
    target = entry["case"] if "case" in entry else _compile_chain(entry["branch"], source)
    return CompiledCase(guard=guard, target=target)


def _compile_target(target: Any, source: str) -> str | CaseChain:
    if isinstance(target, dict):
        return _compile_chain(target, source)
    return target


def _compile_pattern(pattern: Mapping[str, Any], source: str) -> dict[str, Any]:
    compiled: dict[str, Any] = {}
    for key, value in pattern.items():
        compiled[key] = _compile_comparator(value, source, key) if is_comparator_leaf(value) else value
    return compiled


def _compile_comparator(leaf: Mapping[str, Any], source: str, key: str) -> Comparator:
    ((tag, options),) = leaf.items()
    factory = _COMPARATOR_FACTORIES[tag]
    try:
        return factory(**(options or {}))
    except ComparatorError as exc:
        raise TableCompileError(f"{source}: pattern key '{key}': {exc}") from exc


def _as_target(target: str | CaseChain | None) -> Any:
    if isinstance(target, CaseChain):
        return target.apply
    return target


def _fingerprint(data: Mapping[str, Any]) -> str:
    """Stable hash of the table data for cache invalidation."""
    blob = json.dumps(_stringify_keys(data), sort_keys=True, separators=(",", ":"), default=str).encode("utf-8")
    return hashlib.sha256(blob).hexdigest()


def _stringify_keys(value: Any) -> Any:
    # YAML allows non-string keys; json.dumps(sort_keys=True) does not.
    if isinstance(value, Mapping):
        return {repr(key): _stringify_keys(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [_stringify_keys(item) for item in value]
    return value
