"""Fluent first-match-wins evaluator.

A :class:`Matcher` owns two pieces of state:

- a :class:`ResolutionCell`, written at most once and shared with every
  branch view created from the evaluator;
- a :class:`ContextStack`, where each active branch owns the top layer.

Case-declaring calls read the top layer and commit into the cell. Once a case
is committed every later case-declaring call is a no-op.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

from matchwise.engine.patterns import guard_matches
from matchwise.engine.resolution import MISSING, ResolutionCell, lookup, map_resolution
from matchwise.engine.stack import ContextStack
from matchwise.types.common import (
    CaseKey,
    CaseResolver,
    Context,
    ContextMapper,
    MergeDelegate,
    Predicate,
    Selector,
    StatePicker,
)

logger = logging.getLogger(__name__)

BranchDelegate: TypeAlias = "Callable[[Matcher], Any]"


class Matcher:
    """Chainable decision evaluator over a context mapping."""

    __slots__ = ("_cell", "_stack")

    def __init__(self, context: Context | None = None) -> None:
        self._cell = ResolutionCell()
        self._stack = ContextStack(context)

    @classmethod
    def _scoped(cls, cell: ResolutionCell, stack: ContextStack) -> Matcher:
        """Build a branch view over existing state."""
        view = cls.__new__(cls)
        view._cell = cell
        view._stack = stack
        return view

    @property
    def context(self) -> Context:
        """Context visible to the next call (top of the stack)."""
        return self._stack.current()

    @property
    def case(self) -> CaseKey | None:
        return self._cell.case

    @property
    def resolved(self) -> bool:
        return self._cell.resolved

    # Context mutation

    def with_context(self, extension: Mapping[str, Any] | None) -> Matcher:
        """Merge *extension* over the current context; ``None`` keeps it as-is."""
        self._stack.extend(extension)
        return self

    def map_context(self, mapper: ContextMapper) -> Matcher:
        """Replace the current context with ``mapper(context)``."""
        self._stack.replace(mapper(self._stack.current()))
        return self

    # Case declaration

    def match_case(
        self,
        guard: bool | Predicate | Mapping[str, Any] | None,
        case: CaseKey | BranchDelegate,
    ) -> Matcher:
        """Commit *case* when *guard* matches the current context.

        *guard* may be a bool, a predicate, a pattern mapping or ``None``.
        A callable *case* is treated as a branch delegate and forwarded.
        """
        if self._cell.resolved:
            return self
        if guard_matches(guard, self._stack.current()):
            self._accept(case)
        return self

    def select_case(
        self,
        selector: Selector,
        case_map: Mapping[Any, CaseKey | BranchDelegate] | None = None,
    ) -> Matcher:
        """Pick a case from ``selector(context)``.

        Falsy selector results are skipped. With *case_map* the result is
        looked up first; missing, falsy or unhashable entries are skipped too.
        """
        if self._cell.resolved:
            return self
        selected = selector(self._stack.current())
        if not selected:
            return self
        if case_map is None:
            self._cell.commit(selected)
            return self
        target = lookup(case_map, selected)
        if target:
            self._accept(target)
        return self

    def otherwise(self, case: CaseKey) -> Matcher:
        self._cell.commit(case)
        return self

    def _accept(self, target: CaseKey | BranchDelegate) -> None:
        if callable(target):
            self.forward(target)
        else:
            self._cell.commit(target)

    # Branching

    def forward(self, delegate: BranchDelegate) -> Matcher:
        """Run *delegate* against a branch view with its own context layer.

        Cases committed by the branch are shared with this evaluator. Context
        changes made in the branch are dropped unless it calls :meth:`unwrap`.
        """
        if self._cell.resolved:
            logger.debug("Branch skipped: case %r already resolved", self._cell.case)
            return self
        self._stack.push()
        logger.debug("Entered branch at depth %d", self._stack.depth)
        try:
            delegate(Matcher._scoped(self._cell, self._stack))
        finally:
            self._stack.pop()
        return self

    def unwrap(self, merge: MergeDelegate | None = None) -> Context:
        """Return the current context, promoting it to the parent in a branch.

        With *merge*, ``merge(current, parent)`` is used instead. At the root
        the parent is the context originally given to the evaluator.
        """
        current = self._stack.current()
        result = merge(current, self._stack.parent()) if merge is not None else current
        if self._stack.depth > 1:
            self._stack.write_parent(result)
        return result

    # Terminal

    def pick(self, picker: StatePicker) -> Matcher:
        """Call ``picker(context, case)`` for inspection and keep chaining."""
        picker(self._stack.current(), self._cell.case)
        return self

    def resolve(
        self,
        result_map: Mapping[Any, CaseKey | CaseResolver] | None = None,
        fallback: Any | CaseResolver = MISSING,
    ) -> Any:
        """Return the committed case, or its mapped value from *result_map*."""
        return map_resolution(self._cell.case, self._stack.current(), result_map, fallback)
