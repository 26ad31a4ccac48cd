"""Comparator wrapping an arbitrary one-argument check."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from matchwise.comparators.base import Comparator
from matchwise.exceptions import ComparatorError


@dataclass(frozen=True)
class PredicateComparator(Comparator):
    check: Callable[[Any], Any]

    def __post_init__(self) -> None:
        if not callable(self.check):
            raise ComparatorError(f"where() expects a callable, got {self.check!r}")

    def test(self, value: Any) -> bool:
        return bool(self.check(value))


def where(check: Callable[[Any], Any]) -> PredicateComparator:
    """Use *check* as a pattern leaf.

    A bare callable inside a pattern is compared as a literal value, so
    custom checks must be wrapped.
    """
    return PredicateComparator(check)
