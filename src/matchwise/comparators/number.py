"""Numeric range and shape comparator."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from matchwise.comparators.base import Comparator
from matchwise.exceptions import ComparatorError


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


@dataclass(frozen=True)
class NumberComparator(Comparator):
    """Accepts real numbers within optional inclusive bounds."""

    min_value: float | None = None
    max_value: float | None = None
    integer: bool = False
    finite: bool = False

    def __post_init__(self) -> None:
        for label, bound in (("min", self.min_value), ("max", self.max_value)):
            if bound is not None and not _is_number(bound):
                raise ComparatorError(f"number comparator '{label}' must be a number, got {bound!r}")
        for label, flag in (("integer", self.integer), ("finite", self.finite)):
            if not isinstance(flag, bool):
                raise ComparatorError(f"number comparator '{label}' must be a boolean, got {flag!r}")
        if self.min_value is not None and self.max_value is not None and self.min_value > self.max_value:
            raise ComparatorError(
                f"number comparator 'min' ({self.min_value}) is greater than 'max' ({self.max_value})"
            )

    def test(self, value: Any) -> bool:
        if not _is_number(value):
            return False
        if self.finite and not math.isfinite(value):
            return False
        if self.integer and not (isinstance(value, int) or value.is_integer()):
            return False
        if self.min_value is not None and not value >= self.min_value:
            return False
        if self.max_value is not None and not value <= self.max_value:
            return False
        return True


def number(
    *,
    min: float | None = None,  # noqa: A002
    max: float | None = None,  # noqa: A002
    integer: bool = False,
    finite: bool = False,
) -> NumberComparator:
    """Build a comparator for numeric pattern leaves."""
    return NumberComparator(min_value=min, max_value=max, integer=integer, finite=finite)
