"""String length and shape comparator."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from matchwise.comparators.base import Comparator
from matchwise.exceptions import ComparatorError


@dataclass(frozen=True)
class StringComparator(Comparator):
    """Accepts ``str`` values within optional length bounds and regex."""

    min_len: int | None = None
    max_len: int | None = None
    pattern: re.Pattern[str] | None = None

    def __post_init__(self) -> None:
        for label, bound in (("min_len", self.min_len), ("max_len", self.max_len)):
            if bound is None:
                continue
            if isinstance(bound, bool) or not isinstance(bound, int) or bound < 0:
                raise ComparatorError(f"string comparator '{label}' must be a non-negative integer, got {bound!r}")
        if self.min_len is not None and self.max_len is not None and self.min_len > self.max_len:
            raise ComparatorError(
                f"string comparator 'min_len' ({self.min_len}) is greater than 'max_len' ({self.max_len})"
            )

    def test(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        if self.min_len is not None and len(value) < self.min_len:
            return False
        if self.max_len is not None and len(value) > self.max_len:
            return False
        if self.pattern is not None and self.pattern.search(value) is None:
            return False
        return True


def compile_pattern(pattern: str | re.Pattern[str] | None) -> re.Pattern[str] | None:
    """Normalize a regex option, raising ComparatorError on bad input."""
    if pattern is None or isinstance(pattern, re.Pattern):
        return pattern
    if not isinstance(pattern, str):
        raise ComparatorError(f"string comparator 'pattern' must be a string or compiled regex, got {pattern!r}")
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ComparatorError(f"string comparator 'pattern' is not a valid regex: {exc}") from exc


def string(
    *,
    min_len: int | None = None,
    max_len: int | None = None,
    pattern: str | re.Pattern[str] | None = None,
) -> StringComparator:
    """Build a comparator for string pattern leaves."""
    return StringComparator(min_len=min_len, max_len=max_len, pattern=compile_pattern(pattern))
