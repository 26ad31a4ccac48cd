"""Guard evaluation: booleans, predicates and structural patterns.

Guards are dispatched on their runtime shape in a fixed order:

1. ``bool``: matches when ``True``.
2. callable: called with the context, matches on a truthy result.
3. ``None``: never matches.
4. mapping: structural pattern, see :func:`matches_pattern`.
5. anything else: plain truthiness.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from matchwise.comparators.base import is_comparator
from matchwise.types.common import Context

_MISSING: Any = object()


def same_value(left: Any, right: Any) -> bool:
    """Identity-style equality.

    ``nan`` equals ``nan``, ``0.0`` and ``-0.0`` differ, and booleans never
    equal numbers.
    """
    if left is right:
        return True
    if isinstance(left, bool) or isinstance(right, bool):
        return False
    if isinstance(left, float | int) and isinstance(right, float | int):
        if isinstance(left, float) and isinstance(right, float) and math.isnan(left) and math.isnan(right):
            return True
        if left == 0 and right == 0:
            return math.copysign(1.0, left) == math.copysign(1.0, right)
        return left == right
    return bool(left == right)


def matches_pattern(pattern: Mapping[str, Any], context: Context) -> bool:
    """Check every pattern key against *context* (logical AND).

    An empty pattern matches anything. A key missing from the context fails.
    """
    for key, expected in pattern.items():
        actual = context.get(key, _MISSING)
        if actual is _MISSING:
            return False
        if is_comparator(expected):
            if not expected.test(actual):
                return False
        elif not same_value(expected, actual):
            return False
    return True


def guard_matches(guard: Any, context: Context) -> bool:
    if isinstance(guard, bool):
        return guard
    if callable(guard):
        return bool(guard(context))
    if guard is None:
        return False
    if isinstance(guard, Mapping):
        return matches_pattern(guard, context)
    return bool(guard)
