"""Public entry point: ``matcher(context)`` plus comparator factories."""

from __future__ import annotations

from matchwise.comparators import number, string, where
from matchwise.engine import Matcher
from matchwise.types.common import Context


class MatcherFactory:
    """Callable that builds evaluators; comparator factories hang off it.

    >>> matcher({"value": 42}).match_case({"value": matcher.number(min=37)}, "A").resolve()
    'A'
    """

    number = staticmethod(number)
    string = staticmethod(string)
    where = staticmethod(where)

    def __call__(self, context: Context | None = None) -> Matcher:
        return Matcher(context)


matcher = MatcherFactory()
