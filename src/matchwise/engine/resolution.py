"""Write-once case slot and the terminal result mapping."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from matchwise.types.common import CaseKey, CaseResolver, Context

logger = logging.getLogger(__name__)

MISSING: Any = object()


class ResolutionCell:
    """Holds the committed case key shared by an evaluator and its branches."""

    __slots__ = ("_case",)

    def __init__(self) -> None:
        self._case: CaseKey | None = None

    @property
    def case(self) -> CaseKey | None:
        return self._case

    @property
    def resolved(self) -> bool:
        return self._case is not None

    def commit(self, case: CaseKey | None) -> bool:
        """Store *case* unless a case is already set. ``None`` is ignored."""
        if self._case is not None or case is None:
            return False
        self._case = case
        logger.debug("Committed case %r", case)
        return True


def map_resolution(
    case: CaseKey | None,
    context: Context,
    result_map: Mapping[Any, CaseKey | CaseResolver] | None = None,
    fallback: Any | CaseResolver = MISSING,
) -> Any:
    """Translate a committed case into the caller-facing value.

    Without *result_map* the case key itself is returned. Callable entries
    (and a callable *fallback*) are invoked as ``resolver(context, case)``.
    """
    if result_map is None:
        return case

    value = lookup(result_map, case) if case is not None else None
    if fallback is not MISSING and not value:
        value = fallback
    if callable(value):
        return value(context, case)
    return value


def lookup(mapping: Mapping[Any, Any], key: Any) -> Any:
    """Return ``mapping.get(key)``; an unhashable *key* is a miss."""
    try:
        return mapping.get(key)
    except TypeError:
        return None
