"""Layered context storage for one evaluator and its branches."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from matchwise.types.common import Context, MergeDelegate


class ContextStack:
    """Ordered context layers; the bottom layer is the root context.

    The root layer keeps the caller's object as-is so an untouched evaluator
    hands it back unchanged. Every mutation stores a new dict.
    """

    def __init__(self, root: Context | None = None) -> None:
        self._origin: Context = root if root is not None else {}
        self._layers: list[Context] = [self._origin]

    @property
    def depth(self) -> int:
        """Number of active layers (always at least one)."""
        return len(self._layers)

    @property
    def origin(self) -> Context:
        """Context originally supplied by the caller (``{}`` when none)."""
        return self._origin

    def current(self) -> Context:
        return self._layers[-1]

    def parent(self) -> Context:
        """Layer below the top, or the original root context at depth one."""
        if len(self._layers) == 1:
            return self._origin
        return self._layers[-2]

    def extend(self, delta: Mapping[str, Any] | None) -> None:
        """Shallow-merge *delta* over the top layer; ``None`` is ignored."""
        if delta is None:
            return
        self._layers[-1] = {**self._layers[-1], **delta}

    def replace(self, context: Context | None) -> None:
        self._layers[-1] = context if context is not None else {}

    def push(self, initial: Context | None = None) -> None:
        """Open a layer seeded with *initial* or a copy of the current top."""
        self._layers.append(initial if initial is not None else dict(self._layers[-1]))

    def pop(self, merge: MergeDelegate | None = None) -> Context:
        """Drop the top layer and return it.

        With *merge*, ``merge(removed, parent)`` replaces the exposed parent.
        """
        if len(self._layers) == 1:
            raise IndexError("cannot pop the root context layer")
        removed = self._layers.pop()
        if merge is not None:
            self._layers[-1] = merge(removed, self._layers[-1])
        return removed

    def write_parent(self, context: Context) -> None:
        """Overwrite the layer directly below the top."""
        if len(self._layers) == 1:
            raise IndexError("root context layer has no parent")
        self._layers[-2] = context
