"""Comparator interface used as a leaf inside structural patterns."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Comparator(ABC):
    """A single-value check placed where a pattern expects a literal."""

    @abstractmethod
    def test(self, value: Any) -> bool:
        """Return whether *value* satisfies this comparator."""


def is_comparator(value: Any) -> bool:
    return isinstance(value, Comparator)
