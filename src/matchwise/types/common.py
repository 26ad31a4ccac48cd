"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from typing import Any, TypeAlias

Context: TypeAlias = Mapping[str, Any]
CaseKey: TypeAlias = Hashable

Predicate: TypeAlias = Callable[[Context], Any]
Selector: TypeAlias = Callable[[Context], Any]
ContextMapper: TypeAlias = Callable[[Context], Context | None]
MergeDelegate: TypeAlias = Callable[[Context, Context], Context]
CaseResolver: TypeAlias = Callable[[Context, CaseKey], Any]
StatePicker: TypeAlias = Callable[[Context, CaseKey | None], Any]
