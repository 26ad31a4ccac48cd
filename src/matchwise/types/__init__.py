"""Shared type aliases for Matchwise."""

from .common import (
    CaseKey,
    CaseResolver,
    Context,
    ContextMapper,
    MergeDelegate,
    Predicate,
    Selector,
    StatePicker,
)

__all__ = [
    "CaseKey",
    "CaseResolver",
    "Context",
    "ContextMapper",
    "MergeDelegate",
    "Predicate",
    "Selector",
    "StatePicker",
]
