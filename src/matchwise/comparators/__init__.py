"""Built-in comparators for structural pattern leaves."""

from .base import Comparator, is_comparator
from .number import NumberComparator, number
from .predicate import PredicateComparator, where
from .string import StringComparator, string

__all__ = [
    "Comparator",
    "NumberComparator",
    "PredicateComparator",
    "StringComparator",
    "is_comparator",
    "number",
    "string",
    "where",
]
