"""Declarative decision tables compiled into matcher chains."""

from .compiler import CaseChain, CompiledCase, DecisionTable, compile_table
from .loader import load_table
from .schema import validate_table

__all__ = [
    "CaseChain",
    "CompiledCase",
    "DecisionTable",
    "compile_table",
    "load_table",
    "validate_table",
]
