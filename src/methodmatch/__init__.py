"""Method identity recovery across two builds of compiled code."""

from methodmatch.analysis import (
    EXACT,
    ExactMode,
    FuzzyMode,
    align,
    compare_exact,
    compare_fuzzy,
    find_similar,
)
from methodmatch.core import Instruction, Method, MethodBody, Module, TypeDef

__version__ = "0.1.0"

__all__ = [
    "EXACT",
    "ExactMode",
    "FuzzyMode",
    "Instruction",
    "Method",
    "MethodBody",
    "Module",
    "TypeDef",
    "align",
    "compare_exact",
    "compare_fuzzy",
    "find_similar",
]
