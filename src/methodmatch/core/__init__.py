"""Instruction model, model loading and configuration."""

from methodmatch.core.model import (
    Instruction,
    Method,
    MethodBody,
    Module,
    TypeDef,
    find_method,
    iter_methods,
    iter_types,
)

__all__ = [
    "Instruction",
    "Method",
    "MethodBody",
    "Module",
    "TypeDef",
    "find_method",
    "iter_methods",
    "iter_types",
]
