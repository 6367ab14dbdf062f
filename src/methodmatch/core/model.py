"""In-memory instruction model consumed by the matcher.

A decoded binary is represented as modules -> types -> methods -> instructions.
The matcher only reads these objects; it never mutates them.
"""

from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Instruction:
    """A single instruction. Only ``opcode`` takes part in matching.

    Attributes:
        opcode: Operation-kind identifier (e.g. "ldarg.0", "call").
        operand: Decoded operand, carried for display only.
    """

    opcode: Hashable
    operand: Any = None


@dataclass
class MethodBody:
    """Ordered instruction sequence implementing a method."""

    instructions: list[Instruction] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.instructions)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def opcodes(self) -> tuple[Hashable, ...]:
        """Return the opcodes of the body in order."""
        return tuple(instruction.opcode for instruction in self.instructions)

    @classmethod
    def from_opcodes(cls, opcodes: Iterable[Hashable]) -> "MethodBody":
        """Build a body from bare opcodes, without operands."""
        return cls([Instruction(opcode) for opcode in opcodes])


@dataclass
class Method:
    """A method declared inside a type.

    Attributes:
        name: Method name.
        body: Instruction body, or None for abstract/extern methods.
        owner: Full name of the declaring type ("" when detached).
    """

    name: str
    body: MethodBody | None = None
    owner: str = ""

    @property
    def has_body(self) -> bool:
        return self.body is not None

    @property
    def full_name(self) -> str:
        if not self.owner:
            return self.name
        return f"{self.owner}::{self.name}"


@dataclass
class TypeDef:
    """A type with its direct methods and nested types."""

    name: str
    methods: list[Method] = field(default_factory=list)
    nested_types: list["TypeDef"] = field(default_factory=list)


@dataclass
class Module:
    """A module owning top-level types."""

    name: str
    types: list[TypeDef] = field(default_factory=list)


def iter_types(types: Iterable[TypeDef]) -> Iterator[TypeDef]:
    """Flatten a type tree depth-first, parents before their nested types.

    Args:
        types: Top-level types to walk.

    Yields:
        Every type reachable from ``types``.
    """
    for type_def in types:
        yield type_def
        yield from iter_types(type_def.nested_types)


def iter_methods(module: Module) -> Iterator[Method]:
    """Yield every method of a module, nested types included."""
    for type_def in iter_types(module.types):
        yield from type_def.methods


def find_method(module: Module, full_name: str) -> Method:
    """Look up a method by its full name (``Owner::Name``).

    Raises:
        ValueError: If no method in the module has that name.
    """
    for method in iter_methods(module):
        if method.full_name == full_name:
            return method
    raise ValueError(f"Method not found in module {module.name}: {full_name}")
