"""Load a decoded module dump (JSON) into the in-memory instruction model.

Expected format:
    {"name": "app.dll",
     "types": [{"name": "Ns.Foo",
                "methods": [{"name": "Bar", "body": ["ldarg.0", "ret"]},
                            {"name": "Abs", "body": null}],
                "nested_types": [...]}]}

Body items are opcode strings or {"opcode": ..., "operand": ...} objects.
Nested type owners are joined with "/" (e.g. "Ns.Foo/Inner").
"""

from pathlib import Path
from typing import Any
import json
import logging

from pydantic import BaseModel, Field, ValidationError

from methodmatch.core.model import Instruction, Method, MethodBody, Module, TypeDef, iter_methods

logger = logging.getLogger(__name__)


class InstructionSpec(BaseModel):
    opcode: str
    operand: Any = None


class MethodSpec(BaseModel):
    name: str
    body: list[str | InstructionSpec] | None = None


class TypeSpec(BaseModel):
    name: str
    methods: list[MethodSpec] = Field(default_factory=list)
    nested_types: list["TypeSpec"] = Field(default_factory=list)


class ModuleSpec(BaseModel):
    name: str
    types: list[TypeSpec] = Field(default_factory=list)


def _to_instruction(item: str | InstructionSpec) -> Instruction:
    if isinstance(item, str):
        return Instruction(item)
    return Instruction(item.opcode, item.operand)


def _to_type(spec: TypeSpec, parent: str = "") -> TypeDef:
    full_name = f"{parent}/{spec.name}" if parent else spec.name
    methods = [
        Method(
            name=m.name,
            body=None if m.body is None else MethodBody([_to_instruction(i) for i in m.body]),
            owner=full_name,
        )
        for m in spec.methods
    ]
    nested = [_to_type(n, full_name) for n in spec.nested_types]
    return TypeDef(name=full_name, methods=methods, nested_types=nested)


def parse_module(data: dict) -> Module:
    """Convert a decoded JSON document into a Module.

    Raises:
        ValueError: If the document does not follow the module format.
    """
    try:
        spec = ModuleSpec.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid module data: {e}") from e

    return Module(name=spec.name, types=[_to_type(t) for t in spec.types])


def load_module(path: Path) -> Module:
    """Load a module dump from a JSON file.

    Args:
        path: Path to the JSON dump.

    Returns:
        The decoded Module.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or not a module dump.
    """
    if not path.exists():
        raise FileNotFoundError(f"Module file not found: {path}")

    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    module = parse_module(data)
    logger.info(f"Loaded module {module.name} with {sum(1 for _ in iter_methods(module))} methods")
    return module
