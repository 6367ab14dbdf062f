"""Tests for loading module dumps."""

import json

import pytest

from methodmatch.core.model_loader import load_module, parse_module


@pytest.fixture
def module_data():
    """Module dump with a nested type, operands and an abstract method."""
    return {
        "name": "app.dll",
        "types": [
            {
                "name": "Ns.Foo",
                "methods": [
                    {"name": "Bar", "body": ["ldarg.0", {"opcode": "ldc.i4", "operand": 7}, "ret"]},
                    {"name": "Abs", "body": None},
                ],
                "nested_types": [
                    {"name": "Inner", "methods": [{"name": "Baz", "body": []}]},
                ],
            }
        ],
    }


class TestParseModule:
    """Test conversion of decoded JSON."""

    def test_structure(self, module_data):
        """Test types, nested types and methods are converted."""
        module = parse_module(module_data)
        assert module.name == "app.dll"
        foo = module.types[0]
        assert foo.name == "Ns.Foo"
        assert [m.name for m in foo.methods] == ["Bar", "Abs"]
        assert foo.nested_types[0].name == "Ns.Foo/Inner"

    def test_instructions(self, module_data):
        """Test string and object instructions."""
        bar = parse_module(module_data).types[0].methods[0]
        assert bar.body.opcodes() == ("ldarg.0", "ldc.i4", "ret")
        assert bar.body[1].operand == 7
        assert bar.full_name == "Ns.Foo::Bar"

    def test_absent_and_empty_bodies(self, module_data):
        """Test null body means no body, [] means an empty body."""
        module = parse_module(module_data)
        assert not module.types[0].methods[1].has_body
        inner_method = module.types[0].nested_types[0].methods[0]
        assert inner_method.has_body
        assert len(inner_method.body) == 0
        assert inner_method.full_name == "Ns.Foo/Inner::Baz"

    def test_invalid_data(self):
        """Test malformed documents raise ValueError."""
        with pytest.raises(ValueError, match="Invalid module data"):
            parse_module({"types": []})


class TestLoadModule:
    """Test loading from files."""

    def test_load(self, tmp_path, module_data):
        """Test a dump is read from disk."""
        path = tmp_path / "app.json"
        path.write_text(json.dumps(module_data))
        assert load_module(path).types[0].name == "Ns.Foo"

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_module(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        """Test a non-JSON file raises ValueError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_module(path)
