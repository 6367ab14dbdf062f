"""Shared fixtures for command tests."""

import json

from click.testing import CliRunner
import pytest

REFERENCE_BODY = ["ldarg.0", "ldfld", "ldc.i4", "add", "stloc.0", "ldloc.0", "ret"]


@pytest.fixture
def runner():
    """Create CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user configuration files out of the tests."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def reference_file(tmp_path):
    """Reference module dump."""
    path = tmp_path / "reference.json"
    data = {
        "name": "original.dll",
        "types": [
            {
                "name": "Calc",
                "methods": [
                    {"name": "Compute", "body": REFERENCE_BODY},
                    {"name": "Abstract", "body": None},
                ],
            }
        ],
    }
    path.write_text(json.dumps(data))
    return path


@pytest.fixture
def candidate_file(tmp_path):
    """Obfuscated module dump with an exact copy, a nested copy and a noisy copy."""
    path = tmp_path / "candidate.json"
    noisy = REFERENCE_BODY[:3] + ["nop"] + REFERENCE_BODY[3:]
    data = {
        "name": "obfuscated.dll",
        "types": [
            {
                "name": "a",
                "methods": [
                    {"name": "b", "body": REFERENCE_BODY},
                    {"name": "c", "body": ["newobj", "throw"]},
                ],
                "nested_types": [
                    {"name": "d", "methods": [{"name": "e", "body": REFERENCE_BODY}]},
                ],
            },
            {
                "name": "f",
                "methods": [{"name": "g", "body": noisy}, {"name": "h", "body": None}],
            },
        ],
    }
    path.write_text(json.dumps(data))
    return path
