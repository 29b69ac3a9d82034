"""Pytest configuration and fixtures."""

import pytest
import tempfile
import json
from pathlib import Path

from safejson import SafeNode


SAMPLE_DOCUMENT = {
    "key_one": "value_one",
    "key_two": 123,
    "key_three": "2025-06-24",
    "key_four": None,
    "key_five": 54.321,
    "key_array": [
        {"subkey": "a", "value": 10},
        {"subkey": "b", "value": 20},
        {"different_subkey": "prova"}
    ],
    "boolean_true": True,
    "boolean_false": "false",
    "empty_obj": {},
    "empty_arr": []
}


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_json_text():
    """Sample document as pretty-printed JSON text."""
    return json.dumps(SAMPLE_DOCUMENT, indent=2)


@pytest.fixture
def sample_root(sample_json_text):
    """Parsed sample document."""
    return SafeNode.parse(sample_json_text)


@pytest.fixture
def sample_file(temp_dir, sample_json_text):
    """Sample document written to disk."""
    path = temp_dir / "sample.json"
    path.write_text(sample_json_text, encoding="utf-8")
    return path
