"""
Pytest configuration and shared fixtures for not-me tests.
"""

import sys
from pathlib import Path

import pytest

# Ensure src is in path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from not_me import equals, number, object, string


@pytest.fixture
def user_schema():
    """Object schema with required, optional and nested fields."""
    return object(
        {
            "name": string().defined(),
            "age": number(),
            "role": equals(["admin", "member"]).defined(),
            "address": object(
                {
                    "city": string().defined(),
                    "zip": string(),
                }
            ),
        }
    ).defined()


@pytest.fixture
def schema_file(tmp_path):
    """Write a YAML schema definition and return its path."""

    def _write(content: str, name: str = "schema.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
