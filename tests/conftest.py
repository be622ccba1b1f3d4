from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the src/ directory is importable when tests run from a checkout.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from modinha import Modinha  # noqa: E402


@pytest.fixture
def user_schema() -> dict:
    return {
        "name": {"type": "string", "required": True},
        "email": {"type": "string"},
        "role": {"default": "user", "enum": ["user", "admin"]},
        "hash": {"private": True},
        "prefs": {"properties": {
            "theme": {"default": "dark"},
            "alerts": {"properties": {"email": {"default": True}}},
        }},
    }


@pytest.fixture
def User(user_schema):
    return Modinha.define(user_schema, name="User")
