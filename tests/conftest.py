# tests/conftest.py
"""
Root conftest - shared fixtures for all implkit tests.

Test Tiers:
===========
- tier1: Pure logic, no I/O (<5s)
         Run: pytest -m tier1
- tier2: Touches the filesystem, threads or global logging state
         Run: pytest -m "tier1 or tier2"

Every test gets its own Registry through the ``registry`` fixture; the
process-wide default registry is reset around each test so nothing leaks.
"""

from __future__ import annotations

from typing import Callable

import pytest

from implkit.core.registry import Registry
from implkit.runtime import reset_registry


@pytest.fixture
def registry() -> Registry:
    """A fresh, isolated registry."""
    return Registry()


@pytest.fixture
def make_type() -> Callable[[], type]:
    """Factory for fresh marker types (a new class per call)."""
    counter = {"n": 0}

    def _make() -> type:
        counter["n"] += 1
        return type(f"Type{counter['n']}", (), {})

    return _make


@pytest.fixture(autouse=True)
def _isolated_default_registry():
    """Reset the process-wide registry before and after each test."""
    reset_registry()
    yield
    reset_registry()
