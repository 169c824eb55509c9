# tests/unit/conftest.py
"""
Tier markers for unit tests.

Tier 1 (every commit): pure logic, no I/O
Tier 2 (PR merge): filesystem, threads, global logging state
"""

from __future__ import annotations

import pytest


def pytest_collection_modifyitems(items):
    """Mark unit tests tier1 unless they match a tier2 pattern."""
    TIER2_PATTERNS = [
        "test_config",
        "test_logging",
        "test_thread_safety",
    ]

    for item in items:
        fspath = str(item.fspath)

        if "/unit/" not in fspath and "\\unit\\" not in fspath:
            continue

        has_tier = any(marker.name.startswith("tier") for marker in item.iter_markers())
        if has_tier:
            continue

        if any(pattern in fspath for pattern in TIER2_PATTERNS):
            item.add_marker(pytest.mark.tier2)
        else:
            item.add_marker(pytest.mark.tier1)
