"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest

# (value, wire bytes) pairs that must hold in both directions.
GOLDEN_SAMPLES: list[tuple[Any, bytes]] = [
    (None, b"N"),
    (1, b"i\x01\x00\x00\x00"),
    (1000000, b"i@B\x0f\x00"),
    (-123456, b"i\xc0\x1d\xfe\xff"),
    (1.23, b"g\xae\x47\xe1\x7a\x14\xae\xf3\x3f"),
    (-625e-4, b"g\x00\x00\x00\x00\x00\x00\xb0\xbf"),
    (True, b"T"),
    (False, b"F"),
    (b"Hello world", b"s\x0b\x00\x00\x00Hello world"),
    ("Résumé", b"u\x08\x00\x00\x00R\xc3\xa9sum\xc3\xa9"),
    (
        [1, 2, 3],
        b"[\x03\x00\x00\x00i\x01\x00\x00\x00i\x02\x00\x00\x00i\x03\x00\x00\x00",
    ),
    (
        {"This": 4, "is": 0, "a": b"test"},
        b"{u\x04\x00\x00\x00Thisi\x04\x00\x00\x00u\x01\x00\x00\x00as\x04\x00\x00\x00test"
        b"u\x02\x00\x00\x00isi\x00\x00\x00\x000",
    ),
    # Limits of 32-bit integers.
    ([0x7FFFFFFF, -0x80000000], b"[\x02\x00\x00\x00i\xff\xff\xff\x7fi\x00\x00\x00\x80"),
]


@pytest.fixture
def golden_samples() -> list[tuple[Any, bytes]]:
    """Values paired with their exact wire encoding."""
    return GOLDEN_SAMPLES


@pytest.fixture
def nested_value() -> dict[str, Any]:
    """A document exercising every supported host type."""
    return {
        "id": 42,
        "name": "auv-1",
        "depth_m": 152.75,
        "active": True,
        "payload": b"\x00\x01\xff",
        "waypoints": [[1, 2], [3.5, -4.25]],
        "meta": {"owner": None, "tags": ["survey", "night"]},
    }
