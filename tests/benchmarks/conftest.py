"""Deterministic tree generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 10-key flat, ~1000-node nested, and a 200-level deep chain.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_flat_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def _make_nested_1000() -> dict[str, Any]:
    """Generate a nested document of roughly 1000 nodes.

    Structure: 10 sections x 10 records x (8 scalar fields + 1 tag array).
    Exactly one leaf holds the string "needle".
    """
    doc: dict[str, Any] = {}
    for i in range(10):
        section: dict[str, Any] = {}
        for j in range(10):
            record: dict[str, Any] = {f"field_{k}": f"value_{i}_{j}_{k}" for k in range(8)}
            record["tags"] = [f"tag_{i}", f"tag_{j}", i * j]
            section[f"record_{j}"] = record
        doc[f"section_{i}"] = section
    doc["section_9"]["record_9"]["field_7"] = "needle"
    return doc


def _make_deep_chain(depth: int) -> dict[str, Any]:
    """Generate ``{"level": {"level": ... {"leaf": "needle"}}}`` of the given depth."""
    node: dict[str, Any] = {"leaf": "needle"}
    for _ in range(depth):
        node = {"level": [node]}
    return node


@pytest.fixture
def doc_10key() -> dict[str, Any]:
    """10-key flat document."""
    return generate_flat_object(10)


@pytest.fixture
def doc_1000node() -> dict[str, Any]:
    """~1000-node nested document with a single deep match."""
    return _make_nested_1000()


@pytest.fixture
def doc_deep_chain() -> dict[str, Any]:
    """Chain 200 object/array pairs deep, ending in a matching leaf."""
    return _make_deep_chain(200)
