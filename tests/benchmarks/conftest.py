"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: ~100 leaves flat, ~1k leaves nested, ~10k leaves nested with
arrays.  Each tier provides a "near" pair (a handful of edits) and a "far"
pair (every leaf differs).
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_flat_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def _make_service(i: int, replicas: int) -> dict[str, Any]:
    return {
        "name": f"service-{i}",
        "replicas": replicas,
        "ports": [8000 + i, 9000 + i],
        "env": generate_flat_object(6, prefix=f"ENV_{i}"),
        "liveness": {"path": "/healthz", "period": 10, "enabled": True},
    }


def _make_nested(num_services: int, bump_every: int) -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate a pair of manifests; every ``bump_every``-th service changes."""
    left = {"services": [_make_service(i, 1) for i in range(num_services)]}
    right = {
        "services": [
            _make_service(i, 2 if i % bump_every == 0 else 1) for i in range(num_services)
        ]
    }
    return left, right


def _make_far(num_keys: int) -> tuple[dict[str, Any], dict[str, Any]]:
    left = {f"k{i}": i for i in range(num_keys)}
    right = {f"k{i}": -i - 1 for i in range(num_keys)}
    return left, right


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_small_near() -> tuple[dict[str, Any], dict[str, Any]]:
    """100-key flat pair with one changed value."""
    left = generate_flat_object(100)
    right = dict(left, key_50="changed")
    return left, right


@pytest.fixture
def pair_small_far() -> tuple[dict[str, Any], dict[str, Any]]:
    """100-key flat pair where every value differs."""
    return _make_far(100)


@pytest.fixture
def pair_medium_near() -> tuple[dict[str, Any], dict[str, Any]]:
    """~1k leaves: 80 services, every 20th edited."""
    return _make_nested(80, 20)


@pytest.fixture
def pair_large_near() -> tuple[dict[str, Any], dict[str, Any]]:
    """~10k leaves: 800 services, every 50th edited."""
    return _make_nested(800, 50)


@pytest.fixture
def pair_large_far() -> tuple[dict[str, Any], dict[str, Any]]:
    """~10k leaves: 800 services, all edited."""
    return _make_nested(800, 1)
