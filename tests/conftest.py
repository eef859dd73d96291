"""
Pytest configuration and shared fixtures for the sparse Merkle tree tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

import importlib

_trees = importlib.import_module("fixtures.trees")

CountingHasher = _trees.CountingHasher
make_tree = _trees.make_tree
make_value = _trees.make_value

from smt.config.runtime import set_default_config
from smt.crypto.field import GoldilocksField
from smt.crypto.hashing import Sha256Hasher


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def hasher():
    """Provide the default SHA-256 hasher."""
    return Sha256Hasher()


@pytest.fixture
def field():
    """Provide the Goldilocks field."""
    return GoldilocksField()


@pytest.fixture
def counting_hasher():
    """Provide a hasher that counts its calls."""
    return CountingHasher()


@pytest.fixture
def tree():
    """Provide an empty height-4 tree."""
    return make_tree(height=4)


@pytest.fixture
def small_tree():
    """Provide an empty height-2 tree."""
    return make_tree(height=2)


@pytest.fixture(autouse=True)
def _reset_default_config():
    """Keep the process-wide default config from leaking between tests."""
    set_default_config(None)
    yield
    set_default_config(None)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
