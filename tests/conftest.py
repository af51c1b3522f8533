# tests/conftest.py
from __future__ import annotations

from importlib.util import find_spec

import pytest

from combinum import runtime
from combinum.cache import FactorialCache

HAS_GMPY2 = find_spec("gmpy2") is not None

needs_gmpy2 = pytest.mark.skipif(not HAS_GMPY2, reason="gmpy2 not installed")

# Backends that go through the factorial cache
CACHING_BACKENDS = ["decimal", "native"]
ALL_BACKENDS = [pytest.param("gmpy2", marks=needs_gmpy2), *CACHING_BACKENDS]


@pytest.fixture(autouse=True)
def _fresh_runtime():
    """Each test starts from default settings."""
    runtime.reset()
    yield
    runtime.reset()


@pytest.fixture
def cache() -> FactorialCache:
    return FactorialCache()


@pytest.fixture
def empty_cache() -> FactorialCache:
    return FactorialCache(seed=False)
