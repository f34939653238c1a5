"""
Shared fixtures for the module tests.
"""
import numpy as np
import pytest

from modules import FreeModule, Submodule
from registry import ParentRegistry
from rings import ZZ, GF


@pytest.fixture
def Z():
    return ZZ


@pytest.fixture
def F7():
    return GF(7, cached=False)


@pytest.fixture
def registry():
    return ParentRegistry()


@pytest.fixture
def rng():
    return np.random.default_rng(20181017)


@pytest.fixture
def F():
    """A free module Z^2 that no other test shares."""
    return FreeModule(ZZ, 2, cached=False)


@pytest.fixture
def A(F):
    return Submodule(F, [[2, 0], [0, 4]])


@pytest.fixture
def B(F):
    return Submodule(F, [[3, 0], [0, 6]])


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "invariant: algebraic invariant checked on random modules")
