import pytest

from flowlisp.types.scope import INITIAL_SCOPE
from flowlisp.interpreter import Interpreter


@pytest.fixture
def scope():
    """The seeded scope every session starts from."""
    return INITIAL_SCOPE


@pytest.fixture
def interp():
    """A fresh interpreter session for each test."""
    return Interpreter()


@pytest.fixture(autouse=True)
def _default_depth(monkeypatch):
    # Tests that need a different limit set it explicitly.
    monkeypatch.delenv("FLOW_MAX_DEPTH", raising=False)
