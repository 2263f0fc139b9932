import pytest

from tramp.builtins import global_environment
from tramp.interpreter import Interpreter


@pytest.fixture(autouse=True)
def _no_prelude(monkeypatch):
    # Interpreter() reads TRAMP_PRELUDE_PATH; keep tests independent of the shell.
    monkeypatch.delenv("TRAMP_PRELUDE_PATH", raising=False)


@pytest.fixture
def env():
    """Fresh global environment with the primitives loaded."""
    return global_environment()


@pytest.fixture
def interp():
    return Interpreter()
