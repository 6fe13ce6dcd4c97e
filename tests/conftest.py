import pytest

from skeme.builtin.env_builtin import get_base_environment
from skeme.interpreter import Interpreter
from skeme.types.environment import Environment


@pytest.fixture
def env():
    """Fresh session frame on top of the shared base environment."""
    return Environment(outer=get_base_environment())


@pytest.fixture
def interp():
    return Interpreter()
