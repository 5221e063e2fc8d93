# type: ignore
import pytest

from cowvm.runtime.tape import Tape
from cowvm.runtime.register import Register


@pytest.fixture
def tape():
    yield Tape()


@pytest.fixture
def register():
    yield Register()
