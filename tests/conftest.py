import pytest

from chromarand.sampling.source import NumpyRandom
from .utils import MidpointRandom


@pytest.fixture
def rng():
    return NumpyRandom(20240611)


@pytest.fixture
def midpoint():
    return MidpointRandom()
