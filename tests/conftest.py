import pytest
from loguru import logger

from passgen.randomness import SeededRandomSource


@pytest.fixture(autouse=True)
def quiet_logging():
    """The CLI installs its own sink; drop it so it does not outlive capsys."""
    yield
    logger.remove()
    logger.disable("passgen")


@pytest.fixture
def rng():
    """Deterministic source so failures are reproducible."""
    return SeededRandomSource(1234)


@pytest.fixture(params=[0, 1, 7, 42, 2024])
def seeded(request):
    return SeededRandomSource(request.param)
