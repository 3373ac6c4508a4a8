"""Pytest configuration and fixtures."""

import random
from collections.abc import Iterator

import pytest
import structlog

from tests.helpers.constants import RANDOM_SEED


@pytest.fixture
def rng() -> random.Random:
    """Return a deterministically seeded random source."""
    return random.Random(RANDOM_SEED)


@pytest.fixture
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after a test that configures logging."""
    yield
    structlog.reset_defaults()
