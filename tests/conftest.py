"""Shared pytest fixtures."""

import pytest

from boxscorefinder.core.types import GameInfo
from tests.fakes import make_game


@pytest.fixture
def lakers_celtics_game() -> GameInfo:
    """Lakers at Celtics, NBA, 2024-01-15."""
    return make_game()
