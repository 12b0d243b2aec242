"""Shared pytest fixtures for Go Fish tests."""

from random import Random

import pytest

from go_fish.cards import Deck


@pytest.fixture
def standard_deck() -> Deck:
    return Deck.standard()


@pytest.fixture
def rng() -> Random:
    """Provide a reproducible random source."""
    return Random(42)


@pytest.fixture(params=[0, 1, 7, 1234])
def seed(request) -> int:
    """Parametrize over a few seeds."""
    return request.param
