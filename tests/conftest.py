"""
Pytest configuration and fixtures for bloomsnake tests.
"""

import logging

import pytest

from helpers import make_snake, make_state


@pytest.fixture
def lone_snake_state():
    """11x11 board, one length-3 snake with its head on the center cell."""
    you = make_snake("me", [(5, 5), (5, 4), (5, 3)])
    return make_state(you)


@pytest.fixture
def weaker_enemy_state():
    """Length-5 snake with a length-3 enemy head directly to its right."""
    you = make_snake("me", [(5, 5), (5, 4), (5, 3), (5, 2), (5, 1)])
    enemy = make_snake("enemy", [(6, 5), (7, 5), (8, 5)])
    return make_state(you, others=[enemy])


@pytest.fixture
def hungry_state():
    """Low-health snake left of center with food two cells further left."""
    you = make_snake("me", [(3, 5), (3, 4), (3, 3)], health=10)
    return make_state(you, food=[(1, 5)])


@pytest.fixture(autouse=True)
def reset_bloomsnake_logger():
    """Undo handler changes made by setup_logger so caplog keeps working."""
    yield
    logger = logging.getLogger("bloomsnake")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
