"""Shared test fixtures for wordtiles."""

import random

import pytest

from wordtiles.game.dictionary import WordList
from wordtiles.game.engine import GameModel
from wordtiles.game.player import Control, Player

WORDS = [
    "CAT", "COT", "DOG", "AT", "TA", "TO", "AX", "ACT",
    "SENATOR", "TEA", "EAT", "NOTE", "ON",
]


@pytest.fixture
def dictionary():
    return WordList(WORDS)


@pytest.fixture
def game(dictionary):
    g = GameModel(
        [Player("Alice"), Player("Bob")],
        dictionary,
        rng=random.Random(42),
    )
    return g


@pytest.fixture
def bot_game(dictionary):
    g = GameModel(
        [Player("Bot", Control.AUTOMATED), Player("Alice")],
        dictionary,
        rng=random.Random(42),
    )
    return g


@pytest.fixture
def tmp_output(tmp_path):
    """Provide a temporary output directory for test runs."""
    return tmp_path / "output"
