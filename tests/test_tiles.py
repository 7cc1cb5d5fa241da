"""Tests for tiles and the tile bag."""

import random
from collections import Counter

import pytest

from wordtiles.game.tiles import (
    LETTER_VALUES,
    TILE_DISTRIBUTION,
    Tile,
    create_full_bag,
    letter_value,
    rack_letters,
)


class TestTile:
    def test_of_uses_letter_value(self):
        assert Tile.of("q") == Tile("Q", 10)

    def test_blank_scores_zero(self):
        blank = Tile.blank()
        assert blank.is_blank is True
        assert blank.points == 0

    def test_blank_with_points_rejected(self):
        with pytest.raises(ValueError):
            Tile("?", 3, is_blank=True)

    def test_bound_blank_shows_letter_but_stays_blank(self):
        bound = Tile.blank().bound_to("z")
        assert bound.letter == "Z"
        assert bound.is_blank is True
        assert bound.points == 0

    def test_only_blanks_can_be_bound(self):
        with pytest.raises(ValueError):
            Tile.of("A").bound_to("B")

    def test_tiles_are_immutable(self):
        t = Tile.of("A")
        with pytest.raises(AttributeError):
            t.letter = "B"


class TestLetterValues:
    @pytest.mark.parametrize("letters,value", [
        ("AEIOULNSTR", 1), ("DG", 2), ("BCMP", 3), ("FHVWY", 4),
        ("K", 5), ("JX", 8), ("QZ", 10),
    ])
    def test_standard_values(self, letters, value):
        for ch in letters:
            assert LETTER_VALUES[ch] == value

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            LETTER_VALUES["A"] = 5

    def test_unknown_and_blank_are_zero(self):
        assert letter_value("?") == 0
        assert letter_value("é") == 0


class TestBag:
    def test_full_bag_has_100_tiles(self):
        assert len(create_full_bag()) == 100

    def test_distribution_matches(self):
        bag = create_full_bag()
        counts = Counter(t.letter for t in bag if not t.is_blank)
        assert dict(counts) == dict(TILE_DISTRIBUTION)
        assert sum(1 for t in bag if t.is_blank) == 2

    def test_shuffle_is_seeded(self):
        bag1 = create_full_bag(random.Random(7))
        bag2 = create_full_bag(random.Random(7))
        assert bag1 == bag2
        assert bag1 != create_full_bag()

    def test_rack_letters_shows_blanks(self):
        assert rack_letters([Tile.of("A"), Tile.blank()]) == ["A", "?"]
