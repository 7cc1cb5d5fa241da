"""Tiles and the tile bag — standard 100-tile economy with two blanks."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from types import MappingProxyType

RACK_SIZE = 7
BLANK = "?"

# Tile point values (blank = 0, handled separately)
LETTER_VALUES: MappingProxyType[str, int] = MappingProxyType({
    "A": 1, "B": 3, "C": 3, "D": 2, "E": 1, "F": 4, "G": 2, "H": 4,
    "I": 1, "J": 8, "K": 5, "L": 1, "M": 3, "N": 1, "O": 1, "P": 3,
    "Q": 10, "R": 1, "S": 1, "T": 1, "U": 1, "V": 4, "W": 4, "X": 8,
    "Y": 4, "Z": 10,
})

# Standard distribution: letter -> count
TILE_DISTRIBUTION: MappingProxyType[str, int] = MappingProxyType({
    "A": 9, "B": 2, "C": 2, "D": 4, "E": 12, "F": 2, "G": 3, "H": 2,
    "I": 9, "J": 1, "K": 1, "L": 4, "M": 2, "N": 6, "O": 8, "P": 2,
    "Q": 1, "R": 6, "S": 4, "T": 6, "U": 4, "V": 2, "W": 2, "X": 1,
    "Y": 2, "Z": 1,
})
BLANK_COUNT = 2


@dataclass(frozen=True)
class Tile:
    """A single tile. Blanks always score 0, whatever letter they show."""

    letter: str
    points: int
    is_blank: bool = False

    def __post_init__(self) -> None:
        if self.is_blank and self.points != 0:
            raise ValueError("A blank tile must be worth 0 points")

    @classmethod
    def of(cls, letter: str) -> Tile:
        letter = letter.upper()
        return cls(letter, LETTER_VALUES[letter])

    @classmethod
    def blank(cls) -> Tile:
        """An unbound blank, as it sits in the bag or a rack."""
        return cls(BLANK, 0, is_blank=True)

    def bound_to(self, letter: str) -> Tile:
        """Return this blank showing ``letter``; still scores 0."""
        if not self.is_blank:
            raise ValueError(f"Only blanks can be rebound, not {self.letter!r}")
        return replace(self, letter=letter.upper())

    def __str__(self) -> str:
        return self.letter


def letter_value(letter: str) -> int:
    """Point value of a letter. Unknown characters and blanks are 0."""
    return LETTER_VALUES.get(letter.upper(), 0)


def create_full_bag(rng: random.Random | None = None) -> list[Tile]:
    """Create the standard 100-tile bag, shuffled with ``rng`` if given."""
    bag: list[Tile] = []
    for letter, count in TILE_DISTRIBUTION.items():
        bag.extend(Tile.of(letter) for _ in range(count))
    bag.extend(Tile.blank() for _ in range(BLANK_COUNT))
    if rng is not None:
        rng.shuffle(bag)
    return bag


def rack_letters(rack: list[Tile]) -> list[str]:
    """Letters of a rack with blanks shown as ``?``."""
    return [BLANK if t.is_blank else t.letter for t in rack]
