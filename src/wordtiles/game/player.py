"""Player — name, rack, score and last error, tagged with who controls it."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from wordtiles.game.tiles import RACK_SIZE, Tile, rack_letters


class Control(Enum):
    HUMAN = "human"
    AUTOMATED = "automated"


@dataclass
class Player:
    name: str
    control: Control = Control.HUMAN
    rack: list[Tile] = field(default_factory=list)
    score: int = 0
    last_error: str | None = None

    @property
    def is_automated(self) -> bool:
        return self.control is Control.AUTOMATED

    @property
    def letters(self) -> list[str]:
        return rack_letters(self.rack)

    def draw_tiles(self, bag: list[Tile], count: int) -> int:
        """Draw up to ``count`` tiles from the front of ``bag``.

        Never fills past a full rack and stops when the bag is empty.
        Returns the number of tiles drawn.
        """
        n = max(0, min(count, RACK_SIZE - len(self.rack), len(bag)))
        self.rack.extend(bag[:n])
        del bag[:n]
        return n

    def has_letters(self, letters: str) -> bool:
        """True if the rack holds every letter, matched exactly (no blanks)."""
        available = [t.letter for t in self.rack if not t.is_blank]
        for ch in letters.upper():
            if ch not in available:
                return False
            available.remove(ch)
        return True

    def remove_letters(self, letters: str) -> list[Tile]:
        """Remove one exact tile per letter. Call only after ``has_letters``."""
        removed: list[Tile] = []
        for ch in letters.upper():
            for i, tile in enumerate(self.rack):
                if not tile.is_blank and tile.letter == ch:
                    removed.append(self.rack.pop(i))
                    break
        return removed
