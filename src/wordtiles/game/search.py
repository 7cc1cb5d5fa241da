"""Greedy single-ply move search for automated players.

Tries every dictionary word the rack can spell at every origin and both
orientations, and keeps the highest-scoring legal placement. Enumeration
order is dictionary order, then row-major origin, then horizontal before
vertical; a later move only wins with a strictly higher score.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from wordtiles.game.board import Board
from wordtiles.game.layout import CENTER, SIZE
from wordtiles.game.scoring import score_word
from wordtiles.game.tiles import BLANK, Tile, rack_letters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Move:
    word: str
    row: int
    col: int
    horizontal: bool
    score: int
    blank_positions: frozenset[int] = frozenset()

    @property
    def direction(self) -> str:
        return "H" if self.horizontal else "V"


def can_form_word(word: str, rack: list[Tile]) -> bool:
    """True if the rack alone can spell ``word``, blanks filling the gaps."""
    counts = Counter(rack_letters(rack))
    for ch in word.upper():
        if counts[ch] > 0:
            counts[ch] -= 1
        elif counts[BLANK] > 0:
            counts[BLANK] -= 1
        else:
            return False
    return True


def _origins(first_move: bool) -> Iterable[tuple[int, int]]:
    if first_move:
        # Only the center origin can be tried on an empty board.
        yield CENTER
        return
    for r in range(SIZE):
        for c in range(SIZE):
            yield r, c


def find_best_move(
    board: Board,
    rack: list[Tile],
    words: Iterable[str],
    *,
    first_move: bool,
) -> Move | None:
    """Return the best legal move for ``rack``, or None if there is none."""
    best: Move | None = None
    candidates = 0

    for w in words:
        word = w.upper()
        if not can_form_word(word, rack):
            continue
        candidates += 1

        for r, c in _origins(first_move):
            for horizontal in (True, False):
                if not first_move and not board.touches_existing(word, r, c, horizontal):
                    continue
                result = board.can_place(word, r, c, horizontal, rack, first_move=first_move)
                if not result.legal:
                    continue
                points = score_word(board, word, r, c, horizontal, result.blank_positions)
                if best is None or points > best.score:
                    best = Move(word, r, c, horizontal, points, result.blank_positions)

    logger.debug(
        "Searched %d rack-feasible words; best=%s",
        candidates,
        f"{best.word}@({best.row},{best.col}){best.direction}={best.score}" if best else None,
    )
    return best
