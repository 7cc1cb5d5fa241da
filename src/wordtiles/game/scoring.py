"""Scoring — main-word score with one-shot premiums and the bingo bonus."""

from __future__ import annotations

from collections.abc import Collection

from wordtiles.game.board import Board, line_cells
from wordtiles.game.tiles import RACK_SIZE, letter_value

BINGO_BONUS = 50


def score_word(
    board: Board,
    word: str,
    row: int,
    col: int,
    horizontal: bool,
    blank_positions: Collection[int] = (),
) -> int:
    """Score ``word`` as if laid at (row, col) on the current board.

    Must be called before the tiles are placed. Premiums apply only to
    squares that are still empty, so a premium is used up the first time
    its square is filled. Letters at ``blank_positions`` are worth 0.
    Placing a full rack earns the bingo bonus after the word multiplier.
    """
    total = 0
    word_mult = 1
    placed = 0

    for i, r, c, letter in line_cells(word.upper(), row, col, horizontal):
        sq = board.square(r, c)
        if sq.tile is not None and sq.tile.is_blank:
            lv = 0
        else:
            lv = 0 if i in blank_positions else letter_value(letter)

        if not sq.has_tile:
            placed += 1
            lv *= sq.bonus.letter_multiplier
            word_mult *= sq.bonus.word_multiplier

        total += lv

    total *= word_mult
    if placed == RACK_SIZE:
        total += BINGO_BONUS
    return total
