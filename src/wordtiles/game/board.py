"""Board — 15×15 grid of squares and the placement validator.

Placement rules:
- every letter must land on the board
- letters over occupied squares must match the tile already there
- letters over empty squares must come from the rack: exact tile first,
  then a blank
- the first word must cover the center square; every later word must
  overlap at least one tile already on the board
- a newly placed tile may not touch an existing tile on either side
  perpendicular to the word (cross-words are not formed)
"""

from __future__ import annotations

import copy
from collections.abc import Iterator

from wordtiles.game.base import MoveError, ValidationResult
from wordtiles.game.layout import CENTER, SIZE, Bonus, LayoutProvider, StandardLayout
from wordtiles.game.tiles import Tile


class Square:
    """One board cell. Its tile is set once and never replaced."""

    __slots__ = ("bonus", "_tile")

    def __init__(self, bonus: Bonus = Bonus.NONE) -> None:
        self.bonus = bonus
        self._tile: Tile | None = None

    @property
    def tile(self) -> Tile | None:
        return self._tile

    @property
    def has_tile(self) -> bool:
        return self._tile is not None

    def place(self, tile: Tile) -> None:
        if self._tile is not None:
            raise ValueError(f"Square already holds {self._tile.letter!r}")
        self._tile = tile

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Square):
            return NotImplemented
        return self.bonus is other.bonus and self._tile == other._tile

    def __str__(self) -> str:
        return self._tile.letter if self._tile is not None else "."


def line_cells(
    word: str, row: int, col: int, horizontal: bool
) -> Iterator[tuple[int, int, int, str]]:
    """Yield ``(index, row, col, letter)`` for each letter of ``word``."""
    for i, letter in enumerate(word):
        yield i, row + (0 if horizontal else i), col + (i if horizontal else 0), letter


class Board:
    """15×15 board with premium squares from a layout provider."""

    def __init__(self, layout: LayoutProvider | None = None) -> None:
        layout = layout or StandardLayout()
        bonuses = layout.bonuses()
        self.layout_name = layout.name
        self._grid: list[list[Square]] = [
            [Square(bonuses.get((r, c), Bonus.NONE)) for c in range(SIZE)]
            for r in range(SIZE)
        ]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        return 0 <= row < SIZE and 0 <= col < SIZE

    def square(self, row: int, col: int) -> Square:
        if not self.in_bounds(row, col):
            raise IndexError(f"({row},{col}) is off the board")
        return self._grid[row][col]

    def has_tile(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self._grid[row][col].has_tile

    def letter_at(self, row: int, col: int) -> str | None:
        if not self.has_tile(row, col):
            return None
        return self._grid[row][col].tile.letter

    @property
    def is_empty(self) -> bool:
        return not any(sq.has_tile for line in self._grid for sq in line)

    def touches_existing(self, word: str, row: int, col: int, horizontal: bool) -> bool:
        """True if any letter of the word lies on an occupied square."""
        return any(self.has_tile(r, c) for _, r, c, _ in line_cells(word, row, col, horizontal))

    def copy(self) -> Board:
        return copy.deepcopy(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def can_place(
        self,
        word: str,
        row: int,
        col: int,
        horizontal: bool,
        rack: list[Tile],
        *,
        first_move: bool,
        blank_letters: str | None = None,
    ) -> ValidationResult:
        """Check whether ``word`` may be laid at (row, col) from ``rack``.

        Does not modify the board or the rack. ``blank_letters``, when
        given, holds one declared letter per blank, in order; each blank
        used consumes one and shows the word's letter at its square.
        """
        word = word.upper()
        available = list(rack)
        declared = list(blank_letters.upper()) if blank_letters is not None else None
        new_positions: list[int] = []
        blank_positions: set[int] = set()
        covers_center = False
        overlaps = False

        for i, r, c, letter in line_cells(word, row, col, horizontal):
            if not self.in_bounds(r, c):
                return ValidationResult.reject(
                    MoveError.OUT_OF_BOUNDS,
                    f"'{word}' runs off the board at ({r},{c}).",
                )
            covers_center = covers_center or (r, c) == CENTER

            existing = self._grid[r][c].tile
            if existing is not None:
                if existing.letter != letter:
                    return ValidationResult.reject(
                        MoveError.CONFLICT_WITH_BOARD,
                        f"Board has '{existing.letter}' at ({r},{c}) "
                        f"but word needs '{letter}'.",
                    )
                overlaps = True
                continue

            new_positions.append(i)
            exact = _find_tile(available, letter)
            if exact is not None:
                available.pop(exact)
                continue

            blank = _find_blank(available)
            if blank is None:
                return ValidationResult.reject(
                    MoveError.INSUFFICIENT_TILES,
                    f"You don't have a '{letter}' for this word.",
                )
            if declared is not None:
                if not declared:
                    return ValidationResult.reject(
                        MoveError.MISSING_BLANK_ASSIGNMENT,
                        f"No blank letter declared for '{letter}' at position {i}.",
                    )
                declared.pop(0)
            available.pop(blank)
            blank_positions.add(i)

        if not new_positions:
            return ValidationResult.reject(
                MoveError.NO_NEW_TILES, "Must place at least one new tile."
            )

        if first_move and not covers_center:
            return ValidationResult.reject(
                MoveError.DISCONNECTED,
                "First move must cover the center square (row 7, col 7).",
            )
        if not first_move and not overlaps:
            return ValidationResult.reject(
                MoveError.DISCONNECTED,
                "Word must overlap a tile already on the board.",
            )

        for i, r, c, _ in line_cells(word, row, col, horizontal):
            if i not in new_positions:
                continue
            neighbours = ((r - 1, c), (r + 1, c)) if horizontal else ((r, c - 1), (r, c + 1))
            if any(self.has_tile(nr, nc) for nr, nc in neighbours):
                return ValidationResult.reject(
                    MoveError.ADJACENCY_VIOLATION,
                    f"New tile at ({r},{c}) would touch an existing tile.",
                )

        return ValidationResult(
            legal=True,
            new_positions=tuple(new_positions),
            blank_positions=frozenset(blank_positions),
        )

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def place(
        self,
        word: str,
        row: int,
        col: int,
        horizontal: bool,
        rack: list[Tile],
        *,
        first_move: bool,
        blank_letters: str | None = None,
    ) -> ValidationResult:
        """Validate, then move tiles from ``rack`` onto the board.

        Either every new tile is placed and removed from the rack, or
        nothing changes.
        """
        word = word.upper()
        result = self.can_place(
            word, row, col, horizontal, rack,
            first_move=first_move, blank_letters=blank_letters,
        )
        if not result.legal:
            return result

        remaining = list(rack)
        placements: list[tuple[Square, Tile]] = []
        for i, r, c, letter in line_cells(word, row, col, horizontal):
            if i not in result.new_positions:
                continue
            if i in result.blank_positions:
                idx = _find_blank(remaining)
            else:
                idx = _find_tile(remaining, letter)
            if idx is None:
                return ValidationResult.reject(
                    MoveError.INSUFFICIENT_TILES,
                    f"Rack changed while placing '{word}'.",
                )
            tile = remaining.pop(idx)
            placements.append((self._grid[r][c], tile.bound_to(letter) if tile.is_blank else tile))

        for square, tile in placements:
            square.place(tile)
        rack[:] = remaining
        return result

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_ascii(self) -> str:
        """Plain-text board: letters, lowercase for blanks, premiums otherwise."""
        col_hdr = "     " + "".join(f"{c:3d}" for c in range(SIZE))
        lines = [col_hdr]

        labels = {Bonus.TW: " 3W", Bonus.DW: " 2W", Bonus.TL: " 3L", Bonus.DL: " 2L"}
        for r in range(SIZE):
            cells: list[str] = []
            for c in range(SIZE):
                sq = self._grid[r][c]
                if sq.tile is not None:
                    letter = sq.tile.letter
                    cells.append(f"  {letter.lower()}" if sq.tile.is_blank else f"  {letter}")
                else:
                    cells.append(labels.get(sq.bonus, "  ."))
            lines.append(f" {r:2d} " + "".join(cells))

        return "\n".join(lines)


def _find_tile(rack: list[Tile], letter: str) -> int | None:
    for idx, tile in enumerate(rack):
        if not tile.is_blank and tile.letter == letter:
            return idx
    return None


def _find_blank(rack: list[Tile]) -> int | None:
    for idx, tile in enumerate(rack):
        if tile.is_blank:
            return idx
    return None
