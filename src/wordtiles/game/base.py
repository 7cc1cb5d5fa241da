"""Move-rejection taxonomy shared by the validator, engine, and search."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class MoveError(Enum):
    INVALID_WORD = "invalid_word"
    OUT_OF_BOUNDS = "out_of_bounds"
    CONFLICT_WITH_BOARD = "conflict_with_board"
    INSUFFICIENT_TILES = "insufficient_tiles"
    MISSING_BLANK_ASSIGNMENT = "missing_blank_assignment"
    DISCONNECTED = "disconnected"
    ADJACENCY_VIOLATION = "adjacency_violation"
    NO_NEW_TILES = "no_new_tiles"
    INVALID_SWAP = "invalid_swap"


@dataclass(frozen=True)
class ValidationResult:
    """Result of validating an action against the game rules.

    For a legal placement, ``new_positions`` holds the word indices that
    land on empty squares and ``blank_positions`` the subset of those that
    consume a blank from the rack.
    """

    legal: bool
    reason: str | None = None
    error: MoveError | None = None
    new_positions: tuple[int, ...] = field(default=())
    blank_positions: frozenset[int] = field(default=frozenset())

    @classmethod
    def reject(cls, error: MoveError, reason: str) -> ValidationResult:
        return cls(legal=False, reason=reason, error=error)
