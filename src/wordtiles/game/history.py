"""Undo/redo — whole-state snapshots on two stacks."""

from __future__ import annotations

import copy
from dataclasses import dataclass

from wordtiles.game.board import Board
from wordtiles.game.player import Player
from wordtiles.game.tiles import Tile


@dataclass(frozen=True)
class GameState:
    """Deep copy of everything a turn can change.

    Nothing reachable from a GameState is shared with the live game,
    so later play can't leak into an old snapshot or vice versa.
    """

    board: Board
    players: tuple[Player, ...]
    bag: tuple[Tile, ...]
    current_player_index: int
    first_move: bool

    @classmethod
    def capture(
        cls,
        board: Board,
        players: list[Player],
        bag: list[Tile],
        current_player_index: int,
        first_move: bool,
    ) -> GameState:
        board, players, bag = copy.deepcopy((board, players, bag))
        return cls(board, tuple(players), tuple(bag), current_player_index, first_move)

    def thaw(self) -> tuple[Board, list[Player], list[Tile]]:
        """Fresh mutable copies of board, players and bag for the live game."""
        board, players, bag = copy.deepcopy((self.board, self.players, self.bag))
        return board, list(players), list(bag)


class History:
    """Undo and redo stacks of GameState snapshots."""

    def __init__(self) -> None:
        self._undo: list[GameState] = []
        self._redo: list[GameState] = []

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def checkpoint(self, state: GameState) -> None:
        """Record ``state``; any new action invalidates the redo history."""
        self._undo.append(state)
        self._redo.clear()

    def undo(self, current: GameState) -> GameState | None:
        """Swap ``current`` onto the redo stack and return the last checkpoint."""
        if not self._undo:
            return None
        self._redo.append(current)
        return self._undo.pop()

    def redo(self, current: GameState) -> GameState | None:
        if not self._redo:
            return None
        self._undo.append(current)
        return self._redo.pop()

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()
