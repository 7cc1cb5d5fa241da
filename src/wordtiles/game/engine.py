"""GameModel — turn sequencing, tile economy, undo/redo and observers.

Every public action validates fully before touching anything. A rejected
action leaves the board, racks, scores, bag and turn pointer as they were,
stores a message in the acting player's ``last_error`` and returns False.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

import jsonschema

from wordtiles.core.schemas import load_schema
from wordtiles.game.base import MoveError, ValidationResult
from wordtiles.game.board import Board
from wordtiles.game.dictionary import WordList
from wordtiles.game.history import GameState, History
from wordtiles.game.layout import LayoutProvider
from wordtiles.game.player import Player
from wordtiles.game.scoring import BINGO_BONUS, score_word
from wordtiles.game.search import Move, find_best_move
from wordtiles.game.tiles import RACK_SIZE, Tile, create_full_bag

__all__ = ["GameModel", "GameObserver"]

logger = logging.getLogger(__name__)

_SCHEMA_PATH = Path(__file__).parent / "schema.json"


class GameObserver(Protocol):
    def update(self, board: Board, players: list[Player], current: Player) -> None: ...


class GameModel:
    """A game between two or more players sharing one board and bag."""

    def __init__(
        self,
        players: Sequence[Player],
        dictionary: WordList,
        *,
        layout: LayoutProvider | None = None,
        rng: random.Random | None = None,
        bag: list[Tile] | None = None,
    ) -> None:
        if not players:
            raise ValueError("A game needs at least one player")
        self._dictionary = dictionary
        self._rng = rng or random.Random()
        self._action_schema = load_schema(_SCHEMA_PATH)

        self.board = Board(layout)
        self.players: list[Player] = list(players)
        self.bag: list[Tile] = bag if bag is not None else create_full_bag(self._rng)
        self.current_player_index = 0
        self.first_move = True
        self.turn_number = 0
        self.history = History()
        self._observers: list[GameObserver] = []

        for p in self.players:
            p.draw_tiles(self.bag, RACK_SIZE)

        self._clear_last_action()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    @property
    def dictionary(self) -> WordList:
        return self._dictionary

    @property
    def action_schema(self) -> dict:
        return self._action_schema

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def add_observer(self, observer: GameObserver) -> None:
        self._observers.append(observer)

    def start(self) -> None:
        """Push the initial state to every observer."""
        self._notify()

    def _notify(self) -> None:
        current = self.current_player
        for obs in self._observers:
            obs.update(self.board, self.players, current)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def place_word(self, word: str, row: int, col: int, horizontal: bool) -> bool:
        """Place ``word`` for the current player; blanks fill any gaps."""
        return self._place(word, row, col, horizontal, blank_letters=None)

    def place_word_with_blanks(
        self, word: str, row: int, col: int, horizontal: bool, blanks: str | None
    ) -> bool:
        """Like ``place_word`` but ``blanks`` names, in order, what each blank stands for."""
        return self._place(word, row, col, horizontal, blank_letters=(blanks or "").upper())

    def swap_tiles(self, letters: str) -> bool:
        """Return the named tiles to the bag and draw as many. Uses the turn."""
        player = self.current_player
        letters = letters.upper()
        if not letters or not player.has_letters(letters):
            return self._reject(
                ValidationResult.reject(
                    MoveError.INVALID_SWAP,
                    f"Invalid swap! You don't have the tiles '{letters}'.",
                )
            )

        rack_before = player.letters
        returned = player.remove_letters(letters)
        self.bag.extend(returned)
        player.draw_tiles(self.bag, len(returned))
        player.last_error = None
        logger.info("%s swapped %s", player.name, letters)

        self._record_last_action("swap", rack_before=rack_before, player=player)
        self._next_turn()
        return True

    def pass_turn(self) -> None:
        player = self.current_player
        logger.info("%s passed", player.name)
        self._record_last_action("pass", rack_before=player.letters, player=player)
        self._next_turn()

    def play_automated_turn(self) -> Move | None:
        """Let the current (automated) player move: best placement or pass."""
        player = self.current_player
        if not player.is_automated:
            raise ValueError(f"{player.name} is not an automated player")

        move = find_best_move(
            self.board, player.rack, self._dictionary.words, first_move=self.first_move
        )
        if move is not None and self.place_word(move.word, move.row, move.col, move.horizontal):
            logger.info(
                "%s (automated) placed %s at (%d,%d) %s for %d",
                player.name, move.word, move.row, move.col, move.direction, move.score,
            )
            return move

        self.pass_turn()
        return None

    def apply_action(self, action: dict) -> bool:
        """Run a JSON action dict for the current player.

        Raises ``jsonschema.ValidationError`` if the dict is malformed.
        Successful place/swap/pass actions are checkpointed for undo.
        """
        jsonschema.validate(action, self._action_schema)
        kind = action["action"]

        if kind == "undo":
            return self.undo()
        if kind == "redo":
            return self.redo()

        before = self.create_snapshot()
        if kind == "pass":
            self.pass_turn()
            ok = True
        elif kind == "swap":
            ok = self.swap_tiles(action["letters"])
        else:
            row, col = action["position"]
            horizontal = action["direction"].upper() == "H"
            if "blanks" in action:
                ok = self.place_word_with_blanks(
                    action["word"], row, col, horizontal, action["blanks"]
                )
            else:
                ok = self.place_word(action["word"], row, col, horizontal)

        if ok:
            self.history.checkpoint(before)
        return ok

    # ------------------------------------------------------------------
    # Undo / redo
    # ------------------------------------------------------------------

    def create_snapshot(self) -> GameState:
        return GameState.capture(
            self.board, self.players, self.bag, self.current_player_index, self.first_move
        )

    def restore_state(self, state: GameState) -> None:
        self.board, self.players, self.bag = state.thaw()
        self.current_player_index = state.current_player_index
        self.first_move = state.first_move
        self._notify()

    def save_checkpoint(self) -> None:
        self.history.checkpoint(self.create_snapshot())

    def undo(self) -> bool:
        prev = self.history.undo(self.create_snapshot())
        if prev is None:
            return False
        self.restore_state(prev)
        logger.info("Undo: back to %s's turn", self.current_player.name)
        return True

    def redo(self) -> bool:
        nxt = self.history.redo(self.create_snapshot())
        if nxt is None:
            return False
        self.restore_state(nxt)
        logger.info("Redo: forward to %s's turn", self.current_player.name)
        return True

    # ------------------------------------------------------------------
    # Telemetry
    # ------------------------------------------------------------------

    def get_state_snapshot(self) -> dict:
        return {
            "turn_number": self.turn_number,
            "current_player": self.current_player.name,
            "first_move": self.first_move,
            "scores": {p.name: p.score for p in self.players},
            "racks": {p.name: p.letters for p in self.players},
            "tiles_remaining": len(self.bag),
            "last_action": self._last_action,
            "last_player": self._last_player,
            "word_played": self._last_word,
            "points_scored": self._last_points,
            "bingo": self._last_bingo,
            "rack_before": list(self._last_rack_before),
            "rack_after": list(self._last_rack_after),
            "error": self.last_error_kind.value if self.last_error_kind else None,
        }

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _place(
        self,
        word: str,
        row: int,
        col: int,
        horizontal: bool,
        *,
        blank_letters: str | None,
    ) -> bool:
        player = self.current_player
        word = word.strip().upper()

        if not (word.isascii() and word.isalpha()) or not self._dictionary.is_valid_word(word):
            return self._reject(
                ValidationResult.reject(
                    MoveError.INVALID_WORD, f"Invalid word! '{word}' is not in the dictionary."
                )
            )

        check = self.board.can_place(
            word, row, col, horizontal, player.rack,
            first_move=self.first_move, blank_letters=blank_letters,
        )
        if not check.legal:
            return self._reject(check)

        points = score_word(self.board, word, row, col, horizontal, check.blank_positions)
        rack_before = player.letters

        placed = self.board.place(
            word, row, col, horizontal, player.rack,
            first_move=self.first_move, blank_letters=blank_letters,
        )
        if not placed.legal:
            return self._reject(placed)

        player.score += points
        player.draw_tiles(self.bag, len(placed.new_positions))
        player.last_error = None
        self.first_move = False
        logger.info(
            "%s placed %s at (%d,%d) %s for %d",
            player.name, word, row, col, "H" if horizontal else "V", points,
        )

        self._record_last_action(
            "place",
            rack_before=rack_before,
            player=player,
            word=word,
            points=points,
            bingo=len(placed.new_positions) == RACK_SIZE,
        )
        self._next_turn()
        return True

    def _reject(self, result: ValidationResult) -> bool:
        player = self.current_player
        player.last_error = result.reason
        self.last_error_kind = result.error
        logger.debug("%s: rejected (%s) %s", player.name, result.error, result.reason)
        self._notify()
        return False

    def _next_turn(self) -> None:
        self.turn_number += 1
        self.current_player_index = (self.current_player_index + 1) % len(self.players)
        self._notify()

    def _record_last_action(
        self,
        kind: str,
        *,
        rack_before: list[str],
        player: Player,
        word: str | None = None,
        points: int = 0,
        bingo: bool = False,
    ) -> None:
        self._last_action = kind
        self._last_player = player.name
        self._last_word = word
        self._last_points = points
        self._last_bingo = bingo
        self._last_rack_before = rack_before
        self._last_rack_after = player.letters
        self.last_error_kind = None
        if bingo:
            logger.info("%s bingo! (+%d)", player.name, BINGO_BONUS)

    def _clear_last_action(self) -> None:
        self._last_action: str | None = None
        self._last_player: str | None = None
        self._last_word: str | None = None
        self._last_points = 0
        self._last_bingo = False
        self._last_rack_before: list[str] = []
        self._last_rack_after: list[str] = []
        self.last_error_kind: MoveError | None = None
