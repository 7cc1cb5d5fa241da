"""GameRunner — plays one configured game turn by turn.

Automated seats move through the search; human seats read one JSON
action per line from an input stream. Every turn is written to a JSONL
telemetry file.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

import wordtiles
from wordtiles.config import GameConfig
from wordtiles.core.parser import ActionParser
from wordtiles.core.seed import bag_rng
from wordtiles.core.telemetry import TurnEntry, TurnLogger
from wordtiles.game.dictionary import WordList
from wordtiles.game.engine import GameModel, GameObserver
from wordtiles.game.layout import resolve_layout
from wordtiles.game.player import Player

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    game_id: str
    scores: dict[str, int]
    turns_played: int
    telemetry_path: Path


class GameRunner:
    """Runs a game defined by a GameConfig."""

    def __init__(
        self,
        config: GameConfig,
        *,
        input_stream: TextIO | None = None,
        observers: list[GameObserver] | None = None,
        dictionary: WordList | None = None,
    ) -> None:
        self.config = config
        self.telemetry_dir = self._resolve_telemetry_dir()
        self._input = input_stream or sys.stdin
        self._parser = ActionParser()

        self.model = GameModel(
            [Player(p.name, p.control) for p in config.players],
            dictionary or WordList.from_file(config.dictionary),
            layout=resolve_layout(config.layout, config.base_dir),
            rng=bag_rng(config.seed, config.name),
        )
        for obs in observers or []:
            self.model.add_observer(obs)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self) -> GameResult:
        """Play until ``max_turns`` turns are taken or human input runs out."""
        game_id = f"{self.config.name}-{self.config.seed}"
        turn_log = TurnLogger(self.telemetry_dir, game_id)
        model = self.model
        model.start()

        while model.turn_number < self.config.max_turns:
            player = model.current_player
            if player.is_automated:
                move = model.play_automated_turn()
                action = None
                if move is not None:
                    action = {
                        "action": "place",
                        "word": move.word,
                        "position": [move.row, move.col],
                        "direction": move.direction,
                    }
                self._log_turn(turn_log, player, raw=None, action=action, parsed=True, accepted=True, error=None)
                continue

            line = self._input.readline()
            if not line:
                logger.info("Input exhausted after %d turns", model.turn_number)
                break

            parsed = self._parser.parse(line, model.action_schema)
            if not parsed.success:
                player.last_error = parsed.error
                self._log_turn(
                    turn_log, player, raw=line, action=None, parsed=False, accepted=False,
                    error=parsed.error,
                )
                continue

            seat = model.current_player_index
            kind = parsed.action["action"]
            accepted = model.apply_action(parsed.action)
            if accepted:
                error = None
            elif kind in ("undo", "redo"):
                error = f"Nothing to {kind}"
            else:
                error = model.players[seat].last_error
            self._log_turn(
                turn_log, player, raw=line, action=parsed.action, parsed=True, accepted=accepted,
                error=error,
            )

        scores = {p.name: p.score for p in model.players}
        turn_log.finalize_game(
            scores,
            extra={
                "game": self.config.name,
                "players": {p.name: p.control.value for p in model.players},
                "turns_played": model.turn_number,
                "tiles_remaining": len(model.bag),
            },
        )
        return GameResult(
            game_id=game_id,
            scores=scores,
            turns_played=model.turn_number,
            telemetry_path=turn_log.file_path,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _resolve_telemetry_dir(self) -> Path:
        """Create and return the telemetry output directory."""
        if self.config.output_dir:
            d = Path(self.config.output_dir) / "telemetry"
        else:
            d = Path("output") / "telemetry"
        d.mkdir(parents=True, exist_ok=True)
        return d

    def _log_turn(
        self,
        turn_log: TurnLogger,
        player: Player,
        *,
        raw: str | None,
        action: dict | None,
        parsed: bool,
        accepted: bool,
        error: str | None,
    ) -> None:
        entry = TurnEntry(
            turn_number=self.model.turn_number,
            player=player.name,
            control=player.control.value,
            raw_input=raw,
            parsed_action=action,
            parse_success=parsed,
            accepted=accepted,
            error=error,
            state_snapshot=self.model.get_state_snapshot(),
            engine_version=wordtiles.__version__,
        )
        turn_log.log_turn(entry)
