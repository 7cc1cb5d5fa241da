"""TurnLogger — JSONL game logging.

One logger per game. Writes one JSONL line per turn plus a game summary
as the final line. All entries include schema version and game ID.
"""

import json
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from pathlib import Path

import wordtiles

_SCHEMA_VERSION = "1.0.0"


@dataclass
class TurnEntry:
    """One turn of game telemetry."""

    turn_number: int
    player: str
    control: str
    raw_input: str | None
    parsed_action: dict | None
    parse_success: bool
    accepted: bool
    error: str | None
    state_snapshot: dict
    engine_version: str


class TurnLogger:
    """Writes JSONL telemetry for a single game."""

    def __init__(self, output_dir: Path, game_id: str):
        self._output_dir = Path(output_dir)
        self._game_id = game_id
        self._output_dir.mkdir(parents=True, exist_ok=True)
        self._file_path = self._output_dir / f"{game_id}.jsonl"

    @property
    def file_path(self) -> Path:
        return self._file_path

    def log_turn(self, entry: TurnEntry) -> None:
        record = asdict(entry)
        record["schema_version"] = _SCHEMA_VERSION
        record["game_id"] = self._game_id
        record["timestamp"] = datetime.now(timezone.utc).isoformat()
        self._append(record)

    def finalize_game(
        self,
        scores: dict[str, int],
        extra: dict | None = None,
    ) -> None:
        record = {
            "schema_version": _SCHEMA_VERSION,
            "record_type": "game_summary",
            "game_id": self._game_id,
            "final_scores": scores,
            "engine_version": wordtiles.__version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        if extra:
            record.update(extra)
        self._append(record)

    def _append(self, record: dict) -> None:
        with open(self._file_path, "a") as f:
            f.write(json.dumps(record, default=str) + "\n")
