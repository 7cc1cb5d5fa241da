"""End-to-end tests for GameRunner."""

import io
import json

from wordtiles.config import GameConfig, PlayerConfig
from wordtiles.game.dictionary import WordList
from wordtiles.game.player import Control
from wordtiles.runner import GameRunner

WORDS = ["CAT", "ACT", "AT", "TA", "TO", "AX", "TEA", "EAT", "ON", "NOTE"]


def _config(tmp_output, *controls, max_turns=6, layout="standard"):
    return GameConfig(
        name="test",
        seed=42,
        dictionary=tmp_output / "unused.txt",
        layout=layout,
        max_turns=max_turns,
        players=[PlayerConfig(f"P{i}", c) for i, c in enumerate(controls)],
        output_dir=tmp_output,
    )


def _records(path):
    return [json.loads(line) for line in path.read_text().splitlines()]


class TestAutomatedGame:
    def test_plays_to_turn_limit(self, tmp_output):
        cfg = _config(tmp_output, Control.AUTOMATED, Control.AUTOMATED)
        result = GameRunner(cfg, dictionary=WordList(WORDS)).run()

        assert result.turns_played == 6
        assert result.game_id == "test-42"
        assert result.telemetry_path == tmp_output / "telemetry" / "test-42.jsonl"

        records = _records(result.telemetry_path)
        assert len(records) == 7
        assert records[-1]["record_type"] == "game_summary"
        assert records[-1]["final_scores"] == result.scores
        assert records[-1]["players"] == {"P0": "automated", "P1": "automated"}
        assert all(r["control"] == "automated" for r in records[:-1])

    def test_same_seed_same_game(self, tmp_path):
        results = []
        for run in ("a", "b"):
            cfg = _config(tmp_path / run, Control.AUTOMATED, Control.AUTOMATED)
            results.append(GameRunner(cfg, dictionary=WordList(WORDS)).run())
        assert results[0].scores == results[1].scores
        snaps_a = [r.get("state_snapshot") for r in _records(results[0].telemetry_path)[:-1]]
        snaps_b = [r.get("state_snapshot") for r in _records(results[1].telemetry_path)[:-1]]
        assert snaps_a == snaps_b


class TestHumanInput:
    def test_reads_one_action_per_line(self, tmp_output):
        cfg = _config(tmp_output, Control.HUMAN, Control.HUMAN, max_turns=2)
        stream = io.StringIO('{"action": "pass"}\n{"action": "pass"}\n')
        result = GameRunner(cfg, input_stream=stream, dictionary=WordList(WORDS)).run()

        assert result.turns_played == 2
        turns = _records(result.telemetry_path)[:-1]
        assert [t["player"] for t in turns] == ["P0", "P1"]
        assert all(t["accepted"] for t in turns)
        assert turns[0]["parsed_action"] == {"action": "pass"}

    def test_unparseable_line_keeps_turn(self, tmp_output):
        cfg = _config(tmp_output, Control.HUMAN, Control.HUMAN)
        stream = io.StringIO("let me think\n")
        result = GameRunner(cfg, input_stream=stream, dictionary=WordList(WORDS)).run()

        assert result.turns_played == 0
        turns = _records(result.telemetry_path)[:-1]
        assert len(turns) == 1
        assert turns[0]["parse_success"] is False
        assert turns[0]["accepted"] is False
        assert turns[0]["error"] == "Unknown command 'let'"

    def test_rejected_move_is_logged(self, tmp_output):
        cfg = _config(tmp_output, Control.HUMAN, Control.HUMAN)
        line = '{"action": "place", "word": "ZZZ", "position": [7, 7], "direction": "H"}\n'
        result = GameRunner(cfg, input_stream=io.StringIO(line), dictionary=WordList(WORDS)).run()

        turn = _records(result.telemetry_path)[0]
        assert turn["parse_success"] is True
        assert turn["accepted"] is False
        assert "not in the dictionary" in turn["error"]
        assert turn["state_snapshot"]["error"] == "invalid_word"

    def test_mixed_seats(self, tmp_output):
        cfg = _config(tmp_output, Control.HUMAN, Control.AUTOMATED, max_turns=4)
        stream = io.StringIO('{"action": "pass"}\n' * 2)
        result = GameRunner(cfg, input_stream=stream, dictionary=WordList(WORDS)).run()
        assert result.turns_played == 4

    def test_console_commands(self, tmp_output):
        cfg = _config(tmp_output, Control.HUMAN, Control.HUMAN, max_turns=2)
        stream = io.StringIO("PASS\nPASS\n")
        result = GameRunner(cfg, input_stream=stream, dictionary=WordList(WORDS)).run()
        assert result.turns_played == 2


class TestUndoRedoInput:
    def test_undo_with_nothing_to_undo(self, tmp_output):
        cfg = _config(tmp_output, Control.HUMAN, Control.HUMAN)
        result = GameRunner(cfg, input_stream=io.StringIO("UNDO\n"), dictionary=WordList(WORDS)).run()

        turn = _records(result.telemetry_path)[0]
        assert turn["accepted"] is False
        assert turn["error"] == "Nothing to undo"

    def test_undo_does_not_log_stale_error(self, tmp_output):
        cfg = _config(tmp_output, Control.HUMAN, Control.HUMAN)
        stream = io.StringIO("PLACE ZZZ H\nPASS\nUNDO\nREDO\n")
        result = GameRunner(cfg, input_stream=stream, dictionary=WordList(WORDS)).run()

        turns = _records(result.telemetry_path)[:-1]
        assert [(t["player"], t["accepted"]) for t in turns] == [
            ("P0", False), ("P0", True), ("P1", True), ("P0", True),
        ]
        assert "not in the dictionary" in turns[0]["error"]
        assert [t["error"] for t in turns[1:]] == [None, None, None]
        assert result.turns_played == 1
