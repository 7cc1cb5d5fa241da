"""ActionParser — turn one line of player input into an action dict.

Two forms are accepted, one action per line:

    {"action": "place", "word": "CAT", "position": [7, 7], "direction": "H"}
    PLACE CAT 8 H H            (word, row 1-15, column A-O, direction)
    PLACE CAT H                (word across/down from the center square)
    PLACE CAT 8 H H A          (trailing letters name what blanks stand for)
    SWAP QZ | PASS | UNDO | REDO

Either way the result is validated against the action JSON Schema.
"""

import json
from dataclasses import dataclass

import jsonschema

from wordtiles.game.layout import CENTER, SIZE

_COLUMNS = "ABCDEFGHIJKLMNO"[:SIZE]


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing a line of player input."""

    success: bool
    action: dict | None
    error: str | None


class ActionParser:
    """Parse one input line and validate it against the action schema."""

    def parse(self, raw_text: str, schema: dict) -> ParseResult:
        line = raw_text.strip()
        if not line:
            return _failure("Empty input")

        if line.startswith("{"):
            try:
                action = json.loads(line)
            except json.JSONDecodeError as e:
                return _failure(f"JSON parse error: {e}")
            if not isinstance(action, dict):
                return _failure("JSON value is not an object")
        else:
            try:
                action = _parse_command(line.split())
            except ValueError as e:
                return _failure(str(e))

        try:
            jsonschema.validate(action, schema)
        except jsonschema.ValidationError as e:
            return _failure(f"Schema validation: {e.message}")
        return ParseResult(success=True, action=action, error=None)


def _failure(error: str) -> ParseResult:
    return ParseResult(success=False, action=None, error=error)


def _parse_command(parts: list[str]) -> dict:
    verb = parts[0].upper()
    args = parts[1:]

    if verb in ("PASS", "UNDO", "REDO"):
        if args:
            raise ValueError(f"{verb} takes no arguments")
        return {"action": verb.lower()}

    if verb == "SWAP":
        if len(args) != 1:
            raise ValueError("Use: SWAP LETTERS")
        return {"action": "swap", "letters": args[0].upper()}

    if verb == "PLACE":
        if len(args) in (2, 3):
            word, direction, *blanks = args
            row, col = CENTER
        elif len(args) in (4, 5):
            word, row_text, col_text, direction, *blanks = args
            row, col = _row_index(row_text), _col_index(col_text)
        else:
            raise ValueError("Use: PLACE WORD ROW COL H|V [BLANKS] or PLACE WORD H|V [BLANKS]")
        action = {
            "action": "place",
            "word": word.upper(),
            "position": [row, col],
            "direction": direction.upper(),
        }
        if blanks:
            action["blanks"] = blanks[0].upper()
        return action

    raise ValueError(f"Unknown command {parts[0]!r}")


def _row_index(text: str) -> int:
    if not text.isdigit() or not 1 <= int(text) <= SIZE:
        raise ValueError(f"Row must be 1-{SIZE}, got {text!r}")
    return int(text) - 1


def _col_index(text: str) -> int:
    if len(text) != 1 or text.upper() not in _COLUMNS:
        raise ValueError(f"Column must be A-{_COLUMNS[-1]}, got {text!r}")
    return _COLUMNS.index(text.upper())
