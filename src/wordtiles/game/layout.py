"""Premium-square layouts.

The board never reads layout files itself. It receives a finished
``{(row, col): Bonus}`` mapping from a ``LayoutProvider``:

    StandardLayout — the classic 15×15 premium pattern, built in
    YamlLayout     — ``{name: ..., bonuses: {DW: [[7, 7], ...]}}``
    XmlLayout      — ``<board name=".."><bonus type="DW" row="7" col="7"/></board>``
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

SIZE = 15
CENTER = (7, 7)


class Bonus(Enum):
    NONE = "--"
    DL = "DL"
    TL = "TL"
    DW = "DW"
    TW = "TW"

    @property
    def letter_multiplier(self) -> int:
        return {Bonus.DL: 2, Bonus.TL: 3}.get(self, 1)

    @property
    def word_multiplier(self) -> int:
        return {Bonus.DW: 2, Bonus.TW: 3}.get(self, 1)


# Premium square positions --------------------------------------------------

# Triple Word Score
_TW_POSITIONS = [
    (0, 0), (0, 7), (0, 14),
    (7, 0), (7, 14),
    (14, 0), (14, 7), (14, 14),
]

# Double Word Score (center star at 7,7 is also DW)
_DW_POSITIONS = [
    (1, 1), (2, 2), (3, 3), (4, 4),
    (1, 13), (2, 12), (3, 11), (4, 10),
    (10, 4), (11, 3), (12, 2), (13, 1),
    (10, 10), (11, 11), (12, 12), (13, 13),
    (7, 7),
]

# Triple Letter Score
_TL_POSITIONS = [
    (1, 5), (1, 9),
    (5, 1), (5, 5), (5, 9), (5, 13),
    (9, 1), (9, 5), (9, 9), (9, 13),
    (13, 5), (13, 9),
]

# Double Letter Score
_DL_POSITIONS = [
    (0, 3), (0, 11),
    (2, 6), (2, 8),
    (3, 0), (3, 7), (3, 14),
    (6, 2), (6, 6), (6, 8), (6, 12),
    (7, 3), (7, 11),
    (8, 2), (8, 6), (8, 8), (8, 12),
    (11, 0), (11, 7), (11, 14),
    (12, 6), (12, 8),
    (14, 3), (14, 11),
]


class LayoutProvider(ABC):
    """Source of a board's premium squares."""

    name: str = "unnamed"

    @abstractmethod
    def bonuses(self) -> dict[tuple[int, int], Bonus]:
        """Return the premium mapping. Cells not present are ``Bonus.NONE``."""


class StandardLayout(LayoutProvider):
    name = "standard"

    def bonuses(self) -> dict[tuple[int, int], Bonus]:
        mapping: dict[tuple[int, int], Bonus] = {}
        for kind, positions in (
            (Bonus.TW, _TW_POSITIONS),
            (Bonus.DW, _DW_POSITIONS),
            (Bonus.TL, _TL_POSITIONS),
            (Bonus.DL, _DL_POSITIONS),
        ):
            for pos in positions:
                mapping[pos] = kind
        return mapping


class MappingLayout(LayoutProvider):
    """Layout from an in-memory mapping. Useful for tests and custom boards."""

    def __init__(
        self, mapping: dict[tuple[int, int], Bonus], name: str = "custom"
    ) -> None:
        self._mapping = {
            _checked_position(r, c): Bonus(kind) for (r, c), kind in mapping.items()
        }
        self.name = name

    def bonuses(self) -> dict[tuple[int, int], Bonus]:
        return dict(self._mapping)


class YamlLayout(LayoutProvider):
    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self.name = self._path.stem

    def bonuses(self) -> dict[tuple[int, int], Bonus]:
        with open(self._path) as f:
            raw = yaml.safe_load(f) or {}

        self.name = raw.get("name", self.name)
        mapping: dict[tuple[int, int], Bonus] = {}
        for kind, positions in (raw.get("bonuses") or {}).items():
            bonus = _parse_bonus(kind, self._path)
            for row, col in positions:
                mapping[_checked_position(int(row), int(col))] = bonus
        logger.info("Loaded layout %r from %s (%d premiums)", self.name, self._path, len(mapping))
        return mapping


class XmlLayout(LayoutProvider):
    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self.name = self._path.stem

    def bonuses(self) -> dict[tuple[int, int], Bonus]:
        root = ET.parse(self._path).getroot()
        self.name = root.get("name") or self.name

        mapping: dict[tuple[int, int], Bonus] = {}
        for el in root.iter("bonus"):
            bonus = _parse_bonus(el.get("type", ""), self._path)
            row, col = int(el.get("row", "-1")), int(el.get("col", "-1"))
            mapping[_checked_position(row, col)] = bonus
        logger.info("Loaded layout %r from %s (%d premiums)", self.name, self._path, len(mapping))
        return mapping


def resolve_layout(value: str | None, base_dir: Path | None = None) -> LayoutProvider:
    """Resolve a config value (``standard`` or a file path) to a provider."""
    if not value or value == "standard":
        return StandardLayout()
    path = Path(value)
    if base_dir is not None and not path.is_absolute():
        path = base_dir / path
    if path.suffix.lower() == ".xml":
        return XmlLayout(path)
    if path.suffix.lower() in (".yaml", ".yml"):
        return YamlLayout(path)
    raise ValueError(f"Unsupported layout file type: {path}")


def _parse_bonus(kind: str, source: Path) -> Bonus:
    try:
        bonus = Bonus(kind.upper())
    except ValueError:
        raise ValueError(f"Unknown bonus type {kind!r} in {source}") from None
    if bonus is Bonus.NONE:
        raise ValueError(f"Bonus type {kind!r} in {source} is not a premium")
    return bonus


def _checked_position(row: int, col: int) -> tuple[int, int]:
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise ValueError(f"Premium square ({row},{col}) is off the board")
    return (row, col)
