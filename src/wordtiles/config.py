"""Game configuration loader."""

import yaml
from dataclasses import dataclass, field
from pathlib import Path

from wordtiles.game.player import Control

MIN_PLAYERS = 2
MAX_PLAYERS = 4


@dataclass
class PlayerConfig:
    name: str
    control: Control = Control.HUMAN


@dataclass
class GameConfig:
    name: str
    seed: int
    dictionary: Path
    layout: str = "standard"  # "standard" or a path to a .yaml/.xml layout
    max_turns: int = 50
    players: list[PlayerConfig] = field(default_factory=list)
    output_dir: Path | None = None
    base_dir: Path | None = None  # directory relative paths resolve against


def load_config(path: Path) -> GameConfig:
    """Load game config from YAML file."""
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f)

    g = raw["game"]
    base_dir = path.resolve().parent

    players = []
    for i, p in enumerate(raw.get("players", []), 1):
        players.append(
            PlayerConfig(
                name=p.get("name") or f"Player{i}",
                control=Control(p.get("control", "human")),
            )
        )
    if not MIN_PLAYERS <= len(players) <= MAX_PLAYERS:
        raise ValueError(
            f"A game needs {MIN_PLAYERS}-{MAX_PLAYERS} players, got {len(players)}"
        )

    dictionary = Path(g["dictionary"])
    if not dictionary.is_absolute():
        dictionary = base_dir / dictionary

    output_dir = raw.get("output_dir")
    if output_dir is not None:
        output_dir = Path(output_dir)
        if not output_dir.is_absolute():
            output_dir = base_dir / output_dir

    return GameConfig(
        name=g["name"],
        seed=g["seed"],
        dictionary=dictionary,
        layout=g.get("layout", "standard"),
        max_turns=g.get("max_turns", 50),
        players=players,
        output_dir=output_dir,
        base_dir=base_dir,
    )
