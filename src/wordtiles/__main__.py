"""CLI entry point: python -m wordtiles <game.yaml>"""

import argparse
import logging
import sys
from pathlib import Path

from wordtiles.config import load_config
from wordtiles.render import ConsoleView
from wordtiles.runner import GameRunner


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="wordtiles",
        description="Word-tile board game with automated opponents",
    )
    parser.add_argument(
        "config",
        type=Path,
        help="Path to game YAML config file",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output directory (default: from config, else output/)",
    )
    parser.add_argument(
        "--max-turns",
        type=int,
        default=None,
        help="Override the configured turn limit",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        default=False,
        help="Do not draw the board after each action",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.config.exists():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        sys.exit(1)

    config = load_config(args.config)
    if args.output:
        config.output_dir = args.output
    if args.max_turns is not None:
        config.max_turns = args.max_turns

    print(f"Game: {config.name} (seed={config.seed}, layout={config.layout})")
    print(f"Players: {', '.join(f'{p.name} [{p.control.value}]' for p in config.players)}")
    print()

    observers = [] if args.quiet else [ConsoleView()]
    result = GameRunner(config, observers=observers).run()

    print("=" * 60)
    print(f"RESULTS after {result.turns_played} turns")
    print("=" * 60)
    for rank, (name, score) in enumerate(
        sorted(result.scores.items(), key=lambda x: x[1], reverse=True), 1
    ):
        print(f"  {rank}. {name:20s} {score:>6d}")
    print()
    print(f"Telemetry: {result.telemetry_path}")


if __name__ == "__main__":
    main()
