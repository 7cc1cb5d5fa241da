"""Terminal rendering of the board and racks with rich."""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from wordtiles.game.board import Board
from wordtiles.game.layout import CENTER, SIZE, Bonus
from wordtiles.game.player import Player
from wordtiles.game.tiles import Tile

_PREMIUM_STYLES = {
    Bonus.TW: (" 3W", "bold red"),
    Bonus.DW: (" 2W", "bold magenta"),
    Bonus.TL: (" 3L", "bold blue"),
    Bonus.DL: (" 2L", "bold cyan"),
}


def board_text(board: Board) -> Text:
    """Render 15×15 board with colored premium squares."""
    text = Text()
    text.append("      ", style="dim")
    for c in range(SIZE):
        text.append(f"{c:>3d}", style="dim")
    text.append("\n")

    for r in range(SIZE):
        text.append(f"  {r:>2d}  ", style="dim")
        for c in range(SIZE):
            sq = board.square(r, c)
            if sq.tile is not None:
                if sq.tile.is_blank:
                    text.append(f"  {sq.tile.letter.lower()}", style="bold yellow")
                else:
                    text.append(f"  {sq.tile.letter}", style="bold white")
            elif (r, c) == CENTER and sq.bonus is Bonus.DW:
                text.append("  ★", style="bold yellow")
            elif sq.bonus in _PREMIUM_STYLES:
                label, style = _PREMIUM_STYLES[sq.bonus]
                text.append(label, style=style)
            else:
                text.append("  .", style="dim")
        text.append("\n")

    return text


def rack_text(tiles: list[Tile]) -> Text:
    """Render a player's rack with tile styling."""
    rack = Text()
    for i, tile in enumerate(tiles):
        if i > 0:
            rack.append(" ")
        if tile.is_blank:
            rack.append("[?]", style="bold yellow")
        elif tile.letter in "JQXZ":
            rack.append(f"[{tile.letter}]", style="bold red")
        else:
            rack.append(f"[{tile.letter}]")
    return rack


class ConsoleView:
    """Observer that redraws the game on every state change."""

    def __init__(self, console: Console | None = None, show_all_racks: bool = False) -> None:
        self.console = console or Console()
        self.show_all_racks = show_all_racks

    def update(self, board: Board, players: list[Player], current: Player) -> None:
        scores = Table(show_header=True, show_edge=False, padding=(0, 1))
        scores.add_column("Player")
        scores.add_column("Score", justify="right")
        scores.add_column("Rack")
        for p in players:
            marker = "▶ " if p is current else "  "
            rack = rack_text(p.rack) if (self.show_all_racks or p is current) else Text("")
            scores.add_row(f"{marker}{p.name}", str(p.score), rack)

        parts = [board_text(board), scores]
        if current.last_error:
            parts.append(Text(current.last_error, style="bold red"))
        self.console.print(
            Panel(Group(*parts), title=f"[bold]{current.name} to move[/bold]", border_style="green")
        )
