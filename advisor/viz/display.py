"""Terminal rendering of advice results."""

from typing import Iterable, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from advisor.engine import AdviceResult
from advisor.game.cards import Card
from advisor.strategy.recommend import ActionType

ACTION_STYLES = {
    ActionType.FOLD: "red",
    ActionType.CHECK: "dim",
    ActionType.CALL: "blue",
    ActionType.RAISE: "green",
}


def format_cards(cards: Iterable[Card]) -> str:
    """Space-separated cards with suit symbols."""
    return " ".join(c.pretty for c in cards)


def display_advice(
    result: AdviceResult,
    console: Optional[Console] = None,
    max_combos: int = 5,
) -> None:
    """
    Print an advice result.

    Args:
        result: Result from advise()
        console: Console to print to (a new one if omitted)
        max_combos: How many ranked 5-card combinations to list
    """
    console = console or Console()
    style = ACTION_STYLES[result.action]
    hands = result.possible_hands

    lines = [
        f"[bold]Street:[/] {result.street}",
        f"[bold]Equity:[/] {result.equity_pct:.1f}%",
        f"[bold]Action:[/] [{style}]{result.action.value.upper()}[/]",
        f"[dim]{result.rationale}[/]",
    ]
    if hands.made:
        made = hands.made[0]
        lines.append(f"[bold]Made hand:[/] {made.name} ({' '.join(made.kickers)})")
    if hands.best_made:
        lines.append(f"[bold]Best five:[/] {hands.best_made.label}")

    console.print(Panel("\n".join(lines), title="[bold]Advice[/]", border_style=style))

    if hands.draws:
        table = Table(title="Draws")
        table.add_column("Draw", style="cyan")
        table.add_column("Outs", justify="right")
        table.add_column("Cards")
        for draw in hands.draws:
            table.add_row(str(draw.kind), str(draw.outs), format_cards(draw.cards))
        console.print(table)

    if len(hands.made_combos) > 1:
        table = Table(title="Five-card combinations", show_header=False, box=None)
        table.add_column("Combination")
        for combo in hands.made_combos[:max_combos]:
            table.add_row(combo.label)
        if len(hands.made_combos) > max_combos:
            table.add_row(f"[dim]... {len(hands.made_combos) - max_combos} more[/]")
        console.print(table)
