#!/usr/bin/env python3
"""Advise on a hold'em hand: equity, action, made hand and draws."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from advisor.engine import AdviseOptions, advise
from advisor.errors import AdvisorError
from advisor.game.cards import parse_cards
from advisor.game.equity import SimulationConfig
from advisor.viz import display_advice, format_cards


def main():
    parser = argparse.ArgumentParser(
        description="Estimate equity against random opponents and recommend an action"
    )
    parser.add_argument(
        "--hole",
        required=True,
        help="Hole cards (e.g., 'AhKd' or 'Ah Kd')",
    )
    parser.add_argument(
        "-b", "--board",
        default="",
        help="Board cards, 0/3/4/5 of them (e.g., '7c8cQd')",
    )
    parser.add_argument(
        "-n", "--opponents",
        type=int,
        default=1,
        help="Number of opponents (default: 1)",
    )
    parser.add_argument(
        "-t", "--trials",
        type=int,
        default=30000,
        help="Monte Carlo trials (default: 30000, minimum 1000)",
    )
    parser.add_argument(
        "-p", "--pot",
        type=float,
        help="Pot before your action",
    )
    parser.add_argument(
        "-c", "--to-call",
        type=float,
        help="Amount you must call (0 if checked to)",
    )
    parser.add_argument(
        "-s", "--seed",
        type=int,
        help="Random seed for repeatable results",
    )
    parser.add_argument(
        "-w", "--workers",
        type=int,
        default=1,
        help="Worker processes for the simulation (default: 1)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args()
    console = Console()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console)],
        )

    try:
        hole = parse_cards(args.hole)
        board = parse_cards(args.board)
    except AdvisorError as e:
        console.print(f"[red]{e}[/]")
        return 1

    console.print(f"[bold]Hole:[/] {format_cards(hole)}")
    console.print(f"[bold]Board:[/] {format_cards(board) or '-'}")
    console.print(f"[bold]Opponents:[/] {args.opponents}")
    console.print()

    config = SimulationConfig(trials=args.trials, workers=max(1, args.workers))
    options = AdviseOptions(trials=args.trials, pot=args.pot, to_call=args.to_call)

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            task = progress.add_task(f"Simulating ({args.trials} trials)...")

            def callback(completed, wins, ties):
                progress.update(task, description=f"Simulated {completed} trials")

            result = advise(
                hole, board, args.opponents, options,
                rng=args.seed, config=config, callback=callback,
            )
    except AdvisorError as e:
        console.print(f"[red]{e}[/]")
        return 1

    display_advice(result, console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
