"""Summarize command for the monthly balance report."""

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from kakeibo.domain.errors import KakeiboError
from kakeibo.domain.summary import summary_lines
from kakeibo.store.ledger import load_or_fail

console = Console()


def summarize_command(store_path: Path) -> None:
    """Print the net balance of every month in the store, oldest first."""
    console.print("家計簿の集計を行います")

    try:
        entries = load_or_fail(store_path)
    except KakeiboError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        sys.exit(1)

    for line in summary_lines(entries):
        console.print(line, highlight=False)
