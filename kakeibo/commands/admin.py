"""Admin commands for init and listing entries."""

import sys
import tomllib
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from kakeibo.config import create_default_config, get_config_path, get_store_path
from kakeibo.dates import format_entry_date, format_month, parse_month
from kakeibo.domain.entries import category_label, is_income, signed_amount
from kakeibo.domain.errors import KakeiboError
from kakeibo.domain.summary import entries_in_month
from kakeibo.store.ledger import load_or_empty

console = Console()


def resolve_store_path(override: str | None) -> Path:
    """Resolve the store path, exiting on an unreadable config file."""
    try:
        return get_store_path(override)
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Invalid config file {escape(str(get_config_path()))}: {escape(str(e))}[/red]")
        sys.exit(1)


def init_command(force: bool = False) -> None:
    """Write the default configuration file."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {escape(str(config_path))}")
        console.print("\n[yellow]Use 'kakeibo init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Filesystem error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Config file created (permissions: 600): {escape(str(config_path))}")


def list_command(store_path: Path, month: str | None = None) -> None:
    """List stored entries, optionally for one month."""
    try:
        entries, created = load_or_empty(store_path)
        if month:
            key = parse_month(month)
            entries = entries_in_month(entries, key)
    except KakeiboError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        sys.exit(1)

    if not entries:
        console.print("[yellow]No entries found[/yellow]")
        if created:
            console.print(f"[dim]Store does not exist yet: {escape(str(store_path))}[/dim]")
        return

    title = f"Entries for {format_month(key)}" if month else f"Entries (showing all {len(entries)})"
    table = Table(title=title)
    table.add_column("Date", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Category", style="magenta")
    table.add_column("Amount", justify="right")

    for entry in entries:
        amount = signed_amount(entry)
        if amount < 0:
            amount_display = f"[red]-¥{abs(amount):,}[/red]"
        else:
            amount_display = f"[green]+¥{amount:,}[/green]"

        kind = "収入" if is_income(entry.category) else "支出"
        table.add_row(
            format_entry_date(entry.date),
            escape(entry.name) or "[dim]-[/dim]",
            f"{kind}/{category_label(entry.category)}",
            amount_display,
        )

    console.print(table)
