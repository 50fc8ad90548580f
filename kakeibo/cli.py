"""CLI entry point for kakeibo."""

import typer

from kakeibo.commands.admin import init_command, list_command, resolve_store_path
from kakeibo.commands.menu import menu_command
from kakeibo.commands.register import register_command
from kakeibo.commands.summarize import summarize_command

app = typer.Typer(
    name="kakeibo",
    help="家計簿 - record income and expenses and summarize them by month",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    store: str = typer.Option(None, "--store", "-s", help="Ledger file (default: from config, or store/data.json)"),
) -> None:
    """家計簿 - record income and expenses and summarize them by month.

    Run without a command to choose between registering and summarizing.
    """
    ctx.obj = store
    if ctx.invoked_subcommand is None:
        menu_command(resolve_store_path(store))


@app.command()
def register(ctx: typer.Context) -> None:
    """Record one income or expense entry."""
    register_command(resolve_store_path(ctx.obj))


@app.command()
def summarize(ctx: typer.Context) -> None:
    """Show the net balance of each month."""
    summarize_command(resolve_store_path(ctx.obj))


@app.command(name="list")
def list_entries(
    ctx: typer.Context,
    month: str = typer.Option(None, "--month", help="Specific month (YYYY-MM)"),
) -> None:
    """List your recorded entries."""
    list_command(resolve_store_path(ctx.obj), month)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Create the kakeibo configuration file."""
    init_command(force)


if __name__ == "__main__":
    app()
