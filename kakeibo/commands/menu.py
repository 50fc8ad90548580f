"""Interactive mode selector shown when kakeibo runs without a subcommand."""

import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from kakeibo.commands.register import register_command
from kakeibo.commands.summarize import summarize_command
from kakeibo.domain.errors import KakeiboError
from kakeibo.domain.models import ServiceType
from kakeibo.domain.validation import parse_code, validate_service_type

console = Console()


def prompt_service_type() -> ServiceType:
    """Prompt for and validate the workflow to run.

    Raises:
        KakeiboError: If the input is not 0 or 1.
    """
    raw: str = typer.prompt(
        "実行したい内容を入力してください (0:登録, 1:集計)", type=str, default="", show_default=False
    )
    return validate_service_type(parse_code(raw, "実行内容"))


def menu_command(store_path: Path) -> None:
    """Ask which workflow to run and dispatch to it."""
    try:
        service_type = prompt_service_type()
    except KakeiboError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        sys.exit(1)

    if service_type == ServiceType.REGISTER:
        register_command(store_path)
    else:
        summarize_command(store_path)
