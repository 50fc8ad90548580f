"""Register command for recording one income or expense entry."""

import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from kakeibo.dates import format_entry_date, parse_entry_date
from kakeibo.domain.entries import (
    Entry,
    build_entry,
    category_choices,
    category_label,
    format_choices,
    is_income,
)
from kakeibo.domain.errors import KakeiboError
from kakeibo.domain.models import RegistrationKind
from kakeibo.domain.validation import (
    parse_amount,
    parse_code,
    validate_category_code,
    validate_registration_kind,
)
from kakeibo.store.ledger import append_entry

console = Console()


def prompt_line(text: str) -> str:
    """Prompt for one line of input. Empty input is returned as is."""
    result: str = typer.prompt(text, type=str, default="", show_default=False)
    return result


def input_registration_kind() -> RegistrationKind:
    """Prompt for and validate the registration kind."""
    raw = prompt_line("登録種別を入力してください (0:収入, 1:支出)")
    return validate_registration_kind(parse_code(raw, "登録種別"))


def input_name() -> str:
    """Prompt for the item name."""
    return prompt_line("品目名を入力してください").strip()


def input_category_code(kind: RegistrationKind) -> int:
    """Prompt for and validate a category code, listing the kind's choices."""
    raw = prompt_line(f"カテゴリを入力してください {format_choices(category_choices(kind))}")
    return validate_category_code(kind, parse_code(raw, "カテゴリ種別"))


def describe_entry(entry: Entry) -> str:
    """Format an entry for the confirmation echo."""
    kind = "収入" if is_income(entry.category) else "支出"
    return (
        f"{format_entry_date(entry.date)} {entry.name or '(名称なし)'} "
        f"[{kind}/{category_label(entry.category)}] {entry.amount:,}円"
    )


def collect_entry() -> Entry:
    """Run the registration prompts and build the entry.

    Returns:
        New Entry.

    Raises:
        KakeiboError: On the first invalid input.
    """
    kind = input_registration_kind()
    name = input_name()
    category_code = input_category_code(kind)
    amount = parse_amount(prompt_line("金額を入力してください"))
    entry_date = parse_entry_date(prompt_line("日付を入力してください"))
    return build_entry(kind, name, category_code, amount, entry_date)


def register_command(store_path: Path) -> None:
    """Record one entry and append it to the store."""
    console.print("収支の登録を行います")

    try:
        entry = collect_entry()
        console.print(f"登録情報: {escape(describe_entry(entry))}", highlight=False)

        created = append_entry(entry, store_path)
        if created:
            console.print(f"[dim]新規ファイルを作成しました: {escape(str(store_path))}[/dim]")
        console.print("[green]✓[/green] 項目の登録が完了しました")

    except KakeiboError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        sys.exit(1)
