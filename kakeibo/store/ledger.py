"""Whole-file persistence of the ledger.

The store is always read and written in full. There is no incremental
append; a crash in the middle of save() can leave a truncated file.
"""

from pathlib import Path

from kakeibo.domain.entries import Entry
from kakeibo.domain.errors import DeserializationError, NoDataError, StoreReadError, StoreWriteError
from kakeibo.store import codec

DEFAULT_STORE_PATH = Path("store") / "data.json"


def read_text(path: Path) -> str:
    """Read the store file.

    Raises:
        StoreReadError: If the file is missing or cannot be read.
        DeserializationError: If the file is not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise StoreReadError(f"ファイルをオープンできませんでした: {path}") from e
    except UnicodeDecodeError as e:
        raise DeserializationError(f"デシリアライズに失敗しました: {path}: {e}") from e
    except OSError as e:
        raise StoreReadError(f"ファイルを読み込めませんでした: {path}: {e}") from e


def load_or_empty(path: Path) -> tuple[list[Entry], bool]:
    """Load the ledger, or start an empty one if the store does not exist.

    Args:
        path: Store file path.

    Returns:
        Tuple of (entries, created) where created is True when the store did
        not exist and will be created by the next save().

    Raises:
        DeserializationError: If the store exists but is malformed.
        StoreReadError: If the store exists but cannot be read.
    """
    if not path.exists():
        return [], True
    return codec.loads(read_text(path)), False


def load_or_fail(path: Path) -> list[Entry]:
    """Load the ledger, requiring at least one entry.

    Args:
        path: Store file path.

    Returns:
        Entries in stored order.

    Raises:
        StoreReadError: If the store is missing or unreadable.
        DeserializationError: If the store is malformed.
        NoDataError: If the store holds no entries.
    """
    entries = codec.loads(read_text(path))
    if not entries:
        raise NoDataError("データが存在しません")
    return entries


def save(entries: list[Entry], path: Path) -> None:
    """Overwrite the store with the full ledger.

    Args:
        entries: Complete ledger.
        path: Store file path. Parent directories are created as needed.

    Raises:
        StoreWriteError: If the file cannot be created or written.
    """
    text = codec.dumps(entries)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise StoreWriteError(f"ファイルへの書き込みに失敗しました: {path}: {e}") from e


def append_entry(entry: Entry, path: Path) -> bool:
    """Append one entry to the store (read, append, rewrite).

    Args:
        entry: New entry.
        path: Store file path.

    Returns:
        True if the store was newly created.
    """
    entries, created = load_or_empty(path)
    entries.append(entry)
    save(entries, path)
    return created
