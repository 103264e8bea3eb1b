"""Command-line interface entry point for pocketnotes."""

from __future__ import annotations

import logging
import sys
from typing import Sequence

from .config import get_settings
from .logging_config import setup_logging
from .notes import NoteStore
from .storage import NoteRepository

logger = logging.getLogger(__name__)


def _open_store() -> NoteStore:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file, json_output=settings.json_logs)
    store = NoteStore(NoteRepository(settings.notes_dir))
    store.load()
    return store


def _parse_index(raw: str, store: NoteStore) -> int | None:
    try:
        index = int(raw)
    except ValueError:
        print(f"❌ Not a note index: {raw}")
        return None
    if not store.select_note(index):
        print(f"❌ No note at index {index}")
        return None
    return index


def _handle_list(store: NoteStore) -> int:
    if store.count == 0:
        print("No notes yet. Create one with: pocketnotes new <title>")
        return 0
    for index, title in enumerate(store.titles()):
        print(f"[{index}] {title}")
    return 0


def _handle_show(store: NoteStore, args: Sequence[str]) -> int:
    if len(args) != 1:
        print("Usage: pocketnotes show <index>")
        return 1
    if _parse_index(args[0], store) is None:
        return 1
    note = store.selected_note()
    print(note.title)
    print("-" * len(note.title))
    if note.content:
        print(note.content)
    return 0


def _handle_new(store: NoteStore, args: Sequence[str]) -> int:
    title = " ".join(args)
    if not title:
        print("❌ Note title cannot be empty")
        return 1
    index = store.create_note(title)
    if index is None:
        if store.is_full:
            print(f"❌ Note store is full ({store.capacity} notes)")
        else:
            print(f"❌ Could not create note: {title}")
        return 1
    print(f"✅ Created note [{index}] {store.selected_note().title}")
    return 0


def _handle_append(store: NoteStore, args: Sequence[str]) -> int:
    if len(args) < 2:
        print("Usage: pocketnotes append <index> <text>")
        return 1
    if _parse_index(args[0], store) is None:
        return 1
    if not store.append_to_selected(" ".join(args[1:])):
        print("❌ Note is full, line not added")
        return 1
    print("✅ Line added")
    return 0


def _print_help() -> None:
    print("pocketnotes - tiny bounded note manager")
    print()
    print("Commands:")
    print("  home                     open the terminal UI (default)")
    print("  list                     list notes with their index")
    print("  show <index>             print a note")
    print("  new <title>              create an empty note")
    print("  append <index> <text>    add a line to a note")
    print("  help                     show this message")


def _handle_home(store: NoteStore) -> int:
    try:
        from .promptui import run_ui
    except ImportError:  # pragma: no cover - optional dependency
        print("❌ prompt_toolkit is not installed.")
        print("   Install it with `pip install prompt_toolkit` to enable the UI.")
        return 1
    try:
        run_ui(store)
    except Exception as exc:  # pragma: no cover - terminal failures
        logger.exception("UI crashed")
        print("❌ Failed to launch the UI:", exc)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else sys.argv[1:]
    command, *rest = args or ["home"]

    if command == "help":
        _print_help()
        return 0

    store = _open_store()

    if command == "home":
        return _handle_home(store)

    if command == "list":
        return _handle_list(store)

    if command == "show":
        return _handle_show(store, rest)

    if command == "new":
        return _handle_new(store, rest)

    if command == "append":
        return _handle_append(store, rest)

    print(f"Unknown command: {command}")
    print("Use 'pocketnotes help' to see available commands")
    return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
