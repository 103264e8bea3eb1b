"""Shared test fixtures."""

from pathlib import Path
from typing import List, Tuple

import pytest

from pocketnotes_app.config import get_settings
from pocketnotes_app.notes import NoteStore
from pocketnotes_app.storage import NoteRepository


class ScriptedPrompt:
    """Text prompt stand-in that replays queued (text, accepted) answers."""

    def __init__(self, *answers: Tuple[str, bool]) -> None:
        self.answers: List[Tuple[str, bool]] = list(answers)
        self.calls: List[Tuple[str, int, str]] = []

    def queue(self, text: str, accepted: bool = True) -> None:
        self.answers.append((text, accepted))

    def __call__(self, hint: str, max_length: int, initial_text: str) -> Tuple[str, bool]:
        self.calls.append((hint, max_length, initial_text))
        if not self.answers:
            return initial_text, False
        return self.answers.pop(0)


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    return tmp_path / "notes"


@pytest.fixture
def repository(notes_dir: Path) -> NoteRepository:
    return NoteRepository(notes_dir)


@pytest.fixture
def store(repository: NoteRepository) -> NoteStore:
    store = NoteStore(repository)
    store.load()
    return store


@pytest.fixture
def prompt() -> ScriptedPrompt:
    return ScriptedPrompt()


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the settings at a temporary data directory."""
    data_dir = tmp_path / "data"
    for name in ("NOTES_DIR", "LOG_FILE", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DATA_DIR", str(data_dir))
    get_settings.cache_clear()
    yield data_dir
    get_settings.cache_clear()
