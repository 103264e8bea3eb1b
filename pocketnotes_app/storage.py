"""Storage utilities for persisting notes, one file per note."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from .buffers import (
    CONTENT_CAPACITY,
    MAX_NOTES,
    TITLE_CAPACITY,
    copy_truncating,
    decode,
    encode,
    is_safe_title,
)
from .notes import Note

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """Raised when note storage operations fail."""


class NoteRepository:
    """Maps each note to a file named after its title."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def ensure_directory(self) -> bool:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.warning("Could not create notes directory %s: %s", self.directory, exc)
            return False
        return True

    def path_for(self, title: str) -> Path:
        return self.directory / title

    def load_all(self, limit: int = MAX_NOTES) -> List[Note]:
        """Load up to ``limit`` notes in directory listing order.

        Only regular files count. Directories, symlinks and unreadable files
        are skipped, and anything past ``limit`` is ignored.
        """

        self.ensure_directory()
        notes: List[Note] = []
        try:
            entries = os.scandir(self.directory)
        except OSError as exc:
            logger.warning("Could not list notes directory %s: %s", self.directory, exc)
            return notes

        with entries:
            for entry in entries:
                if len(notes) >= limit:
                    logger.debug("Note limit %d reached, ignoring remaining files", limit)
                    break
                try:
                    if not entry.is_file(follow_symlinks=False):
                        continue
                    with open(entry.path, "rb") as handle:
                        raw = handle.read(CONTENT_CAPACITY - 1)
                except OSError as exc:
                    logger.debug("Skipping unreadable note %s: %s", entry.path, exc)
                    continue
                notes.append(Note(title=copy_truncating(TITLE_CAPACITY, entry.name), content=decode(raw)))

        logger.info("Loaded %d notes from %s", len(notes), self.directory)
        return notes

    def _write(self, title: str, content: str) -> None:
        if not is_safe_title(title):
            raise StorageError(f"Refusing to write note with unsafe title {title!r}")
        path = self.path_for(title)
        try:
            with open(path, "wb") as handle:
                if content:
                    handle.write(encode(content))
        except OSError as exc:
            raise StorageError(f"Failed to write note file at {path}") from exc

    def save(self, title: str, content: str) -> bool:
        """Persist a note, replacing any file with the same title.

        Failures are logged and reported through the return value only.
        """

        self.ensure_directory()
        try:
            self._write(title, content)
        except StorageError as exc:
            logger.warning("%s", exc)
            return False
        return True


__all__ = ["NoteRepository", "StorageError", "is_safe_title"]
