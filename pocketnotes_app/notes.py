"""Core note operations for pocketnotes backed by a bounded in-memory store."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from .buffers import MAX_NOTES, TITLE_CAPACITY, append_line, copy_truncating, is_safe_title

if TYPE_CHECKING:
    from .storage import NoteRepository

logger = logging.getLogger(__name__)

NO_SELECTION = -1


@dataclass
class Note:
    title: str
    content: str = ""


class NoteStore:
    """Ordered, fixed-capacity collection of notes plus the current selection.

    Every mutation is flushed to the repository straight away. Capacity and
    length limits are enforced silently: rejected calls return ``None`` or
    ``False`` and leave the store untouched.
    """

    def __init__(self, repository: "NoteRepository", capacity: int = MAX_NOTES) -> None:
        self.repository = repository
        self.capacity = capacity
        self._notes: List[Note] = []
        self.selected = NO_SELECTION

    # ------------------------------------------------------------------
    @property
    def count(self) -> int:
        return len(self._notes)

    @property
    def is_full(self) -> bool:
        return self.count >= self.capacity

    @property
    def notes(self) -> List[Note]:
        return list(self._notes)

    def titles(self) -> List[str]:
        return [note.title for note in self._notes]

    def has_selection(self) -> bool:
        return 0 <= self.selected < self.count

    def selected_note(self) -> Optional[Note]:
        if self.has_selection():
            return self._notes[self.selected]
        return None

    # ------------------------------------------------------------------
    def load(self) -> int:
        """Replace the in-memory notes with what the repository holds."""

        self._notes = self.repository.load_all(self.capacity)[: self.capacity]
        self.selected = NO_SELECTION
        return self.count

    def create_note(self, title: str) -> Optional[int]:
        """Create an empty note and select it.

        Returns the new index, or ``None`` when the title is empty or unsafe or
        the store is full.
        """

        if not title:
            return None
        if self.is_full:
            logger.info("Note store full (%d), rejecting %r", self.capacity, title)
            return None

        title = copy_truncating(TITLE_CAPACITY, title)
        if not is_safe_title(title):
            logger.warning("Rejecting unsafe note title %r", title)
            return None

        self._notes.append(Note(title=title))
        self.repository.save(title, "")
        self.selected = self.count - 1
        logger.debug("Created note %r at index %d", title, self.selected)
        return self.selected

    def select_note(self, index: int) -> bool:
        if 0 <= index < self.count:
            self.selected = index
            return True
        return False

    def next_note(self) -> Optional[int]:
        if self.count == 0:
            return None
        self.selected = (self.selected + 1) % self.count
        return self.selected

    def previous_note(self) -> Optional[int]:
        if self.count == 0:
            return None
        self.selected = (self.selected - 1 + self.count) % self.count
        return self.selected

    def append_to_selected(self, text: str) -> bool:
        """Append a line to the selected note and save it.

        The note is written back even when the line did not fit, so the file
        always mirrors memory after the call.
        """

        note = self.selected_note()
        if note is None:
            return False

        note.content, applied = append_line(note.content, text)
        if not applied:
            logger.info("Note %r is full, line dropped", note.title)
        self.repository.save(note.title, note.content)
        return applied


__all__ = ["Note", "NoteStore", "NO_SELECTION"]
