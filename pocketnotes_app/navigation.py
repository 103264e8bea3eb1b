"""Modal controller deciding which note operations are reachable."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from .buffers import CONTENT_CAPACITY, TITLE_CAPACITY
from .notes import NoteStore

logger = logging.getLogger(__name__)

MENU_OPTIONS: Tuple[str, ...] = ("New Note", "View Notes")
MENU_NEW_NOTE = 0
MENU_VIEW_NOTES = 1

TITLE_HINT = "Enter note title"
LINE_HINT = "Add a line to note"

TextPrompt = Callable[[str, int, str], Tuple[str, bool]]


class Mode(Enum):
    MENU = "menu"
    NOTE_LIST = "note_list"
    VIEW_NOTE = "view_note"


class Event(Enum):
    UP = "up"
    DOWN = "down"
    CONFIRM = "confirm"
    BACK = "back"
    QUIT = "quit"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the controller handed to the renderer each frame."""

    mode: Mode
    menu_options: Tuple[str, ...]
    selected_menu: int
    titles: Tuple[str, ...]
    selected_note: int
    note_title: Optional[str] = None
    note_content: Optional[str] = None
    status: str = ""


class NoteNavigator:
    """Menu / note list / note view state machine over a :class:`NoteStore`."""

    def __init__(self, store: NoteStore, prompt: TextPrompt) -> None:
        self.store = store
        self.prompt = prompt
        self.mode = Mode.MENU
        self.selected_menu = MENU_NEW_NOTE
        self.status = ""
        self._opened_from_menu = False

    def handle(self, event: Event) -> bool:
        """Apply one input event. Returns False once the application should quit."""

        previous = self.mode
        running = True
        if self.mode is Mode.MENU:
            running = self._handle_menu(event)
        elif self.mode is Mode.NOTE_LIST:
            self._handle_note_list(event)
        elif self.mode is Mode.VIEW_NOTE:
            self._handle_view_note(event)

        if self.mode is not previous:
            logger.debug("%s on %s -> %s", event.value, previous.value, self.mode.value)
        return running

    def prompts_on_confirm(self) -> bool:
        """Whether a CONFIRM in the current state opens the text prompt."""

        if self.mode is Mode.MENU:
            return self.selected_menu == MENU_NEW_NOTE
        return self.mode is Mode.VIEW_NOTE

    # ------------------------------------------------------------------
    def _handle_menu(self, event: Event) -> bool:
        if event is Event.QUIT:
            return False
        if event in (Event.UP, Event.DOWN):
            self.selected_menu = (self.selected_menu + 1) % len(MENU_OPTIONS)
        elif event is Event.CONFIRM:
            if self.selected_menu == MENU_NEW_NOTE:
                self._new_note()
            elif self.store.count > 0:
                self.store.select_note(0)
                self.mode = Mode.NOTE_LIST
            else:
                self.status = "No notes yet"
        return True

    def _new_note(self) -> None:
        title, accepted = self.prompt(TITLE_HINT, TITLE_CAPACITY - 1, "")
        if not accepted:
            return
        if not title:
            self.status = "Title cannot be empty"
            return
        if self.store.is_full:
            self.status = "Note store is full"
            return

        index = self.store.create_note(title)
        if index is None:
            self.status = "Note could not be created"
            return
        self._opened_from_menu = True
        self.mode = Mode.VIEW_NOTE
        self.status = "Note created"

    def _handle_note_list(self, event: Event) -> None:
        if event is Event.BACK:
            self.mode = Mode.MENU
        elif event is Event.UP:
            self.store.previous_note()
        elif event is Event.DOWN:
            self.store.next_note()
        elif event is Event.CONFIRM and self.store.has_selection():
            self._opened_from_menu = False
            self.mode = Mode.VIEW_NOTE

    def _handle_view_note(self, event: Event) -> None:
        if event is Event.BACK:
            if self._opened_from_menu or not self.store.has_selection():
                self.mode = Mode.MENU
            else:
                self.mode = Mode.NOTE_LIST
            self._opened_from_menu = False
        elif event is Event.CONFIRM:
            text, accepted = self.prompt(LINE_HINT, CONTENT_CAPACITY - 1, "")
            if not accepted:
                return
            if self.store.append_to_selected(text):
                self.status = "Line added"
            else:
                self.status = "Note is full"

    # ------------------------------------------------------------------
    def snapshot(self) -> Snapshot:
        note = self.store.selected_note() if self.mode is Mode.VIEW_NOTE else None
        return Snapshot(
            mode=self.mode,
            menu_options=MENU_OPTIONS,
            selected_menu=self.selected_menu,
            titles=tuple(self.store.titles()),
            selected_note=self.store.selected,
            note_title=note.title if note else None,
            note_content=note.content if note else None,
            status=self.status,
        )


__all__ = ["Event", "Mode", "NoteNavigator", "Snapshot", "TextPrompt", "MENU_OPTIONS"]
