"""Prompt_toolkit powered TUI for pocketnotes."""

from __future__ import annotations

from typing import Dict, List, Tuple

from prompt_toolkit import Application, PromptSession
from prompt_toolkit.application import get_app, run_in_terminal
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout
from prompt_toolkit.layout.containers import Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame

from ..buffers import copy_truncating
from ..navigation import Event, Mode, NoteNavigator, Snapshot
from ..notes import NoteStore

APP_TITLE = "pocketnotes"

HELP_TEXT: Dict[Mode, str] = {
    Mode.MENU: "up/down: move · enter: select · q: quit",
    Mode.NOTE_LIST: "up/down: move · enter: view · esc/b: back",
    Mode.VIEW_NOTE: "enter: add line · esc/b: back",
}

FRAME_TITLES: Dict[Mode, str] = {
    Mode.MENU: "MENU",
    Mode.NOTE_LIST: "NOTES",
    Mode.VIEW_NOTE: "NOTE",
}


def terminal_prompt(hint: str, max_length: int, initial_text: str) -> Tuple[str, bool]:
    """Blocking single-line prompt. Ctrl-C or Ctrl-D cancels."""

    session: PromptSession[str] = PromptSession()
    try:
        text = session.prompt(f"{hint}: ", default=initial_text, in_thread=True)
    except (EOFError, KeyboardInterrupt):
        return initial_text, False
    return copy_truncating(max_length + 1, text), True


class PocketnotesPromptUI:
    """Full-screen front end that renders navigator snapshots and feeds it key events."""

    def __init__(self, navigator: NoteNavigator) -> None:
        self.navigator = navigator

        self.header_control = FormattedTextControl(lambda: FormattedText([("class:header", f" {APP_TITLE}")]))
        self.body_control = FormattedTextControl(self._render_body, focusable=True, show_cursor=False)
        self.status_control = FormattedTextControl(self._render_status_bar)
        self.help_control = FormattedTextControl(self._render_help)

        self.body_window = Window(content=self.body_control, style="class:body", wrap_lines=True)
        self.body_frame = Frame(self.body_window, title=self._frame_title)
        self.header_window = Window(height=1, content=self.header_control, style="class:header")
        self.status_window = Window(height=1, content=self.status_control, style="class:status")
        self.help_window = Window(height=1, content=self.help_control, style="class:help")

        self.kb = self._build_key_bindings()
        self.style = Style.from_dict(
            {
                "frame": "bg:#181818 #e0e0e0",
                "frame.border": "#a0a0a0",
                "header": "bg:#181818 #a0a0a0 bold",
                "body": "bg:#181818 #e0e0e0",
                "item.selected": "bg:#181818 #ffffff bold reverse",
                "item.unselected": "bg:#181818 #e0e0e0",
                "note.title": "bg:#181818 #ffffff bold",
                "note.content": "bg:#181818 #e0e0e0",
                "status": "bg:#181818 #9ca3af",
                "help": "bg:#181818 #64748b",
            }
        )

        root = HSplit([self.header_window, self.body_frame, self.status_window, self.help_window])
        self.layout = Layout(root, focused_element=self.body_window)
        self.app = Application(layout=self.layout, key_bindings=self.kb, style=self.style, full_screen=True, mouse_support=False)

    # ------------------------------------------------------------------
    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("k")
        @kb.add("up")
        def _(event) -> None:
            self._dispatch(Event.UP)

        @kb.add("j")
        @kb.add("down")
        def _(event) -> None:
            self._dispatch(Event.DOWN)

        @kb.add("escape", eager=True)
        @kb.add("backspace")
        @kb.add("b")
        def _(event) -> None:
            self._dispatch(Event.BACK)

        @kb.add("q")
        def _(event) -> None:
            self._dispatch(Event.QUIT)

        @kb.add("enter")
        @kb.add("a")
        async def _(event) -> None:
            if self.navigator.prompts_on_confirm():
                await run_in_terminal(lambda: self._dispatch(Event.CONFIRM))
            else:
                self._dispatch(Event.CONFIRM)

        return kb

    def _dispatch(self, event: Event) -> None:
        if not self.navigator.handle(event):
            get_app().exit()
            return
        self._invalidate()

    # ------------------------------------------------------------------
    def _frame_title(self) -> str:
        return FRAME_TITLES[self.navigator.mode]

    def _render_body(self) -> FormattedText:
        snapshot = self.navigator.snapshot()
        if snapshot.mode is Mode.MENU:
            return self._render_choices(snapshot.menu_options, snapshot.selected_menu)
        if snapshot.mode is Mode.NOTE_LIST:
            if not snapshot.titles:
                return FormattedText([("class:body", " No notes found\n")])
            return self._render_choices(snapshot.titles, snapshot.selected_note)
        return self._render_note(snapshot)

    def _render_choices(self, labels: Tuple[str, ...], selected: int) -> FormattedText:
        fragments: List[Tuple[str, str]] = []
        for idx, label in enumerate(labels):
            style = "class:item.selected" if idx == selected else "class:item.unselected"
            fragments.append((style, f" {label} \n"))
        return FormattedText(fragments)

    def _render_note(self, snapshot: Snapshot) -> FormattedText:
        if snapshot.note_title is None:
            return FormattedText([("class:body", " No note selected\n")])
        return FormattedText(
            [
                ("class:note.title", f" {snapshot.note_title}\n\n"),
                ("class:note.content", snapshot.note_content or ""),
            ]
        )

    def _render_status_bar(self) -> FormattedText:
        snapshot = self.navigator.snapshot()
        status_part = f" · {snapshot.status}" if snapshot.status else ""
        store = self.navigator.store
        return FormattedText([("class:status", f"{store.count}/{store.capacity} notes{status_part}")])

    def _render_help(self) -> FormattedText:
        return FormattedText([("class:help", HELP_TEXT[self.navigator.mode])])

    def _invalidate(self) -> None:
        if hasattr(self, "app"):
            self.app.invalidate()

    def run(self) -> None:
        self.app.run()


def run_ui(store: NoteStore) -> None:
    """Launch the prompt_toolkit-based UI over a loaded store."""

    navigator = NoteNavigator(store, terminal_prompt)
    ui = PocketnotesPromptUI(navigator)
    ui.run()
