"""Terminal front end for pocketnotes."""

from .app import PocketnotesPromptUI, run_ui, terminal_prompt

__all__ = ["PocketnotesPromptUI", "run_ui", "terminal_prompt"]
