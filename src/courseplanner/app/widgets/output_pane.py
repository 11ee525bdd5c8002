"""Output pane for course listings, lookups, and load status."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Input, RichLog, Static


class OutputPane(Vertical):
    """Scrolling log of results, the course number input, and catalog status."""

    class LookupSubmitted(Message):
        """Fired when the user submits a course number."""
        def __init__(self, key: str) -> None:
            super().__init__()
            self.key = key

    def __init__(self, **kwargs) -> None:
        super().__init__(id="output-pane", **kwargs)
        self.border_title = "Output"
        # Plain text of everything written, oldest first
        self.history: list[str] = []

    def compose(self) -> ComposeResult:
        yield RichLog(highlight=False, markup=False, id="output-log")
        yield Input(
            placeholder="Course number, e.g. CSCI100 (Enter to look up)",
            id="course-input",
        )
        yield Static("● No catalog loaded", id="catalog-status")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.post_message(self.LookupSubmitted(event.value))
        event.input.clear()

    def write_line(self, text: str, style: str = "") -> None:
        self.history.append(text)
        self.query_one("#output-log", RichLog).write(Text(text, style=style))

    def write_error(self, text: str) -> None:
        self.write_line(text, style="red")

    def clear(self) -> None:
        self.history.clear()
        self.query_one("#output-log", RichLog).clear()

    def set_status(self, text: str, ok: bool) -> None:
        marker = "[green]●[/]" if ok else "[red]●[/]"
        self.query_one("#catalog-status", Static).update(f"{marker} {text}")
