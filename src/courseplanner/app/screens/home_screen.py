"""Home screen: the load / display / find menu."""

from __future__ import annotations

from pathlib import Path

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Static

from courseplanner.app.widgets.output_pane import OutputPane
from courseplanner.catalog.display import (
    SCHEDULE_HEADING,
    format_details,
    format_summary,
    normalize_key,
)
from courseplanner.catalog.errors import CatalogError
from courseplanner.catalog.loader import Catalog


class HomeScreen(Screen):
    """Menu buttons on the left, results on the right."""

    BINDINGS = [
        ("1", "load_courses", "Load"),
        ("2", "display_courses", "Display"),
        ("3", "find_course", "Find"),
        ("9", "app.quit", "Exit"),
        ("escape", "focus_menu", "Menu"),
    ]

    CSS = """
    #menu {
        width: 32;
        padding: 1 2;
    }
    #menu Button {
        width: 100%;
        margin-bottom: 1;
    }
    #output-pane {
        border: round $accent;
    }
    #output-log {
        height: 1fr;
    }
    """

    def __init__(self, catalog: Catalog, catalog_path: Path, **kwargs) -> None:
        super().__init__(**kwargs)
        self.catalog = catalog
        self.catalog_path = catalog_path

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Horizontal():
            with Vertical(id="menu"):
                yield Static("[bold]Welcome to the course planner.[/]\n", id="welcome")
                yield Button("1. Load Courses", id="load-btn", variant="primary")
                yield Button("2. Display Courses", id="display-btn")
                yield Button("3. Find Course", id="find-btn")
                yield Button("9. Exit", id="exit-btn", variant="error")
            yield OutputPane()
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#load-btn", Button).focus()

    @property
    def output_pane(self) -> OutputPane:
        return self.query_one(OutputPane)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "load-btn":
            self.action_load_courses()
        elif event.button.id == "display-btn":
            self.action_display_courses()
        elif event.button.id == "find-btn":
            self.action_find_course()
        elif event.button.id == "exit-btn":
            self.app.exit()

    def action_load_courses(self) -> None:
        try:
            count = self.catalog.load_file(self.catalog_path)
        except CatalogError as e:
            self.output_pane.write_error(f"Error: {e}")
            self.output_pane.set_status("Load failed", ok=False)
            return
        self.output_pane.write_line(f"Loaded {count} courses", style="green")
        self.output_pane.set_status(f"{count} courses loaded", ok=True)

    def action_display_courses(self) -> None:
        try:
            courses = self.catalog.list_ascending()
        except CatalogError as e:
            self.output_pane.write_error(str(e))
            return
        self.output_pane.write_line(SCHEDULE_HEADING, style="bold")
        for key, title in courses:
            self.output_pane.write_line(format_summary(key, title))

    def action_find_course(self) -> None:
        self.query_one("#course-input").focus()

    def action_focus_menu(self) -> None:
        self.query_one("#load-btn", Button).focus()

    def on_output_pane_lookup_submitted(self, event: OutputPane.LookupSubmitted) -> None:
        self.find(event.key)
        # Hand the number keys back to the menu bindings
        self.action_focus_menu()

    def find(self, raw_key: str) -> None:
        try:
            record = self.catalog.lookup(normalize_key(raw_key))
        except CatalogError as e:
            self.output_pane.write_error(str(e))
            return
        if record is None:
            self.output_pane.write_line("No matching course found.", style="yellow")
            return
        for line in format_details(record):
            self.output_pane.write_line(line)
