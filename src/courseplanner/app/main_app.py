"""Course planner Textual application."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from textual.app import App

from courseplanner.app.screens.home_screen import HomeScreen
from courseplanner.catalog.loader import Catalog
from courseplanner.config.observability import setup_app_logging
from courseplanner.config.settings import Settings


class CoursePlannerApp(App):
    """Interactive course catalog browser."""

    TITLE = "Course Planner"
    SUB_TITLE = "Advising assistance"

    BINDINGS = [
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        settings: Optional[Settings] = None,
        catalog_path: Optional[Path] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.settings = settings or Settings.load()
        self.catalog_path = catalog_path or self.settings.catalog_path
        self.catalog = Catalog.from_settings(self.settings)

    def on_mount(self) -> None:
        setup_app_logging(self.settings.log_level, self.settings.log_format)
        self.sub_title = f"Advising assistance — {self.catalog_path.name}"
        self.push_screen(HomeScreen(catalog=self.catalog, catalog_path=self.catalog_path))
