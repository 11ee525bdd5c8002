"""Plain terminal menu loop over a Catalog session."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path
from typing import Optional

import click

from courseplanner.catalog.display import (
    SCHEDULE_HEADING,
    format_details,
    format_summary,
    normalize_key,
)
from courseplanner.catalog.errors import CatalogError
from courseplanner.catalog.loader import Catalog

MENU_TEXT = (
    "\n  /==============================\\\n"
    "  |  Menu                        |\n"
    "  |    1. Load Courses           |\n"
    "  |    2. Display Courses        |\n"
    "  |    3. Find Course by number  |\n"
    "  |    9. Exit                   |\n"
    "  \\==============================/\n"
)


class MenuChoice(IntEnum):
    LOAD_COURSES = 1
    DISPLAY_COURSES = 2
    FIND_COURSE = 3
    EXIT = 9

    @classmethod
    def parse(cls, text: str) -> Optional["MenuChoice"]:
        try:
            return cls(int(text.strip()))
        except ValueError:
            return None


class MenuSession:
    """Prompts for menu choices and runs them against one catalog."""

    def __init__(self, catalog: Catalog, catalog_path: Path):
        self.catalog = catalog
        self.catalog_path = catalog_path

    def choose(self) -> MenuChoice:
        while True:
            click.echo(MENU_TEXT)
            raw = click.prompt("Enter choice", default="", show_default=False)
            choice = MenuChoice.parse(raw)
            if choice is None:
                click.echo(f"{raw} is not a valid option.", err=True)
                continue
            return choice

    def load_courses(self) -> None:
        try:
            count = self.catalog.load_file(self.catalog_path)
        except CatalogError as e:
            click.echo(f"\nError: {e}", err=True)
            return
        click.echo(f"\nLoaded {count} courses")

    def print_courses(self) -> None:
        try:
            courses = self.catalog.list_ascending()
        except CatalogError as e:
            click.echo(f"\n{e}", err=True)
            return
        click.echo(f"\n  {SCHEDULE_HEADING}\n")
        for key, title in courses:
            click.echo(format_summary(key, title))

    def find_course(self) -> None:
        key = normalize_key(click.prompt(
            "What course do you want to know about?", default="", show_default=False,
        ))
        try:
            record = self.catalog.lookup(key)
        except CatalogError as e:
            click.echo(f"\n{e}", err=True)
            return
        if record is None:
            click.echo("\nNo matching course found.")
            return
        click.echo("")
        for line in format_details(record):
            click.echo(line)

    def run(self) -> None:
        click.echo("Welcome to the course planner.")
        actions = {
            MenuChoice.LOAD_COURSES: self.load_courses,
            MenuChoice.DISPLAY_COURSES: self.print_courses,
            MenuChoice.FIND_COURSE: self.find_course,
        }
        while True:
            choice = self.choose()
            if choice == MenuChoice.EXIT:
                break
            actions[choice]()
        click.echo("\nThank you for using the course planner!\n")
