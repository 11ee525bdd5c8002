"""CLI entry point for the course planner."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from courseplanner.catalog.display import SCHEDULE_HEADING, format_details, format_summary
from courseplanner.catalog.errors import CatalogError
from courseplanner.catalog.loader import Catalog
from courseplanner.config.observability import setup_logging
from courseplanner.config.settings import Settings


@click.group(invoke_without_command=True)
@click.option(
    "--catalog", "catalog_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to the course catalog CSV file",
)
@click.option("--log-level", default=None, help="Logging level (default from config)")
@click.pass_context
def main(ctx: click.Context, catalog_path: Path | None, log_level: str | None) -> None:
    """Course planner — load, list and look up courses."""
    settings = Settings.load()
    if catalog_path is not None:
        settings.catalog_path = catalog_path
    if log_level is not None:
        settings.log_level = log_level
    setup_logging(settings.log_level, settings.log_format)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["catalog_chosen"] = (
        catalog_path is not None or bool(os.environ.get("COURSEPLANNER_CATALOG"))
    )
    if ctx.invoked_subcommand is None:
        ctx.invoke(launch)


def _load_or_exit(settings: Settings) -> Catalog:
    catalog = Catalog.from_settings(settings)
    try:
        catalog.load_file(settings.catalog_path)
    except CatalogError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    return catalog


@main.command()
@click.pass_context
def launch(ctx: click.Context) -> None:
    """Launch the interactive catalog browser."""
    from courseplanner.app.main_app import CoursePlannerApp

    settings: Settings = ctx.obj["settings"]
    app = CoursePlannerApp(settings=settings, catalog_path=settings.catalog_path)
    app.run()


@main.command()
@click.pass_context
def menu(ctx: click.Context) -> None:
    """Run the numbered text menu in the terminal."""
    from courseplanner.menu import MenuSession

    settings: Settings = ctx.obj["settings"]
    if not ctx.obj.get("catalog_chosen"):
        answer = click.prompt(
            "Please enter the path to the csv data file",
            default=str(settings.catalog_path),
        )
        settings.catalog_path = Path(answer)
    if not settings.catalog_path.exists():
        click.echo(f"File {settings.catalog_path} does not exist", err=True)
        sys.exit(1)
    MenuSession(Catalog.from_settings(settings), settings.catalog_path).run()


@main.command(name="list")
@click.pass_context
def list_courses(ctx: click.Context) -> None:
    """Print every course in ascending course-number order."""
    catalog = _load_or_exit(ctx.obj["settings"])
    click.echo(SCHEDULE_HEADING)
    for key, title in catalog.list_ascending():
        click.echo(f"  {format_summary(key, title)}")


@main.command()
@click.argument("key")
@click.pass_context
def show(ctx: click.Context, key: str) -> None:
    """Show one course and its prerequisites."""
    catalog = _load_or_exit(ctx.obj["settings"])
    try:
        record = catalog.lookup(key.strip())
    except CatalogError as e:
        click.echo(str(e), err=True)
        sys.exit(1)
    if record is None:
        click.echo("No matching course found.", err=True)
        sys.exit(1)
    for line in format_details(record):
        click.echo(line)
