"""Tests for the Textual catalog browser."""

from __future__ import annotations

import pytest

from courseplanner.app.main_app import CoursePlannerApp
from courseplanner.app.screens.home_screen import HomeScreen
from courseplanner.app.widgets.output_pane import OutputPane
from courseplanner.catalog.loader import LoadState
from courseplanner.config.settings import Settings


def _app(path) -> CoursePlannerApp:
    return CoursePlannerApp(settings=Settings(catalog_path=path))


@pytest.mark.asyncio
async def test_load_and_display_with_keys(sample_catalog_file):
    app = _app(sample_catalog_file)
    async with app.run_test() as pilot:
        await pilot.press("1")
        await pilot.pause()
        assert app.catalog.state == LoadState.READY

        await pilot.press("2")
        await pilot.pause()
        history = app.screen.query_one(OutputPane).history
        assert history[0] == "Loaded 8 courses"
        assert history[1] == "Here is a sample schedule:"
        assert history[2] == "CSCI100, Introduction to Computer Science"
        assert history[-1] == "MATH201, Discrete Mathematics"


@pytest.mark.asyncio
async def test_find_through_input(sample_catalog_file):
    app = _app(sample_catalog_file)
    async with app.run_test() as pilot:
        await pilot.press("1", "3")
        await pilot.press(*"CSCI200")
        await pilot.press("enter")
        await pilot.pause()
        history = app.screen.query_one(OutputPane).history
        assert history[-2:] == ["CSCI200, Data Structures", "Prerequisites: CSCI101"]


@pytest.mark.asyncio
async def test_errors_are_reported(dangling_catalog_file):
    app = _app(dangling_catalog_file)
    async with app.run_test() as pilot:
        screen = app.screen
        assert isinstance(screen, HomeScreen)
        screen.action_load_courses()
        screen.find("CS10000")
        screen.find("CS1")
        await pilot.pause()
        history = screen.query_one(OutputPane).history
        assert history[0] == "Error: Prerequisite course CS99999 does not exist"
        assert history[1].startswith("No course catalog is loaded")
        assert history[2] == "Invalid course number"
        assert app.catalog.state == LoadState.FAILED


@pytest.mark.asyncio
async def test_exit_key(sample_catalog_file):
    app = _app(sample_catalog_file)
    async with app.run_test() as pilot:
        await pilot.press("9")
        await pilot.pause()
    assert app.return_code == 0


@pytest.mark.asyncio
async def test_failed_load_writes_nothing_to_stderr(dangling_catalog_file, capfd):
    app = CoursePlannerApp(
        settings=Settings(catalog_path=dangling_catalog_file, log_level="DEBUG"),
    )
    async with app.run_test() as pilot:
        await pilot.press("1")
        await pilot.pause()
        assert app.catalog.state == LoadState.FAILED
        err = capfd.readouterr().err
    assert "CS99999" not in err
    assert "courseplanner" not in err


@pytest.mark.asyncio
async def test_menu_keys_work_after_lookup(sample_catalog_file):
    app = _app(sample_catalog_file)
    async with app.run_test() as pilot:
        await pilot.press("1", "3", *"CSCI100", "enter")
        await pilot.pause()
        await pilot.press("2")
        await pilot.pause()
        history = app.screen.query_one(OutputPane).history
        assert "CSCI100, Introduction to Computer Science" in history
        assert history[-9] == "Here is a sample schedule:"
        assert history[-1] == "MATH201, Discrete Mathematics"


@pytest.mark.asyncio
async def test_escape_leaves_course_input(sample_catalog_file):
    app = _app(sample_catalog_file)
    async with app.run_test() as pilot:
        await pilot.press("3")
        await pilot.pause()
        assert app.focused.id == "course-input"
        await pilot.press("escape")
        await pilot.pause()
        assert app.focused.id == "load-btn"
        await pilot.press("1")
        await pilot.pause()
        assert app.catalog.state == LoadState.READY
