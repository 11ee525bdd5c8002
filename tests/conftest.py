"""Shared fixtures for course planner tests."""

from __future__ import annotations

import logging

import pytest

SAMPLE_LINES = [
    "MATH201,Discrete Mathematics",
    "CSCI300,Introduction to Algorithms,CSCI200,MATH201",
    "CSCI350,Operating Systems,CSCI300",
    "CSCI101,Introduction to Programming in C++,CSCI100",
    "CSCI100,Introduction to Computer Science",
    "CSCI301,Advanced Programming in C++,CSCI101",
    "CSCI400,Large Software Development,CSCI301,CSCI350",
    "CSCI200,Data Structures,CSCI101",
]

SORTED_KEYS = [
    "CSCI100", "CSCI101", "CSCI200", "CSCI300",
    "CSCI301", "CSCI350", "CSCI400", "MATH201",
]


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep Settings.load() away from the real ~/.courseplanner."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("COURSEPLANNER_CATALOG", raising=False)
    monkeypatch.delenv("COURSEPLANNER_LOG_LEVEL", raising=False)
    return home


@pytest.fixture
def sample_lines():
    return list(SAMPLE_LINES)


@pytest.fixture
def sample_catalog_file(tmp_path):
    """The sample catalog written with Windows line endings."""
    path = tmp_path / "courses.csv"
    path.write_bytes(("\r\n".join(SAMPLE_LINES) + "\r\n").encode("utf-8"))
    return path


@pytest.fixture
def dangling_catalog_file(tmp_path):
    path = tmp_path / "dangling.csv"
    path.write_text(
        "CS10000,Intro,\n"
        "CS20000,Data Structures,CS10000\n"
        "CS30000,Algorithms,CS20000,CS99999\n"
    )
    return path


@pytest.fixture
def sorted_keys():
    return list(SORTED_KEYS)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches so they never outlive a CliRunner stream."""
    yield
    logger = logging.getLogger("courseplanner")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
