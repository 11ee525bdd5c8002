"""Exception hierarchy for catalog loading and queries."""

from __future__ import annotations

from typing import Optional


class CatalogError(Exception):
    """Base class for every error the catalog raises on purpose."""


class LoadError(CatalogError):
    """A load failed as a whole; the catalog holds no usable records."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class MalformedKeyError(LoadError):
    def __init__(self, key: str, expected_length: int, line_number: Optional[int] = None):
        self.key = key
        self.expected_length = expected_length
        super().__init__(
            f"invalid course number {key!r} (expected {expected_length} characters)",
            line_number,
        )


class EmptyTitleError(LoadError):
    def __init__(self, key: str, line_number: Optional[int] = None):
        self.key = key
        super().__init__(f"empty course title for {key}", line_number)


class UnresolvedPrerequisiteError(LoadError):
    """A prerequisite names a course that is not in the catalog."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Prerequisite course {key} does not exist")


class CatalogSourceError(LoadError):
    """The catalog source could not be opened or read."""


class InvalidQueryKeyError(CatalogError):
    def __init__(self, key: str, expected_length: int):
        self.key = key
        self.expected_length = expected_length
        super().__init__("Invalid course number")


class CatalogNotReadyError(CatalogError):
    def __init__(self, state: str):
        self.state = state
        super().__init__(f"No course catalog is loaded (state: {state})")
