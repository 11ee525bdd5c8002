"""Catalog session state machine: clear → load → validate → ready/failed."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

from courseplanner.catalog.errors import (
    CatalogNotReadyError,
    CatalogSourceError,
    InvalidQueryKeyError,
    LoadError,
    UnresolvedPrerequisiteError,
)
from courseplanner.catalog.record import (
    DEFAULT_DELIMITER,
    DEFAULT_KEY_LENGTH,
    CourseRecord,
    parse_line,
)
from courseplanner.catalog.reference_set import DEFAULT_CAPACITY, PrerequisiteSet
from courseplanner.catalog.store import CourseStore
from courseplanner.config.settings import Settings

logger = logging.getLogger(__name__)


class LoadState(str, Enum):
    EMPTY = "empty"
    LOADING = "loading"
    VALIDATING = "validating"
    READY = "ready"
    FAILED = "failed"


class Catalog:
    """One session's course catalog.

    Every load discards the previous contents first, so a failed reload
    leaves the catalog empty rather than holding the last good one.
    """

    def __init__(
        self,
        key_length: int = DEFAULT_KEY_LENGTH,
        delimiter: str = DEFAULT_DELIMITER,
        reference_capacity: int = DEFAULT_CAPACITY,
    ):
        self.key_length = key_length
        self.delimiter = delimiter
        self.reference_capacity = reference_capacity
        self.store = CourseStore()
        self.state = LoadState.EMPTY
        self.last_error: Optional[LoadError] = None
        self._references: Optional[PrerequisiteSet] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Catalog":
        return cls(
            key_length=settings.key_length,
            delimiter=settings.delimiter,
            reference_capacity=settings.reference_set_capacity,
        )

    @property
    def is_ready(self) -> bool:
        return self.state == LoadState.READY

    def load(self, lines: Iterable[str]) -> int:
        """Rebuild the catalog from ``lines`` and return the number of courses.

        Raises a LoadError subclass on the first malformed line or the first
        prerequisite that names a missing course.
        """
        self.store.clear()
        self.state = LoadState.EMPTY
        self.last_error = None

        try:
            count = self._populate(lines)
            self._validate_pending()
        except LoadError as e:
            self._fail(e)
            raise

        self.state = LoadState.READY
        logger.info("Loaded %d courses (tree height %d)", count, self.store.height())
        return count

    def load_file(self, path: Path | str) -> int:
        path = Path(path)
        logger.info("Loading catalog from %s", path)
        try:
            f = open(path, encoding="utf-8-sig")
        except OSError as e:
            raise self._fail(CatalogSourceError(f"Cannot read {path}: {e.strerror or e}")) from e
        with f:
            try:
                return self.load(f)
            except UnicodeDecodeError as e:
                raise self._fail(CatalogSourceError(f"{path} is not UTF-8 text: {e.reason}")) from e

    def _fail(self, error: LoadError) -> LoadError:
        self.store.clear()
        self._references = None
        self.state = LoadState.FAILED
        self.last_error = error
        return error

    def _populate(self, lines: Iterable[str]) -> int:
        self.state = LoadState.LOADING
        self._references = PrerequisiteSet(self.reference_capacity)
        count = 0
        for line_number, line in enumerate(lines, start=1):
            # Blank lines are skipped, not rejected as malformed keys
            if not line.strip():
                continue
            record = parse_line(
                line,
                self._references,
                key_length=self.key_length,
                delimiter=self.delimiter,
                line_number=line_number,
            )
            if self.store.insert(record):
                logger.warning(
                    "Duplicate course %s on line %d replaces the earlier entry",
                    record.key, line_number,
                )
            else:
                count += 1
        return count

    def _validate_pending(self) -> None:
        self.state = LoadState.VALIDATING
        references, self._references = self._references, None
        if references.is_empty():
            logger.debug("No prerequisites to validate")
            return
        for key in references.drain_for_validation():
            if not self.store.exists(key):
                # Front-ends report the raised error; keep the log quiet
                logger.debug("Prerequisite course %s does not exist", key)
                raise UnresolvedPrerequisiteError(key)
        logger.debug("Validated %d distinct prerequisites", references.size())

    def _require_ready(self) -> None:
        if self.state != LoadState.READY:
            raise CatalogNotReadyError(self.state.value)

    def list_ascending(self) -> list[tuple[str, str]]:
        self._require_ready()
        return [(r.key, r.title) for r in self.store.enumerate()]

    def records(self) -> list[CourseRecord]:
        self._require_ready()
        return list(self.store.enumerate())

    def lookup(self, key: str) -> Optional[CourseRecord]:
        """Return the course for ``key``, or None if the catalog has no such course."""
        if not key or len(key) != self.key_length:
            raise InvalidQueryKeyError(key, self.key_length)
        self._require_ready()
        return self.store.search(key)
