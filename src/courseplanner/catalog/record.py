"""Course records and the line parser that builds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from courseplanner.catalog.errors import EmptyTitleError, MalformedKeyError
from courseplanner.catalog.reference_set import PrerequisiteSet

DEFAULT_KEY_LENGTH = 7
DEFAULT_DELIMITER = ","

# Left behind when a CRLF file is split on "\n" only
_LINE_TERMINATORS = "\r\n"


@dataclass(frozen=True)
class CourseRecord:
    key: str
    title: str
    prerequisites: tuple[str, ...] = field(default_factory=tuple)
    key_length: int = field(default=DEFAULT_KEY_LENGTH, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.key) != self.key_length:
            raise MalformedKeyError(self.key, self.key_length)
        if not self.title:
            raise EmptyTitleError(self.key)
        # Accept any sequence, store an immutable one
        object.__setattr__(self, "prerequisites", tuple(self.prerequisites))


def _is_blank_field(value: str) -> bool:
    return value == "" or value.strip(_LINE_TERMINATORS) == ""


def parse_line(
    line: str,
    references: PrerequisiteSet,
    key_length: int = DEFAULT_KEY_LENGTH,
    delimiter: str = DEFAULT_DELIMITER,
    line_number: Optional[int] = None,
) -> CourseRecord:
    """Build a CourseRecord from one catalog line.

    Every prerequisite kept on the record is also registered in
    ``references`` so the loader can check them once the whole catalog is
    in. Prerequisite keys are not format-checked here; a bad one simply
    fails the existence check later.
    """
    fields = line.rstrip(_LINE_TERMINATORS).split(delimiter)

    key = fields[0]
    if len(key) != key_length:
        raise MalformedKeyError(key, key_length, line_number)

    title = fields[1] if len(fields) > 1 else ""
    if not title:
        raise EmptyTitleError(key, line_number)

    prerequisites = []
    for raw in fields[2:]:
        if _is_blank_field(raw):
            continue
        prerequisites.append(raw)
        references.register(raw)

    return CourseRecord(
        key=key,
        title=title,
        prerequisites=tuple(prerequisites),
        key_length=key_length,
    )
