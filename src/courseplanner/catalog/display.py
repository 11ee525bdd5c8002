"""Text rendering of course records and normalization of typed course numbers."""

from __future__ import annotations

from courseplanner.catalog.record import CourseRecord

SCHEDULE_HEADING = "Here is a sample schedule:"


def normalize_key(text: str) -> str:
    """Normalize a typed course number: strip surrounding whitespace."""
    return text.strip()


def format_summary(key: str, title: str) -> str:
    return f"{key}, {title}"


def format_details(record: CourseRecord) -> list[str]:
    """Summary line, plus a prerequisites line when the course has any."""
    lines = [format_summary(record.key, record.title)]
    if record.prerequisites:
        lines.append("Prerequisites: " + ", ".join(record.prerequisites))
    return lines
