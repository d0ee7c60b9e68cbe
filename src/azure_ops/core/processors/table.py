#!/usr/bin/env python3
"""Fixed-width table rendering for resource records."""

from datetime import tzinfo
from typing import Iterable, List, Optional

from azure_ops.core.constants import (
    DEFAULT_DATE_FORMAT,
    ELLIPSIS,
    NAME_KEEP_LENGTH,
    NAME_MAX_LENGTH,
    SEPARATOR,
    TABLE_COLUMNS,
    TYPE_KEEP_LENGTH,
    TYPE_MAX_LENGTH,
    UNKNOWN_TIME,
)
from azure_ops.core.models.resource import ResourceRecord, TypeCount


def truncate(value: str, max_length: int, keep_length: int) -> str:
    """Shorten values longer than max_length to keep_length chars plus an ellipsis."""
    if len(value) > max_length:
        return value[:keep_length] + ELLIPSIS
    return value


def format_created_time(
    record: ResourceRecord,
    date_format: str = DEFAULT_DATE_FORMAT,
    tz: Optional[tzinfo] = None,
) -> str:
    """Render the created time in local time (or tz), falling back to the raw value.

    Missing timestamps render as "Unknown".
    """
    if not record.has_created_time:
        return UNKNOWN_TIME

    created = record.created_at
    if created is None:
        return str(record.created_time)

    try:
        return created.astimezone(tz).strftime(date_format)
    except (ValueError, OverflowError, OSError):
        return str(record.created_time)


def format_row(*values: str) -> str:
    cells = [f"{value:<{width}}" for value, (_, width) in zip(values, TABLE_COLUMNS)]
    return " ".join(cells)


def header_lines() -> List[str]:
    return [SEPARATOR, format_row(*(header for header, _ in TABLE_COLUMNS)), SEPARATOR]


def format_record(
    record: ResourceRecord,
    date_format: str = DEFAULT_DATE_FORMAT,
    truncate_values: bool = True,
    tz: Optional[tzinfo] = None,
) -> str:
    """Format one record as a table row; truncation is for console display only."""
    name = record.name
    resource_type = record.type
    if truncate_values:
        name = truncate(name, NAME_MAX_LENGTH, NAME_KEEP_LENGTH)
        resource_type = truncate(resource_type, TYPE_MAX_LENGTH, TYPE_KEEP_LENGTH)

    return format_row(
        record.resource_group,
        name,
        resource_type,
        record.location,
        format_created_time(record, date_format, tz),
    )


def render_rows(
    records: Iterable[ResourceRecord],
    date_format: str = DEFAULT_DATE_FORMAT,
    truncate_values: bool = True,
    tz: Optional[tzinfo] = None,
) -> List[str]:
    return [format_record(record, date_format, truncate_values, tz) for record in records]


def render_type_counts(type_counts: Iterable[TypeCount]) -> List[str]:
    return [f"{item.count:<5} {item.type}" for item in type_counts]
