#!/usr/bin/env python3
"""Ordering and aggregation of resource records."""

from collections import Counter
from datetime import datetime, timezone
from typing import Iterable, List, Tuple

from azure_ops.core.models.resource import ResourceRecord, TypeCount

# Missing or unparsable timestamps rank as the earliest possible value
_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


def creation_sort_key(record: ResourceRecord) -> Tuple[bool, datetime]:
    created = record.created_at
    return (created is not None, created or _EARLIEST)


def sort_by_creation(records: Iterable[ResourceRecord]) -> List[ResourceRecord]:
    """Stable ascending sort by created time."""
    return sorted(records, key=creation_sort_key)


def newest_first(records: Iterable[ResourceRecord]) -> List[ResourceRecord]:
    """Reverse of the ascending order; unknown timestamps end up last."""
    return list(reversed(sort_by_creation(records)))


def top_n(records: List[ResourceRecord], limit: int) -> List[ResourceRecord]:
    return records[: max(0, min(limit, len(records)))]


def count_by_type(records: Iterable[ResourceRecord]) -> List[TypeCount]:
    """Group records by type, most common first, ties by type name."""
    counts = Counter(record.type for record in records)
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [TypeCount(type=resource_type, count=count) for resource_type, count in ordered]
