"""Core Azure Operations Module."""

from .models import ResourceRecord, SubscriptionInfo, TypeCount
from .processors import TextReportGenerator, count_by_type, newest_first

__all__ = [
    # Models
    "ResourceRecord",
    "SubscriptionInfo",
    "TypeCount",
    # Processors
    "TextReportGenerator",
    "count_by_type",
    "newest_first",
]
