"""Azure Operations Jobs package."""

from .base import BaseJob
from .resources_by_date import ReportResult, ResourcesByDateJob

__all__ = [
    "BaseJob",
    "ReportResult",
    "ResourcesByDateJob",
]
