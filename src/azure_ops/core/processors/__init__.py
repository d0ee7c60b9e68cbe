"""Core processors for resource reporting."""

from .ranking import count_by_type, newest_first, sort_by_creation, top_n
from .report_generator import TextReportGenerator, report_filename
from .table import format_created_time, format_record, render_rows, truncate

__all__ = [
    "TextReportGenerator",
    "count_by_type",
    "format_created_time",
    "format_record",
    "newest_first",
    "render_rows",
    "report_filename",
    "sort_by_creation",
    "top_n",
    "truncate",
]
