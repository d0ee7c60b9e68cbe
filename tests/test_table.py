"""Tests for table formatting and truncation."""

from datetime import timezone

import pytest

from azure_ops.core.constants import SEPARATOR
from azure_ops.core.processors.table import (
    format_created_time,
    format_record,
    format_row,
    header_lines,
    render_rows,
    render_type_counts,
    truncate,
)
from azure_ops.core.models.resource import TypeCount

from .conftest import make_record

LONG_NAME = "a-very-long-resource-name-here"
LONG_TYPE = "Microsoft.Network/networkSecurityGroups/securityRules"


class TestTruncate:
    def test_long_name(self):
        assert truncate(LONG_NAME, 25, 22) == LONG_NAME[:22] + "..."
        assert truncate(LONG_NAME, 25, 22) == "a-very-long-resource-n..."

    @pytest.mark.parametrize("length", [0, 1, 24, 25])
    def test_at_or_below_limit_unchanged(self, length):
        value = "x" * length
        assert truncate(value, 25, 22) == value

    def test_one_over_limit(self):
        assert truncate("x" * 26, 25, 22) == "x" * 22 + "..."


class TestFormatCreatedTime:
    def test_formats_in_requested_timezone(self):
        record = make_record("r", "2024-01-05T10:20:30.1234567Z")
        assert format_created_time(record, "%Y-%m-%d %H:%M:%S", timezone.utc) == "2024-01-05 10:20:30"

    def test_converts_offset(self):
        record = make_record("r", "2024-01-05T10:20:30+02:00")
        assert format_created_time(record, "%H:%M", timezone.utc) == "08:20"

    def test_missing_is_unknown(self):
        assert format_created_time(make_record("r", None)) == "Unknown"

    def test_unparsable_falls_back_to_raw(self):
        assert format_created_time(make_record("r", "sometime last week")) == "sometime last week"


class TestRows:
    def test_header(self):
        lines = header_lines()
        assert lines[0] == SEPARATOR == lines[2]
        assert lines[1].startswith("Resource Group" + " " * 11 + " Name")
        assert lines[1].rstrip().endswith("Created Time")

    def test_row_widths(self):
        row = format_row("rg", "name", "type", "loc", "time")
        assert row == f"{'rg':<25} {'name':<25} {'type':<30} {'loc':<20} {'time':<30}"

    def test_console_row_truncates(self):
        record = make_record(LONG_NAME, None, resource_type=LONG_TYPE)
        row = format_record(record, truncate_values=True)
        assert "a-very-long-resource-n..." in row
        assert LONG_TYPE[:27] + "..." in row
        assert LONG_NAME not in row
        assert row.rstrip().endswith("Unknown")

    def test_report_row_keeps_full_values(self):
        record = make_record(LONG_NAME, None, resource_type=LONG_TYPE)
        row = format_record(record, truncate_values=False)
        assert LONG_NAME in row
        assert LONG_TYPE in row

    def test_render_rows(self, five_records):
        rows = render_rows(five_records, tz=timezone.utc)
        assert len(rows) == 5
        assert rows[0].startswith("rg-app")
        assert "2024-01-01 08:00:00" in rows[0]

    def test_type_counts(self):
        lines = render_type_counts([TypeCount("Microsoft.Web/sites", 12), TypeCount("b", 3)])
        assert lines == ["12    Microsoft.Web/sites", "3     b"]
