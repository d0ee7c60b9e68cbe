#!/usr/bin/env python3
"""Plain-text resource report generator."""

from datetime import datetime, tzinfo
from pathlib import Path
from typing import List, Optional

from azure_ops.core.constants import (
    DEFAULT_DATE_FORMAT,
    REPORT_FILE_EXTENSION,
    REPORT_FILE_PREFIX,
    REPORT_TIMESTAMP_FORMAT,
    REPORT_TITLE,
    TABLE_TITLE,
)
from azure_ops.core.models.resource import ResourceRecord
from azure_ops.core.models.subscription import SubscriptionInfo
from azure_ops.core.processors.table import header_lines, render_rows
from azure_ops.utils.exceptions import ReportWriteError
from azure_ops.utils.logger import setup_logger


def report_filename(run_time: datetime) -> str:
    return f"{REPORT_FILE_PREFIX}{run_time.strftime(REPORT_TIMESTAMP_FORMAT)}{REPORT_FILE_EXTENSION}"


class TextReportGenerator:
    """Writes the full, untruncated newest-first resource list to a text file."""

    def __init__(
        self,
        output_dir: str = ".",
        date_format: str = DEFAULT_DATE_FORMAT,
        tz: Optional[tzinfo] = None,
    ):
        """Initialize the text report generator."""
        self.output_dir = output_dir
        self.date_format = date_format
        self.tz = tz
        self.logger = setup_logger(__name__, "report_generator.log")

    def _ensure_output_dir(self) -> None:
        """Ensure the output directory exists."""
        Path(self.output_dir).mkdir(parents=True, exist_ok=True)

    def render(
        self,
        subscription: SubscriptionInfo,
        records: List[ResourceRecord],
        run_time: datetime,
    ) -> str:
        """Build the report body; records must already be newest-first."""
        lines = [
            REPORT_TITLE,
            "=" * 31,
            f"Subscription: {subscription.display}",
            f"Date: {run_time.strftime(self.date_format)}",
            f"Total Resources: {len(records)}",
            "",
            TABLE_TITLE,
            *header_lines(),
            *render_rows(records, self.date_format, truncate_values=False, tz=self.tz),
        ]
        return "\n".join(lines) + "\n"

    def generate_report(
        self,
        subscription: SubscriptionInfo,
        records: List[ResourceRecord],
        run_time: datetime,
    ) -> Path:
        """Write the report and return its path.

        The body is rendered before the file is opened; a failed write
        removes whatever was written and raises ReportWriteError.
        """
        content = self.render(subscription, records, run_time)
        output_path = Path(self.output_dir) / report_filename(run_time)

        try:
            self._ensure_output_dir()
            with open(output_path, "w", encoding="utf-8") as report_file:
                report_file.write(content)
        except OSError as e:
            self.logger.error(f"Error writing report {output_path}: {e}")
            if output_path.is_file():
                output_path.unlink()
            raise ReportWriteError(f"Failed to write report {output_path}: {e}")

        self.logger.info(f"Text report generated: {output_path} ({len(records)} records)")
        return output_path
