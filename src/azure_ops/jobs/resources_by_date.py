#!/usr/bin/env python3
"""List subscription resources newest first and save a detailed report."""

import time
from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from pathlib import Path
from typing import Callable, List, Optional

import click

from azure_ops.core.azure.resources import create_resource_manager
from azure_ops.core.azure.subscription import create_subscription_manager
from azure_ops.core.constants import REPORT_TITLE, SEPARATOR, TABLE_TITLE
from azure_ops.core.models.resource import ResourceRecord, TypeCount
from azure_ops.core.models.subscription import SubscriptionInfo
from azure_ops.core.processors.ranking import count_by_type, newest_first, top_n
from azure_ops.core.processors.report_generator import TextReportGenerator
from azure_ops.core.processors.table import header_lines, render_rows, render_type_counts
from azure_ops.jobs.base import BaseJob
from azure_ops.utils.config import ConfigManager
from azure_ops.utils.exceptions import ValidationRules


@dataclass
class ReportResult:
    """Outcome of one report run."""

    subscription: SubscriptionInfo
    total_resources: int
    displayed_resources: int
    report_path: Path
    type_counts: List[TypeCount] = field(default_factory=list)
    execution_time: float = 0.0


class ResourcesByDateJob(BaseJob):
    """Report of every resource in a subscription, ordered by creation date.

    Steps run strictly in order: resolve subscription, list resources,
    order newest first, write the unbounded report file, then print the
    bounded table and counts per type. Any failure aborts the run before
    either the report file or the table is produced.
    """

    def __init__(
        self,
        config_manager: ConfigManager = None,
        subscription_manager_factory: Optional[Callable] = None,
        resource_manager_factory: Optional[Callable] = None,
        tz: Optional[tzinfo] = None,
    ):
        super().__init__(config_manager=config_manager, job_name="resources_by_date")
        self.subscription_manager_factory = subscription_manager_factory
        self.resource_manager_factory = resource_manager_factory
        self.tz = tz

    def _print_table(
        self, records: List[ResourceRecord], date_format: str
    ) -> None:
        click.secho(TABLE_TITLE, bold=True, fg="blue")
        for line in header_lines():
            click.secho(line, bold=True)
        for line in render_rows(records, date_format, truncate_values=True, tz=self.tz):
            click.echo(line)
        click.secho(SEPARATOR, bold=True)

    def _print_type_counts(self, type_counts: List[TypeCount]) -> None:
        click.echo("")
        click.secho("Resource Counts by Type:", bold=True, fg="cyan")
        for line in render_type_counts(type_counts):
            click.echo(line)

    def execute(
        self,
        subscription: Optional[str] = None,
        max_resources: Optional[int] = None,
        output_dir: Optional[str] = None,
        date_format: Optional[str] = None,
        **kwargs,
    ) -> ReportResult:
        """Execute the resources-by-date report."""
        start = time.time()
        run_time = datetime.now()

        subscription_override = (
            subscription if subscription is not None else self.config_manager.get_subscription_name()
        )
        limit = (
            ValidationRules.validate_max_resources(max_resources)
            if max_resources is not None
            else self.config_manager.get_max_resources()
        )
        date_format = date_format or self.config_manager.get_date_format()
        output_dir = output_dir or self.config_manager.get_report_path()

        self.logger.info(
            f"[{self.correlation_id}] Starting report (subscription override: "
            f"{subscription_override or 'none'}, max resources: {limit})"
        )

        credential = self.create_azure_credential()
        subscription_factory = self.subscription_manager_factory or create_subscription_manager
        subscription_info = subscription_factory(credential).resolve(
            subscription_override
        )

        self.logger.info(f"[{self.correlation_id}] Fetching resources in {subscription_info.display}")
        resource_factory = self.resource_manager_factory or create_resource_manager
        resource_manager = resource_factory(
            credential, subscription_info.subscription_id
        )
        records = resource_manager.list_resources()
        total = len(records)
        self.logger.info(f"[{self.correlation_id}] Found {total} resources")

        ordered = newest_first(records)
        displayed = top_n(ordered, limit)
        type_counts = count_by_type(records)

        # Console output starts only once the report file is on disk
        generator = TextReportGenerator(output_dir=output_dir, date_format=date_format, tz=self.tz)
        report_path = generator.generate_report(subscription_info, ordered, run_time)

        click.secho(f"=== {REPORT_TITLE} ===", bold=True)
        click.echo("")
        click.echo(f"{click.style('Subscription:', bold=True)} {subscription_info.display}")
        click.echo(f"{click.style('Date:', bold=True)} {run_time.strftime(date_format)}")
        click.echo("")
        click.secho(f"Found {total} resources in subscription", bold=True, fg="green")
        click.echo("")

        self._print_table(displayed, date_format)
        self._print_type_counts(type_counts)

        click.echo("")
        click.secho("Note: Some resources might not have creation time data available.", fg="yellow")
        click.secho(
            f"Showing up to {limit} resources. Use --max-resources or report.max_resources to see more.",
            fg="yellow",
        )
        click.secho(f"Done! Full resource list saved to {report_path}", fg="green")

        execution_time = time.time() - start
        self.logger.info(
            f"[{self.correlation_id}] Report complete: {len(displayed)}/{total} displayed, "
            f"saved to {report_path} in {execution_time:.2f}s"
        )

        return ReportResult(
            subscription=subscription_info,
            total_resources=total,
            displayed_resources=len(displayed),
            report_path=report_path,
            type_counts=type_counts,
            execution_time=execution_time,
        )
