#!/usr/bin/env python3
"""
Azure Ops - CLI
Subscription resource reporting toolkit
"""

import click

from azure_ops import __version__
from azure_ops.utils.decorators import report_operation


@click.group()
@click.pass_context
def cli(ctx):
    """Azure Ops - Subscription resource reporting"""
    ctx.ensure_object(dict)


@cli.command()
@click.option(
    "--subscription",
    "-s",
    default=None,
    help="Subscription name or id (default: active 'az login' subscription)",
)
@click.option(
    "--max-resources",
    "-n",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum resources shown in the console table (default: 100)",
)
@click.option("--output-dir", type=click.Path(file_okay=False), help="Report output directory")
@click.option("--date-format", help="strftime format for created times")
@click.option("--verbose", is_flag=True, help="Enable verbose output")
@click.pass_context
@report_operation()
def resources(ctx, subscription, max_resources, output_dir, date_format, verbose):
    """List resources by creation date and save a detailed report"""
    # All processing logic is handled by the decorator
    pass


@cli.command()
def version():
    """Show version information"""
    click.echo(f"Azure Ops Version {__version__}")
    click.echo("Azure subscription resource reporting toolkit")


if __name__ == "__main__":
    cli()
