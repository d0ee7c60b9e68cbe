from azure_ops.cli import cli

cli()
