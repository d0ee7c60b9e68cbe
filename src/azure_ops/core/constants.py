#!/usr/bin/env python3
"""Core constants for Azure operations."""

# Report Defaults
DEFAULT_MAX_RESOURCES = 100
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_REPORT_PATH = "."

# Report Format Constants
REPORT_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
REPORT_FILE_PREFIX = "azure_resources_"
REPORT_FILE_EXTENSION = ".txt"
REPORT_TITLE = "Azure Resources By Creation Date"
TABLE_TITLE = "Resources by Creation Date (Most Recent First):"
SEPARATOR = "-" * 62
UNKNOWN_TIME = "Unknown"
ELLIPSIS = "..."

# Table layout: (header, width)
TABLE_COLUMNS = (
    ("Resource Group", 25),
    ("Name", 25),
    ("Type", 30),
    ("Location", 20),
    ("Created Time", 30),
)

# Console truncation: values longer than the limit keep the first N characters
NAME_MAX_LENGTH = 25
NAME_KEEP_LENGTH = 22
TYPE_MAX_LENGTH = 30
TYPE_KEEP_LENGTH = 27

# Azure Service Constants
CREATED_TIME_EXPAND = "createdTime"
AZ_CLI_TIMEOUT = 60
