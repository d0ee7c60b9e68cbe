"""Exception classes and validation utilities for Azure operations.

Every fatal condition of a report run derives from ``CLIError`` so the
command layer can turn it into a readable message and a non-zero exit.
"""

import re


class CLIError(Exception):
    """Custom exception for CLI-related errors."""

    pass


class SessionError(CLIError):
    """No usable Azure CLI login session."""

    pass


class SubscriptionNotFoundError(CLIError):
    """The requested subscription is not visible to the signed-in account."""

    pass


class ResourceFetchError(CLIError):
    """Listing resources from Azure Resource Manager failed."""

    pass


class ReportWriteError(CLIError):
    """The report file could not be written."""

    pass


class ValidationRules:
    """Validation utilities for Azure identifiers and report settings."""

    @staticmethod
    def validate_subscription_id(subscription_id: str) -> bool:
        """Validate Azure subscription ID format (GUID)."""
        return bool(
            re.match(
                r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$",
                subscription_id or "",
            )
        )

    @staticmethod
    def validate_max_resources(value) -> int:
        """Coerce a display limit to a non-negative int or raise CLIError."""
        try:
            limit = int(value)
        except (TypeError, ValueError):
            raise CLIError(f"Invalid max_resources value: {value!r} (must be an integer)")
        if limit < 0:
            raise CLIError(f"Invalid max_resources value: {limit} (must not be negative)")
        return limit
