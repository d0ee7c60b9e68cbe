#!/usr/bin/env python3
"""
utils/session.py

Session management utilities for Azure interactions.

Authentication is delegated to an existing `az login`; this module only
reuses that session, it never signs in.
"""

import json
import shutil
import subprocess
from typing import Any, Dict, Optional

from azure.identity import AzureCliCredential

from azure_ops.core.constants import AZ_CLI_TIMEOUT
from .exceptions import SessionError
from .logger import setup_logger

logger = setup_logger(__name__, "session.log")


def run_az_command(*args: str, timeout: int = AZ_CLI_TIMEOUT) -> Dict[str, Any]:
    """Run an Azure CLI command with JSON output and return the parsed result."""
    az_path = shutil.which("az")
    if not az_path:
        raise SessionError("Azure CLI ('az') not found on PATH. Install it and run 'az login'.")

    cmd = [az_path, *args, "--output", "json"]
    logger.debug(f"Running: {' '.join(cmd)}")

    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except subprocess.TimeoutExpired:
        raise SessionError(f"Azure CLI command timed out after {timeout}s: az {' '.join(args)}")

    if result.returncode != 0:
        message = result.stderr.strip() or f"exit status {result.returncode}"
        raise SessionError(f"Azure CLI command failed (az {' '.join(args)}): {message}")

    try:
        return json.loads(result.stdout)
    except json.JSONDecodeError as e:
        raise SessionError(f"Unexpected output from az {' '.join(args)}: {e}")


def get_active_account() -> Dict[str, Any]:
    """Return the subscription currently selected in the Azure CLI session."""
    try:
        return run_az_command("account", "show")
    except SessionError as e:
        raise SessionError(f"No active Azure session. Please run 'az login'. ({e})")


class SessionManager:
    """Manages Azure credentials backed by the Azure CLI login."""

    _credential: Optional[AzureCliCredential] = None

    @classmethod
    def get_credential(cls, process_timeout: int = AZ_CLI_TIMEOUT) -> AzureCliCredential:
        """Return a shared AzureCliCredential."""
        if cls._credential is None:
            cls._credential = AzureCliCredential(process_timeout=process_timeout)
        return cls._credential

    @classmethod
    def reset(cls) -> None:
        cls._credential = None
