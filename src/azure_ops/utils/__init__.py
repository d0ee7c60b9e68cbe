# utils/__init__.py

from .config import ConfigManager
from .exceptions import (
    CLIError,
    ReportWriteError,
    ResourceFetchError,
    SessionError,
    SubscriptionNotFoundError,
    ValidationRules,
)
from .logger import setup_logger
from .session import SessionManager, get_active_account, run_az_command

__all__ = [
    "ConfigManager",
    "CLIError",
    "ReportWriteError",
    "ResourceFetchError",
    "SessionError",
    "SubscriptionNotFoundError",
    "ValidationRules",
    "setup_logger",
    "SessionManager",
    "get_active_account",
    "run_az_command",
]
