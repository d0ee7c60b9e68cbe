#!/usr/bin/env python3
"""
utils/config.py

Simple configuration management utilities.
Provides centralized configuration loading.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from azure_ops.core.constants import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_MAX_RESOURCES,
    DEFAULT_REPORT_PATH,
)
from azure_ops.utils.exceptions import ValidationRules
from azure_ops.utils.logger import setup_logger

logger = setup_logger(__name__, "config.log")


class ConfigManager:
    """
    Simple configuration manager.

    Features:
    - YAML configuration loading
    - Environment variable override support
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize ConfigManager.

        Args:
            config_dir: Custom config directory path (defaults to
                AZURE_OPS_CONFIG_DIR, then PROJECT_ROOT/configs)
        """
        self.project_root = Path(__file__).parent.parent.parent.parent
        env_dir = os.environ.get("AZURE_OPS_CONFIG_DIR")
        self.config_dir = Path(config_dir or env_dir or (self.project_root / "configs"))

        # Try both .yml and .yaml extensions
        yml_file = self.config_dir / "settings.yml"
        yaml_file = self.config_dir / "settings.yaml"

        if yml_file.exists():
            self.settings_file = yml_file
        elif yaml_file.exists():
            self.settings_file = yaml_file
        else:
            self.settings_file = yaml_file  # Default to .yaml for error messages

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load a YAML file safely.
        """
        if not file_path.exists():
            logger.warning(f"Config file not found: {file_path}")
            return {}

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
                return content or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Error loading {file_path}: {e}")
            return {}

    def load_settings(self) -> Dict[str, Any]:
        """
        Load application settings.
        """
        return self._load_yaml_file(self.settings_file)

    def get_value(
        self, key_path: str, default: Any = None, env_var: Optional[str] = None
    ) -> Any:
        """
        Get configuration value with dot notation support and environment variable override.
        """
        # Check environment variable first
        if env_var and env_var in os.environ:
            return os.environ[env_var]

        keys = key_path.split(".")
        current = self.config

        try:
            for key in keys:
                current = current[key]
            return default if current is None else current
        except (KeyError, TypeError):
            return default

    def get_subscription_name(self) -> str:
        """Get subscription override; empty means the active CLI subscription."""
        return str(
            self.get_value("azure.subscription", "", env_var="AZURE_SUBSCRIPTION_NAME")
        ).strip()

    def get_max_resources(self) -> int:
        """Get the console row limit."""
        value = self.get_value(
            "report.max_resources", DEFAULT_MAX_RESOURCES, env_var="AZURE_OPS_MAX_RESOURCES"
        )
        return ValidationRules.validate_max_resources(value)

    def get_date_format(self) -> str:
        """Get the strftime format used for created times."""
        return self.get_value(
            "report.date_format", DEFAULT_DATE_FORMAT, env_var="AZURE_OPS_DATE_FORMAT"
        )

    def get_report_path(self) -> str:
        """Get report output path."""
        return str(
            self.get_value("report.path", DEFAULT_REPORT_PATH, env_var="AZURE_OPS_REPORT_PATH")
        )

    def get_logging_level(self) -> str:
        """Get logging level."""
        return self.get_value("logging.level", "INFO", env_var="LOG_LEVEL")

    @property
    def config(self) -> Dict[str, Any]:
        """Get the full configuration as a cached property."""
        if not hasattr(self, "_cached_config"):
            self._cached_config = self.load_settings()
        return self._cached_config

    def reload_config(self) -> None:
        """Force reload of configuration from file."""
        if hasattr(self, "_cached_config"):
            delattr(self, "_cached_config")
