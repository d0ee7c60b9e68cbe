"""Base job class for Azure operations."""

import uuid
from abc import ABC, abstractmethod
from typing import Any, Optional

from azure_ops.utils.config import ConfigManager
from azure_ops.utils.logger import setup_logger
from azure_ops.utils.session import SessionManager


class BaseJob(ABC):
    """Base class for all Azure operations jobs."""

    # Class-level configuration cache
    _config_manager: Optional[ConfigManager] = None

    def __init__(
        self,
        config_manager: Optional[ConfigManager] = None,
        job_name: Optional[str] = None,
    ):
        """Initialize the job with configuration."""
        if config_manager is not None:
            self.config_manager = config_manager
        else:
            self.config_manager = self._get_or_create_config_manager()

        self.job_name = job_name or self.__class__.__name__.lower().replace("job", "")
        self.correlation_id = str(uuid.uuid4())[:8]  # Short correlation ID for tracking

        self.logger = setup_logger(
            name=self.__class__.__module__,
            log_file=f"{self.job_name}.log",
            level=self.config_manager.get_logging_level(),
        )

    @classmethod
    def _get_or_create_config_manager(cls) -> ConfigManager:
        """Get or create a cached ConfigManager instance."""
        if cls._config_manager is None:
            cls._config_manager = ConfigManager()
        return cls._config_manager

    def create_azure_credential(self) -> Any:
        """Credential backed by the current Azure CLI login."""
        self.logger.info(f"[{self.correlation_id}] Using Azure CLI credential for {self.job_name}")
        return SessionManager.get_credential()

    @abstractmethod
    def execute(self, **kwargs) -> Any:
        """Execute the job with given parameters."""
        pass
