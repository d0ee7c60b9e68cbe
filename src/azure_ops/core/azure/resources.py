"""Simple resource manager for Azure Resource Manager listings."""

from typing import Any, List, Optional

from azure.core.exceptions import AzureError
from azure.mgmt.resource import ResourceManagementClient

from azure_ops.core.constants import CREATED_TIME_EXPAND
from azure_ops.core.models.resource import ResourceRecord
from azure_ops.utils.exceptions import ResourceFetchError
from azure_ops.utils.logger import setup_logger


class ResourceManager:
    """Lists every resource in one subscription."""

    def __init__(
        self,
        credential: Any,
        subscription_id: str,
        client: Optional[ResourceManagementClient] = None,
    ):
        """Initialize ResourceManager."""
        self.subscription_id = subscription_id
        self.client = client or ResourceManagementClient(credential, subscription_id)
        self.logger = setup_logger(__name__, "resource_manager.log")

    def list_resources(self) -> List[ResourceRecord]:
        """Fetch all resources with their creation time; the pager handles paging."""
        try:
            resources = [
                ResourceRecord.from_azure_resource(resource)
                for resource in self.client.resources.list(expand=CREATED_TIME_EXPAND)
            ]
        except AzureError as e:
            self.logger.error(f"Error listing resources in {self.subscription_id}: {e}")
            raise ResourceFetchError(
                f"Failed to list resources in subscription {self.subscription_id}: {e}"
            )

        self.logger.info(f"Listed {len(resources)} resources in {self.subscription_id}")
        return resources


def create_resource_manager(credential: Any, subscription_id: str) -> ResourceManager:
    """Create ResourceManager instance."""
    return ResourceManager(credential, subscription_id)
