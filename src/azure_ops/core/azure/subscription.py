"""Subscription resolution for Azure operations."""

from typing import Callable, Dict, Any, List, Optional

from azure.core.exceptions import AzureError
from azure.mgmt.subscription import SubscriptionClient

from azure_ops.core.models.subscription import SubscriptionInfo
from azure_ops.utils.exceptions import (
    SessionError,
    SubscriptionNotFoundError,
    ValidationRules,
)
from azure_ops.utils.logger import setup_logger
from azure_ops.utils.session import get_active_account


class SubscriptionManager:
    """Resolves which subscription a report runs against.

    Without an override the subscription selected in the Azure CLI session
    is used. With an override, subscriptions visible to the credential are
    searched by display name or id; the CLI's own selection is left as is.
    """

    def __init__(
        self,
        credential: Any,
        account_loader: Callable[[], Dict[str, Any]] = get_active_account,
        client: Optional[SubscriptionClient] = None,
    ):
        """Initialize SubscriptionManager."""
        self.credential = credential
        self.account_loader = account_loader
        self._client = client
        self.logger = setup_logger(__name__, "subscription_manager.log")

    @property
    def client(self) -> SubscriptionClient:
        if self._client is None:
            self._client = SubscriptionClient(self.credential)
        return self._client

    def get_active_subscription(self) -> SubscriptionInfo:
        """Subscription currently selected by `az login` / `az account set`."""
        account = self.account_loader()
        subscription = SubscriptionInfo.from_cli_account(account)
        if not subscription.subscription_id:
            raise SessionError("Active Azure session did not report a subscription id")
        self.logger.info(f"Using active subscription {subscription.display}")
        return subscription

    def list_subscriptions(self) -> List[SubscriptionInfo]:
        """List subscriptions visible to the credential."""
        try:
            return [
                SubscriptionInfo.from_azure_subscription(sub)
                for sub in self.client.subscriptions.list()
            ]
        except AzureError as e:
            raise SessionError(f"Failed to list subscriptions: {e}")

    def find_subscription(self, name_or_id: str) -> SubscriptionInfo:
        """Find a subscription by display name (case-insensitive) or id."""
        wanted = name_or_id.strip()
        subscriptions = self.list_subscriptions()

        if ValidationRules.validate_subscription_id(wanted):
            matches = [s for s in subscriptions if s.subscription_id.lower() == wanted.lower()]
        else:
            matches = [s for s in subscriptions if s.name.lower() == wanted.lower()]

        if not matches:
            raise SubscriptionNotFoundError(
                f"Subscription '{wanted}' not found. "
                f"Available: {', '.join(s.name for s in subscriptions) or 'none'}"
            )
        if len(matches) > 1:
            self.logger.warning(
                f"Multiple subscriptions named '{wanted}', using {matches[0].subscription_id}"
            )

        self.logger.info(f"Using subscription {matches[0].display}")
        return matches[0]

    def resolve(self, override: Optional[str] = None) -> SubscriptionInfo:
        """Resolve the override, or the active subscription when it is empty."""
        if override and override.strip():
            return self.find_subscription(override)
        return self.get_active_subscription()


def create_subscription_manager(credential: Any) -> SubscriptionManager:
    """Create SubscriptionManager instance."""
    return SubscriptionManager(credential)
