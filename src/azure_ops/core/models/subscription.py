"""Subscription identity model."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class SubscriptionInfo:
    """Resolved subscription the report runs against."""

    subscription_id: str
    name: str
    tenant_id: Optional[str] = None
    state: Optional[str] = None

    @property
    def display(self) -> str:
        return f"{self.name} ({self.subscription_id})"

    @classmethod
    def from_cli_account(cls, account: Dict[str, Any]) -> "SubscriptionInfo":
        """Create SubscriptionInfo from `az account show` output."""
        return cls(
            subscription_id=account.get("id", ""),
            name=account.get("name", ""),
            tenant_id=account.get("tenantId"),
            state=account.get("state"),
        )

    @classmethod
    def from_azure_subscription(cls, subscription: Any) -> "SubscriptionInfo":
        """Create SubscriptionInfo from an SDK Subscription object."""
        state = getattr(subscription, "state", None)
        return cls(
            subscription_id=subscription.subscription_id,
            name=subscription.display_name or "",
            tenant_id=getattr(subscription, "tenant_id", None),
            state=getattr(state, "value", state),
        )
