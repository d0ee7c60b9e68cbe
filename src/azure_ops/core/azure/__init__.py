"""Azure core modules."""

from .resources import ResourceManager, create_resource_manager
from .subscription import SubscriptionManager, create_subscription_manager

__all__ = [
    "ResourceManager",
    "create_resource_manager",
    "SubscriptionManager",
    "create_subscription_manager",
]
