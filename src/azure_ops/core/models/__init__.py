"""Simple data models for Azure resources."""

from .resource import (
    ResourceRecord,
    TypeCount,
    parse_resource_group,
    parse_timestamp,
)
from .subscription import SubscriptionInfo

__all__ = [
    "ResourceRecord",
    "TypeCount",
    "SubscriptionInfo",
    "parse_resource_group",
    "parse_timestamp",
]
