"""Simple data models for Azure resource reporting."""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

_RESOURCE_GROUP_PATTERN = re.compile(r"/resourceGroups/([^/]+)", re.IGNORECASE)
_FRACTION_PATTERN = re.compile(r"\.(\d+)")


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ARM timestamp into an aware datetime.

    Accepts a trailing ``Z`` and the 7-digit fractional seconds Azure emits.
    Returns None for missing or unparsable input; never raises.
    """
    if not value or not isinstance(value, str):
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    # fromisoformat only takes up to microseconds on older interpreters
    text = _FRACTION_PATTERN.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_resource_group(resource_id: Optional[str]) -> str:
    """Extract the resource group name from an ARM resource id."""
    if not resource_id:
        return ""
    match = _RESOURCE_GROUP_PATTERN.search(resource_id)
    return match.group(1) if match else ""


@dataclass(frozen=True)
class ResourceRecord:
    """Projected view of one Azure resource."""

    name: str
    resource_group: str
    type: str
    location: str
    created_time: Optional[str] = None

    @property
    def created_at(self) -> Optional[datetime]:
        return parse_timestamp(self.created_time)

    @property
    def has_created_time(self) -> bool:
        return self.created_time is not None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResourceRecord":
        """Create ResourceRecord from `az resource list` style JSON."""
        created = data.get("createdTime")
        if isinstance(created, datetime):
            created = created.isoformat()
        return cls(
            name=data.get("name") or "",
            resource_group=data.get("resourceGroup") or "",
            type=data.get("type") or "",
            location=data.get("location") or "",
            created_time=created,
        )

    @classmethod
    def from_azure_resource(cls, resource: Any) -> "ResourceRecord":
        """Create ResourceRecord from an SDK GenericResourceExpanded."""
        created = getattr(resource, "created_time", None)
        if isinstance(created, datetime):
            created = created.isoformat()
        elif created is not None:
            created = str(created)

        return cls(
            name=getattr(resource, "name", None) or "",
            resource_group=parse_resource_group(getattr(resource, "id", None)),
            type=getattr(resource, "type", None) or "",
            location=getattr(resource, "location", None) or "",
            created_time=created,
        )


@dataclass(frozen=True)
class TypeCount:
    """Number of resources sharing one resource type."""

    type: str
    count: int
