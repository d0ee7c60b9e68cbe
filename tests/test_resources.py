"""Tests for resource enumeration."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from azure.core.exceptions import HttpResponseError

from azure_ops.core.azure.resources import ResourceManager
from azure_ops.utils.exceptions import ResourceFetchError

from .conftest import SUBSCRIPTION_ID, make_sdk_resource


def test_list_resources_projects_records():
    client = MagicMock()
    client.resources.list.return_value = iter(
        [
            make_sdk_resource("app1", datetime(2024, 1, 1, tzinfo=timezone.utc)),
            make_sdk_resource("db1", None, "Microsoft.Sql/servers", "rg-data", "eastus"),
        ]
    )
    manager = ResourceManager(MagicMock(), SUBSCRIPTION_ID, client=client)

    records = manager.list_resources()

    client.resources.list.assert_called_once_with(expand="createdTime")
    assert [r.name for r in records] == ["app1", "db1"]
    assert records[1].resource_group == "rg-data"
    assert records[1].created_time is None


def test_list_resources_no_cap():
    client = MagicMock()
    client.resources.list.return_value = [make_sdk_resource(f"r{i}") for i in range(250)]
    manager = ResourceManager(MagicMock(), SUBSCRIPTION_ID, client=client)
    assert len(manager.list_resources()) == 250


def test_api_failure_raises_fetch_error():
    client = MagicMock()
    client.resources.list.side_effect = HttpResponseError("throttled")
    manager = ResourceManager(MagicMock(), SUBSCRIPTION_ID, client=client)
    with pytest.raises(ResourceFetchError, match=SUBSCRIPTION_ID):
        manager.list_resources()
