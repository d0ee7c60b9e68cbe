"""Shared fixtures for azure_ops tests."""

import os
import tempfile
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

# Keep rotating log files out of the working tree
os.environ.setdefault("AZURE_OPS_LOG_DIR", tempfile.mkdtemp(prefix="azure_ops_logs_"))

from azure_ops.core.models.resource import ResourceRecord  # noqa: E402
from azure_ops.core.models.subscription import SubscriptionInfo  # noqa: E402
from azure_ops.utils.config import ConfigManager  # noqa: E402

SUBSCRIPTION_ID = "11111111-2222-3333-4444-555555555555"


def make_record(name, created_time=None, resource_type="Microsoft.Storage/storageAccounts",
                resource_group="rg-app", location="eastus"):
    return ResourceRecord(
        name=name,
        resource_group=resource_group,
        type=resource_type,
        location=location,
        created_time=created_time,
    )


def make_sdk_resource(name, created_time=None, resource_type="Microsoft.Web/sites",
                      resource_group="rg-web", location="westeurope"):
    return SimpleNamespace(
        id=f"/subscriptions/{SUBSCRIPTION_ID}/resourceGroups/{resource_group}"
           f"/providers/{resource_type}/{name}",
        name=name,
        type=resource_type,
        location=location,
        created_time=created_time,
    )


@pytest.fixture
def subscription():
    return SubscriptionInfo(subscription_id=SUBSCRIPTION_ID, name="Production")


@pytest.fixture
def five_records():
    return [
        make_record("vm-1", "2024-01-01T08:00:00Z", "Microsoft.Compute/virtualMachines"),
        make_record("vm-2", "2024-03-01T08:00:00Z", "Microsoft.Compute/virtualMachines"),
        make_record("disk-1", "2024-02-01T08:00:00Z", "Microsoft.Compute/disks"),
        make_record("st-1", "2024-05-01T08:00:00Z"),
        make_record("vm-3", "2024-04-01T08:00:00Z", "Microsoft.Compute/virtualMachines"),
    ]


@pytest.fixture
def config_dir(tmp_path):
    directory = tmp_path / "configs"
    directory.mkdir()
    (directory / "settings.yaml").write_text(
        "azure:\n"
        "  subscription: \"\"\n"
        "report:\n"
        "  max_resources: 100\n"
        "  date_format: \"%Y-%m-%d %H:%M:%S\"\n"
        f"  path: \"{(tmp_path / 'reports').as_posix()}\"\n"
        "logging:\n"
        "  level: INFO\n",
        encoding="utf-8",
    )
    return directory


@pytest.fixture
def config_manager(config_dir, monkeypatch):
    for var in (
        "AZURE_SUBSCRIPTION_NAME",
        "AZURE_OPS_MAX_RESOURCES",
        "AZURE_OPS_DATE_FORMAT",
        "AZURE_OPS_REPORT_PATH",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    return ConfigManager(config_dir=config_dir)


@pytest.fixture
def utc():
    return timezone.utc


@pytest.fixture
def run_time():
    return datetime(2024, 6, 1, 12, 30, 45)
