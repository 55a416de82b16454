"""Shared fixtures for the resource quota check tests."""

from typing import Dict, List, Optional

import pytest

from resource_quota_check.config.settings import CheckConfig
from resource_quota_check.core.base_client import ClusterClient
from resource_quota_check.core.cancellation import CancellationToken
from resource_quota_check.core.exceptions import NamespaceListingException, QuotaListingException
from resource_quota_check.models.quota_models import QuotaUsage

CONFIG_ENV_VARS = (
    "BLACKLIST",
    "WHITELIST",
    "THRESHOLD",
    "DEBUG",
    "KUBECONFIG",
    "CHECK_TIME_LIMIT",
    "KH_CHECK_RUN_DEADLINE",
    "KH_REPORTING_URL",
    "KH_RUN_UUID",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate every test from the caller's environment and any .env file."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class FakeClusterClient(ClusterClient):
    """In-memory cluster client.

    ``quotas`` maps namespace to its quotas; a namespace mapped to an
    exception raises it from ``list_resource_quotas``.
    """

    def __init__(self,
                 namespaces: List[str],
                 quotas: Optional[Dict[str, object]] = None,
                 namespace_error: Optional[Exception] = None,
                 on_scan=None):
        super().__init__("FakeClusterClient")
        self.namespaces = namespaces
        self.quotas = quotas or {}
        self.namespace_error = namespace_error
        self.on_scan = on_scan
        self.scanned: List[str] = []
        self._connected = True
        self.disconnected = False

    async def connect(self) -> None:
        self._connected = True

    async def disconnect(self) -> None:
        self.disconnected = True
        await super().disconnect()

    async def list_namespaces(self, token: CancellationToken) -> List[str]:
        if self.namespace_error is not None:
            raise self.namespace_error
        return list(self.namespaces)

    async def list_resource_quotas(self, namespace: str, token: CancellationToken) -> List[QuotaUsage]:
        self.scanned.append(namespace)
        if self.on_scan is not None:
            self.on_scan(namespace, token)
        value = self.quotas.get(namespace, [])
        if isinstance(value, Exception):
            raise value
        return list(value)


def quota(namespace: str, cpu=(0, 0), memory=(0, 0), name: str = "compute") -> QuotaUsage:
    return QuotaUsage(
        name=name,
        namespace=namespace,
        cpu_used=cpu[0],
        cpu_hard=cpu[1],
        memory_used=memory[0],
        memory_hard=memory[1],
    )


@pytest.fixture
def make_config():
    def _make(**kwargs) -> CheckConfig:
        return CheckConfig(**kwargs)
    return _make


@pytest.fixture
def namespace_listing_error():
    return NamespaceListingException("connection refused")


@pytest.fixture
def quota_listing_error():
    return QuotaListingException("app-b", "forbidden")
