"""Cluster access interface used by the quota check."""

from abc import ABC, abstractmethod
from typing import List, Optional
import structlog

from resource_quota_check.core.cancellation import CancellationToken
from resource_quota_check.models.quota_models import QuotaUsage

logger = structlog.get_logger(__name__)


class ClusterClient(ABC):
    """Abstract cluster client.

    Implementations expose the two listing calls the check needs. Both take
    the run's cancellation token so that each call can bound its own
    request timeout by the time left in the run.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name or self.__class__.__name__
        self._connected = False
        self.logger = logger.bind(client=self.name)

    @abstractmethod
    async def connect(self) -> None:
        """Build the API handles for the cluster."""
        pass

    async def disconnect(self) -> None:
        """Release the API handles."""
        self._connected = False

    @abstractmethod
    async def list_namespaces(self, token: CancellationToken) -> List[str]:
        """Return namespace names in listing order."""
        pass

    @abstractmethod
    async def list_resource_quotas(self, namespace: str, token: CancellationToken) -> List[QuotaUsage]:
        """Return the resource quotas of one namespace in listing order."""
        pass

    @property
    def is_connected(self) -> bool:
        return self._connected

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.disconnect()
