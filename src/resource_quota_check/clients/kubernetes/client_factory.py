# src/resource_quota_check/clients/kubernetes/client_factory.py
"""Kubernetes client factory."""

import structlog

from resource_quota_check.config.settings import CheckConfig
from .k8s_client import KubernetesClient

logger = structlog.get_logger(__name__)


class KubernetesClientFactory:
    """Builds connected Kubernetes clients from check configuration."""

    def __init__(self, config: CheckConfig):
        self.config = config
        self.logger = logger.bind(factory="kubernetes")

    def create_client(self) -> KubernetesClient:
        return KubernetesClient(kubeconfig=self.config.kubeconfig)

    async def create_connected_client(self) -> KubernetesClient:
        """Create a client and connect it; raises ClientConnectionException."""
        k8s_client = self.create_client()
        await k8s_client.connect()
        return k8s_client
