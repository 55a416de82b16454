# src/resource_quota_check/clients/kubernetes/k8s_client.py
"""Kubernetes client for namespace and resource quota listing."""

import asyncio
from pathlib import Path
from typing import Dict, List, Optional
import structlog
from kubernetes import client, config
from kubernetes.client.rest import ApiException

from resource_quota_check.core.base_client import ClusterClient
from resource_quota_check.core.cancellation import CancellationToken
from resource_quota_check.core.exceptions import (
    ClientConnectionException,
    NamespaceListingException,
    QuotaListingException,
)
from resource_quota_check.core.utils import retry_with_backoff, to_milli_value
from resource_quota_check.models.quota_models import QuotaUsage

logger = structlog.get_logger(__name__)

DEFAULT_KUBECONFIG = Path(".kube") / "config"

NAMESPACE_LIST_ATTEMPTS = 3

# Quota keys per dimension. Falling back to the requests.* alias is deliberate:
# Kubernetes treats "cpu" and "requests.cpu" as the same quota.
CPU_KEYS = ("cpu", "requests.cpu")
MEMORY_KEYS = ("memory", "requests.memory")


def kubeconfig_path(kubeconfig: Optional[str] = None) -> str:
    """Determine the kubeconfig file path for local use."""
    if kubeconfig:
        return kubeconfig
    try:
        return str(Path.home() / DEFAULT_KUBECONFIG)
    except RuntimeError as e:
        raise ClientConnectionException("Kubernetes", f"failed to resolve home directory: {e}")


def _first_quantity(resources: Optional[Dict[str, str]], keys) -> Optional[str]:
    if not resources:
        return None
    for key in keys:
        if key in resources:
            return resources[key]
    return None


def quota_usage_from_api(quota: client.V1ResourceQuota) -> QuotaUsage:
    """Convert an API ResourceQuota into milli-unit used/hard pairs."""
    status = quota.status
    hard = status.hard if status else None
    used = status.used if status else None
    return QuotaUsage(
        name=quota.metadata.name,
        namespace=quota.metadata.namespace,
        cpu_used=to_milli_value(_first_quantity(used, CPU_KEYS)),
        cpu_hard=to_milli_value(_first_quantity(hard, CPU_KEYS)),
        memory_used=to_milli_value(_first_quantity(used, MEMORY_KEYS)),
        memory_hard=to_milli_value(_first_quantity(hard, MEMORY_KEYS)),
    )


class KubernetesClient(ClusterClient):
    """Cluster client backed by the official Kubernetes API client."""

    def __init__(self, kubeconfig: Optional[str] = None, request_timeout: float = 60.0):
        super().__init__("KubernetesClient")
        self.kubeconfig = kubeconfig
        self.request_timeout = request_timeout
        self.v1: Optional[client.CoreV1Api] = None

    async def connect(self) -> None:
        """Connect using the in-cluster config, falling back to a kubeconfig file."""
        try:
            config.load_incluster_config()
            self.logger.info("Loaded in-cluster configuration")
        except config.ConfigException as in_cluster_error:
            self.logger.debug("In-cluster configuration unavailable", error=str(in_cluster_error))
            path = kubeconfig_path(self.kubeconfig)
            try:
                config.load_kube_config(config_file=path)
            except Exception as e:
                raise ClientConnectionException("Kubernetes", f"failed to load kubeconfig {path}: {e}")
            self.logger.info(f"Loaded kubeconfig from {path}")

        try:
            self.v1 = client.CoreV1Api()
        except Exception as e:
            raise ClientConnectionException("Kubernetes", f"failed to create kube client: {e}")

        self._connected = True
        self.logger.info("Kubernetes client created")

    async def disconnect(self) -> None:
        """Disconnect from Kubernetes cluster."""
        if self.v1 is not None:
            self.v1.api_client.close()
            self.v1 = None
        self._connected = False

    def _timeout_for(self, token: CancellationToken) -> float:
        remaining = token.remaining()
        if remaining is None:
            return self.request_timeout
        return max(min(remaining, self.request_timeout), 1.0)

    async def _list_namespace_items(self, token: CancellationToken) -> List[client.V1Namespace]:
        result = await asyncio.to_thread(self.v1.list_namespace, _request_timeout=self._timeout_for(token))
        return result.items

    async def list_namespaces(self, token: CancellationToken) -> List[str]:
        """List namespace names in the order returned by the API."""
        if not self._connected:
            raise NamespaceListingException("Kubernetes client not connected")
        try:
            retrying = retry_with_backoff(max_retries=NAMESPACE_LIST_ATTEMPTS, exceptions=(ApiException,), token=token)
            items = await retrying(self._list_namespace_items)(token)
        except Exception as e:
            raise NamespaceListingException(str(e))

        names = [ns.metadata.name for ns in items]
        self.logger.info(f"Listed {len(names)} namespaces")
        return names

    async def list_resource_quotas(self, namespace: str, token: CancellationToken) -> List[QuotaUsage]:
        """List resource quotas in one namespace. Not retried."""
        if not self._connected:
            raise QuotaListingException(namespace, "Kubernetes client not connected")
        try:
            result = await asyncio.to_thread(
                self.v1.list_namespaced_resource_quota,
                namespace,
                _request_timeout=self._timeout_for(token),
            )
        except Exception as e:
            raise QuotaListingException(namespace, str(e))

        return [quota_usage_from_api(rq) for rq in result.items]
