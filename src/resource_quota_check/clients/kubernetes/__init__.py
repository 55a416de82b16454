from .client_factory import KubernetesClientFactory
from .k8s_client import KubernetesClient

__all__ = ["KubernetesClientFactory", "KubernetesClient"]
