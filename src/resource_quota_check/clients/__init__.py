from .kuberhealthy import KuberhealthyReporter
from .kubernetes.client_factory import KubernetesClientFactory

__all__ = ["KuberhealthyReporter", "KubernetesClientFactory"]
