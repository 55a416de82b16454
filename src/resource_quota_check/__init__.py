"""Kuberhealthy check that alerts on nearly exhausted resource quotas."""

__version__ = "0.1.0"
