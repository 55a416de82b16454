"""Custom exceptions for the resource quota check."""

from typing import Optional, Dict, Any


class QuotaCheckException(Exception):
    """Base exception for the resource quota check."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationException(QuotaCheckException):
    """Raised when configuration is invalid."""
    pass


class ClientConnectionException(QuotaCheckException):
    """Raised when client connections fail."""

    def __init__(self, client_type: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.client_type = client_type
        super().__init__(f"{client_type} connection failed: {message}", details)


class NamespaceListingException(QuotaCheckException):
    """Raised when the namespaces of the cluster cannot be listed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"error occurred listing namespaces from the cluster: {message}", details)


class QuotaListingException(QuotaCheckException):
    """Raised when the resource quotas of a namespace cannot be listed."""

    def __init__(self, namespace: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.namespace = namespace
        super().__init__(message, details)


class ReportingException(QuotaCheckException):
    """Raised when a check result cannot be delivered."""
    pass
