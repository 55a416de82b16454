from .exceptions import *
from .cancellation import CancellationToken
from .utils import *

__all__ = [
    "CancellationToken",
    "QuotaCheckException",
    "ConfigurationException",
    "ClientConnectionException",
    "NamespaceListingException",
    "QuotaListingException",
    "ReportingException",
    "retry_with_backoff",
    "setup_logging",
    "to_milli_value",
]
