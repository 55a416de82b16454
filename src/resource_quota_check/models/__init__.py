from .quota_models import *

__all__ = [
    "ResourceKind",
    "CheckStatus",
    "QuotaUsage",
    "Violation",
    "QuotaWarning",
    "Finding",
    "CheckOutcome",
]
