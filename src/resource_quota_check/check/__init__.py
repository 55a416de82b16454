from .evaluator import evaluate_quota
from .filters import should_skip_namespace, skip_reason
from .orchestrator import ResourceQuotaCheck
from .scanner import QuotaScanner

__all__ = [
    "evaluate_quota",
    "should_skip_namespace",
    "skip_reason",
    "QuotaScanner",
    "ResourceQuotaCheck",
]
