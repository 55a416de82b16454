"""Per-namespace resource quota scanning."""

from typing import List

import structlog

from resource_quota_check.check.evaluator import evaluate_quota
from resource_quota_check.core.base_client import ClusterClient
from resource_quota_check.core.cancellation import CancellationToken
from resource_quota_check.core.exceptions import QuotaListingException
from resource_quota_check.models.quota_models import Finding, QuotaWarning

logger = structlog.get_logger(__name__)


class QuotaScanner:
    """Lists the quotas of a namespace and evaluates each against the threshold."""

    def __init__(self, client: ClusterClient, threshold: float, log=None):
        self.client = client
        self.threshold = threshold
        self.logger = (log or logger).bind(component="QuotaScanner")

    async def scan(self, namespace: str, token: CancellationToken) -> List[Finding]:
        """Return the findings for one namespace.

        A listing failure is absorbed into a single QuotaWarning so that the
        remaining namespaces are still evaluated.
        """
        log = self.logger.bind(namespace=namespace)
        log.info("Looking at resource quotas")
        try:
            quotas = await self.client.list_resource_quotas(namespace, token)
        except QuotaListingException as e:
            log.warning("Failed to list resource quotas", error=e.message)
            return [QuotaWarning(namespace=namespace, error=e.message)]

        findings: List[Finding] = []
        for quota in quotas:
            log.debug(
                "Current usage",
                quota=quota.name,
                cpu_used=quota.cpu_used,
                cpu_hard=quota.cpu_hard,
                memory_used=quota.memory_used,
                memory_hard=quota.memory_hard,
            )
            findings.extend(evaluate_quota(quota, self.threshold))
        return findings
