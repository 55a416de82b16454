"""Drives one full pass of the resource quota check."""

from typing import List, Optional

import structlog

from resource_quota_check.check.filters import skip_reason
from resource_quota_check.check.scanner import QuotaScanner
from resource_quota_check.config.settings import CheckConfig
from resource_quota_check.core.base_client import ClusterClient
from resource_quota_check.core.cancellation import CancellationToken
from resource_quota_check.core.exceptions import NamespaceListingException
from resource_quota_check.models.quota_models import CheckOutcome, Finding

logger = structlog.get_logger(__name__)


class ResourceQuotaCheck:
    """Lists namespaces, filters them and scans the quotas of the rest.

    ``run`` never raises for expected conditions: a namespace listing error
    becomes a failed outcome and a fired token becomes an aborted outcome
    holding whatever was found before it fired.
    """

    def __init__(self,
                 client: ClusterClient,
                 config: CheckConfig,
                 log=None,
                 scanner: Optional[QuotaScanner] = None):
        self.client = client
        self.config = config
        self.logger = (log or logger).bind(component="ResourceQuotaCheck")
        self.scanner = scanner or QuotaScanner(client, config.threshold, log=log)

    async def run(self, token: CancellationToken) -> CheckOutcome:
        if token.cancelled:
            self.logger.warning("Check cancelled before it started", reason=token.reason)
            return CheckOutcome.aborted([], token.reason)

        try:
            namespaces = await self.client.list_namespaces(token)
        except NamespaceListingException as e:
            self.logger.error("Failed to list namespaces", error=e.message)
            return CheckOutcome.failed(e.message)

        findings: List[Finding] = []
        for namespace in namespaces:
            if token.cancelled:
                self.logger.warning(
                    "Check cancelled between namespaces",
                    reason=token.reason,
                    next_namespace=namespace,
                    findings=len(findings),
                )
                return CheckOutcome.aborted(findings, token.reason)

            reason = skip_reason(namespace, self.config)
            if reason is not None:
                self.logger.info(f"Skipping {namespace} namespace ({reason.capitalize()})")
                continue

            findings.extend(await self.scanner.scan(namespace, token))

        if findings:
            self.logger.info(f"This check created {len(findings)} errors and warnings")
        else:
            self.logger.info("No errors or warnings were created during this check")
        return CheckOutcome.completed(findings)
