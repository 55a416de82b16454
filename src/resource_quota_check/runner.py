"""Execution envelope around one resource quota check pass."""

import sys
from datetime import timedelta
from typing import Any, Awaitable, Callable, Dict, List, Optional

import structlog

from resource_quota_check.check.orchestrator import ResourceQuotaCheck
from resource_quota_check.clients.kuberhealthy.deadline import resolve_check_time_limit
from resource_quota_check.clients.kuberhealthy.reporter import KuberhealthyReporter
from resource_quota_check.clients.kubernetes.client_factory import KubernetesClientFactory
from resource_quota_check.config.settings import CheckConfig
from resource_quota_check.core.base_client import ClusterClient
from resource_quota_check.core.cancellation import CancellationToken
from resource_quota_check.core.exceptions import (
    ClientConnectionException,
    ConfigurationException,
    ReportingException,
)
from resource_quota_check.core.interrupts import InterruptListener
from resource_quota_check.core.utils import setup_logging
from resource_quota_check.models.quota_models import CheckOutcome, CheckStatus

logger = structlog.get_logger(__name__)

TIMEOUT_MESSAGE = "Check took too long and timed out."

EXIT_REPORTED = 0
EXIT_REPORT_FAILED = 1


async def connect_kubernetes(cfg: CheckConfig) -> ClusterClient:
    return await KubernetesClientFactory(cfg).create_connected_client()


def fault_message(error: BaseException) -> str:
    return str(error) or error.__class__.__name__


def outcome_errors(outcome: CheckOutcome) -> List[str]:
    """Translate an outcome into report error strings; empty means success."""
    if outcome.status is CheckStatus.FAILED:
        return [outcome.error or "check failed"]
    if outcome.status is CheckStatus.ABORTED:
        return [TIMEOUT_MESSAGE] + outcome.messages
    return outcome.messages


def apply_debug_settings(cfg: CheckConfig) -> None:
    if not cfg.debug:
        return
    setup_logging(log_level="DEBUG")
    logger.info("Debug logging enabled")
    logger.debug("Command line", argv=sys.argv)


class CheckRunner:
    """Runs one check and delivers exactly one report.

    Every terminal condition (bad configuration, no cluster connection,
    namespace listing failure, timeout, unexpected fault) ends up as a
    failure report. ``run`` returns the process exit code.
    """

    def __init__(self,
                 reporter: Optional[KuberhealthyReporter] = None,
                 client_factory: Callable[[CheckConfig], Awaitable[ClusterClient]] = connect_kubernetes,
                 time_limit_source: Callable[[], timedelta] = resolve_check_time_limit,
                 listener_factory: Callable[[CancellationToken], Any] = InterruptListener,
                 overrides: Optional[Dict[str, Any]] = None):
        self.reporter = reporter or KuberhealthyReporter()
        self.client_factory = client_factory
        self.time_limit_source = time_limit_source
        self.listener_factory = listener_factory
        self.overrides = overrides or {}
        self.logger = logger.bind(component="CheckRunner")

    def load_config(self) -> CheckConfig:
        return CheckConfig.create_from_env(check_time_limit=self.time_limit_source(), **self.overrides)

    async def run(self) -> int:
        try:
            cfg = self.load_config()
        except ConfigurationException as e:
            self.logger.error("Invalid configuration", error=e.message)
            return self.deliver([e.message])

        apply_debug_settings(cfg)

        token = CancellationToken.with_timeout(cfg.check_time_limit.total_seconds())
        listener = self.listener_factory(token)
        try:
            listener.start()
            errors = await self.execute(cfg, token)
        except Exception as e:
            self.logger.exception("Recovered unexpected fault during check")
            errors = [fault_message(e)]
        finally:
            listener.stop()

        return self.deliver(errors)

    async def execute(self, cfg: CheckConfig, token: CancellationToken) -> List[str]:
        try:
            cluster = await self.client_factory(cfg)
        except ClientConnectionException as e:
            return [f"failed to create a kubernetes client: {e.message}"]

        try:
            outcome = await ResourceQuotaCheck(cluster, cfg).run(token)
        finally:
            await cluster.disconnect()

        if outcome.status is CheckStatus.ABORTED:
            self.logger.warning("Check aborted", reason=outcome.error, partial_findings=len(outcome.findings))
        errors = outcome_errors(outcome)
        for error in errors:
            self.logger.debug("Check error", error=error)
        return errors

    def deliver(self, errors: List[str]) -> int:
        """Send the report; a reporting failure is the only non-zero exit."""
        try:
            if errors:
                self.reporter.report_failure(errors)
            else:
                self.reporter.report_success()
        except ReportingException as e:
            kind = "failure" if errors else "success"
            self.logger.error(f"error reporting {kind} to kuberhealthy", error=e.message)
            return EXIT_REPORT_FAILED
        return EXIT_REPORTED
