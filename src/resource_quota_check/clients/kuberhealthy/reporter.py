"""Reports check results back to the Kuberhealthy controller."""

import os
from typing import Dict, List, Optional

import requests
import structlog

from resource_quota_check.core.exceptions import ReportingException

logger = structlog.get_logger(__name__)

REPORTING_URL_ENV = "KH_REPORTING_URL"
RUN_UUID_ENV = "KH_RUN_UUID"
RUN_UUID_HEADER = "kh-run-uuid"


class KuberhealthyReporter:
    """Posts a single success or failure report per check run."""

    def __init__(self,
                 reporting_url: Optional[str] = None,
                 run_uuid: Optional[str] = None,
                 timeout: float = 30.0):
        self.reporting_url = reporting_url if reporting_url is not None else os.environ.get(REPORTING_URL_ENV, "")
        self.run_uuid = run_uuid if run_uuid is not None else os.environ.get(RUN_UUID_ENV, "")
        self.timeout = timeout
        self.logger = logger.bind(reporter="kuberhealthy")

    def report_success(self) -> None:
        self.logger.info("Reporting success to kuberhealthy")
        self._send(ok=True, errors=[])

    def report_failure(self, errors: List[str]) -> None:
        self.logger.info("Reporting failure to kuberhealthy", error_count=len(errors))
        self._send(ok=False, errors=list(errors))

    def _send(self, ok: bool, errors: List[str]) -> None:
        if not self.reporting_url:
            raise ReportingException(f"{REPORTING_URL_ENV} environment variable is not set")

        headers: Dict[str, str] = {"Content-Type": "application/json"}
        if self.run_uuid:
            headers[RUN_UUID_HEADER] = self.run_uuid

        try:
            response = requests.post(
                self.reporting_url,
                json={"OK": ok, "Errors": errors},
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise ReportingException(f"failed to send report to {self.reporting_url}: {e}") from e

        if response.status_code != 200:
            raise ReportingException(
                f"bad status code from kuberhealthy status reporting url: [{response.status_code}] {response.reason}",
                {"body": response.text},
            )
