"""Tests for the Kuberhealthy reporter."""

from unittest.mock import Mock, patch

import pytest
import requests

from resource_quota_check.clients.kuberhealthy.reporter import KuberhealthyReporter
from resource_quota_check.core.exceptions import ReportingException

POST = "resource_quota_check.clients.kuberhealthy.reporter.requests.post"
URL = "http://kuberhealthy.kuberhealthy.svc/check"


class TestKuberhealthyReporter:
    """Tests for KuberhealthyReporter."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("KH_REPORTING_URL", URL)
        monkeypatch.setenv("KH_RUN_UUID", "abc-123")

        reporter = KuberhealthyReporter()

        assert reporter.reporting_url == URL
        assert reporter.run_uuid == "abc-123"

    def test_report_success(self):
        with patch(POST, return_value=Mock(status_code=200)) as post:
            KuberhealthyReporter(URL, "abc-123").report_success()

        post.assert_called_once()
        args, kwargs = post.call_args
        assert args == (URL,)
        assert kwargs["json"] == {"OK": True, "Errors": []}
        assert kwargs["headers"]["kh-run-uuid"] == "abc-123"

    def test_report_failure_keeps_error_order(self):
        with patch(POST, return_value=Mock(status_code=200)) as post:
            KuberhealthyReporter(URL, "abc-123").report_failure(["first", "second"])

        assert post.call_args.kwargs["json"] == {"OK": False, "Errors": ["first", "second"]}

    def test_missing_url_raises(self):
        with patch(POST) as post:
            with pytest.raises(ReportingException):
                KuberhealthyReporter("", "abc-123").report_success()

        post.assert_not_called()

    def test_bad_status_raises(self):
        response = Mock(status_code=500, reason="Internal Server Error", text="boom")
        with patch(POST, return_value=response):
            with pytest.raises(ReportingException) as exc_info:
                KuberhealthyReporter(URL, "abc-123").report_failure(["x"])

        assert "500" in exc_info.value.message

    def test_transport_error_raises(self):
        with patch(POST, side_effect=requests.ConnectionError("refused")):
            with pytest.raises(ReportingException):
                KuberhealthyReporter(URL, "abc-123").report_success()
