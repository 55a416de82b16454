"""Tests for deriving the check time limit from the run deadline."""

from datetime import datetime, timedelta, timezone

import pytest

from resource_quota_check.clients.kuberhealthy.deadline import (
    SAFETY_MARGIN,
    compute_check_time_limit,
    get_deadline,
    resolve_check_time_limit,
)
from resource_quota_check.config.settings import DEFAULT_CHECK_TIME_LIMIT
from resource_quota_check.core.exceptions import ConfigurationException

NOW = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestComputeCheckTimeLimit:
    """Tests for compute_check_time_limit."""

    def test_subtracts_safety_margin(self):
        limit = compute_check_time_limit(NOW + timedelta(minutes=10), NOW)

        assert limit == timedelta(minutes=10) - SAFETY_MARGIN

    def test_default_without_deadline(self):
        assert compute_check_time_limit(None, NOW) == DEFAULT_CHECK_TIME_LIMIT - SAFETY_MARGIN

    @pytest.mark.parametrize("offset", [timedelta(seconds=5), timedelta(seconds=3), timedelta(0), timedelta(seconds=-30)])
    def test_short_or_expired_deadline_clamps_to_zero(self, offset):
        assert compute_check_time_limit(NOW + offset, NOW) == timedelta(0)

    def test_just_above_margin(self):
        assert compute_check_time_limit(NOW + timedelta(seconds=6), NOW) == timedelta(seconds=1)


class TestGetDeadline:
    """Tests for reading KH_CHECK_RUN_DEADLINE."""

    def test_reads_unix_seconds(self, monkeypatch):
        monkeypatch.setenv("KH_CHECK_RUN_DEADLINE", str(int(NOW.timestamp())))

        assert get_deadline() == NOW

    def test_missing_deadline(self):
        with pytest.raises(ConfigurationException):
            get_deadline()

    def test_malformed_deadline(self, monkeypatch):
        monkeypatch.setenv("KH_CHECK_RUN_DEADLINE", "tomorrow")

        with pytest.raises(ConfigurationException):
            get_deadline()

    def test_resolve_uses_deadline(self, monkeypatch):
        monkeypatch.setenv("KH_CHECK_RUN_DEADLINE", str(int(NOW.timestamp()) + 120))

        assert resolve_check_time_limit(NOW) == timedelta(seconds=115)

    def test_resolve_falls_back_to_default(self, monkeypatch):
        monkeypatch.setenv("KH_CHECK_RUN_DEADLINE", "not-a-number")

        assert resolve_check_time_limit(NOW) == DEFAULT_CHECK_TIME_LIMIT - SAFETY_MARGIN
