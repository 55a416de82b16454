"""Run deadline supplied by the Kuberhealthy controller."""

import os
from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog

from resource_quota_check.config.settings import DEFAULT_CHECK_TIME_LIMIT
from resource_quota_check.core.exceptions import ConfigurationException

logger = structlog.get_logger(__name__)

DEADLINE_ENV = "KH_CHECK_RUN_DEADLINE"
SAFETY_MARGIN = timedelta(seconds=5)


def get_deadline() -> datetime:
    """Read the run deadline (unix seconds) from the environment."""
    raw = os.environ.get(DEADLINE_ENV, "").strip()
    if not raw:
        raise ConfigurationException(f"{DEADLINE_ENV} environment variable is not set")
    try:
        return datetime.fromtimestamp(int(raw), tz=timezone.utc)
    except (ValueError, OverflowError, OSError) as e:
        raise ConfigurationException(f"failed to parse {DEADLINE_ENV} value {raw!r}: {e}")


def compute_check_time_limit(deadline: Optional[datetime], now: Optional[datetime] = None) -> timedelta:
    """Time the check may run: the deadline minus now minus the safety margin.

    Without a deadline the default total duration is used instead. The
    result is never negative; a deadline that is already too close yields
    a zero limit.
    """
    if deadline is None:
        limit = DEFAULT_CHECK_TIME_LIMIT - SAFETY_MARGIN
    else:
        now = now or datetime.now(timezone.utc)
        limit = deadline - (now + SAFETY_MARGIN)

    if limit <= timedelta(0):
        logger.warning("Check deadline leaves no time to run", deadline=str(deadline), limit=str(limit))
        return timedelta(0)
    return limit


def resolve_check_time_limit(now: Optional[datetime] = None) -> timedelta:
    """Derive the check time limit from the controller deadline, if any."""
    try:
        deadline = get_deadline()
    except ConfigurationException as e:
        logger.info("There was an issue getting the check deadline", error=e.message)
        deadline = None
    return compute_check_time_limit(deadline, now)
