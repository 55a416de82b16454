"""Utility functions and decorators."""

import logging.config
import sys
from decimal import Decimal, ROUND_CEILING
from pathlib import Path
from typing import Optional, Tuple, Type, Union

import structlog
import yaml
from kubernetes.utils import parse_quantity
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential
from tenacity.stop import stop_base

from resource_quota_check.core.cancellation import CancellationToken


class stop_when_cancelled(stop_base):
    """Stop retrying once the run's cancellation token has fired."""

    def __init__(self, token: CancellationToken):
        self.token = token

    def __call__(self, retry_state) -> bool:
        return self.token.cancelled


def retry_with_backoff(
    max_retries: int = 3,
    backoff_factor: float = 0.5,
    max_wait: float = 5.0,
    exceptions: Tuple[Type[BaseException], ...] = (Exception,),
    token: Optional[CancellationToken] = None,
):
    """Decorator for retry with exponential backoff.

    With a token, no further attempt is made once the token is cancelled.
    """
    stop = stop_after_attempt(max_retries)
    if token is not None:
        stop = stop | stop_when_cancelled(token)
    return retry(
        stop=stop,
        wait=wait_exponential(multiplier=backoff_factor, max=max_wait),
        retry=retry_if_exception_type(exceptions),
        reraise=True
    )


def setup_logging(config_path: Optional[Union[str, Path]] = None, log_level: str = "INFO") -> None:
    """Setup structured logging configuration."""
    if config_path and Path(config_path).exists():
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
        logging.config.dictConfig(config)
    else:
        logging.basicConfig(
            level=getattr(logging, log_level.upper()),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            stream=sys.stdout,
            force=True
        )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if config_path else structlog.dev.ConsoleRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def to_milli_value(quantity: Optional[Union[str, int, float]]) -> int:
    """Convert a Kubernetes quantity ('500m', '2', '1Gi') to milli-units.

    Fractions of a milli-unit round up. Missing quantities count as zero.
    """
    if quantity is None or quantity == "":
        return 0
    milli = Decimal(parse_quantity(quantity)) * 1000
    return int(milli.to_integral_value(rounding=ROUND_CEILING))
