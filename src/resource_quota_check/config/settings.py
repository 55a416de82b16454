# config/settings.py
import math
from datetime import timedelta
from typing import Annotated, FrozenSet, Optional

import structlog
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from resource_quota_check.core.exceptions import ConfigurationException

logger = structlog.get_logger(__name__)

DEFAULT_THRESHOLD = 0.9
MAX_THRESHOLD = 0.99
DEFAULT_CHECK_TIME_LIMIT = timedelta(minutes=5)


class CheckConfig(BaseSettings):
    """Immutable configuration for one check run, read from the environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        frozen=True,
        extra="ignore"
    )

    blacklist: Annotated[FrozenSet[str], NoDecode] = Field(frozenset(), description="Namespaces to skip")
    whitelist: Annotated[FrozenSet[str], NoDecode] = Field(frozenset(), description="Only namespaces to inspect")
    threshold: float = Field(DEFAULT_THRESHOLD, description="Usage fraction that raises an alert")
    check_time_limit: timedelta = Field(DEFAULT_CHECK_TIME_LIMIT, description="Maximum runtime for the check")
    debug: bool = Field(False, description="Enable debug logging")
    kubeconfig: Optional[str] = Field(None, description="Path to kubeconfig file")

    @field_validator('blacklist', 'whitelist', mode='before')
    @classmethod
    def split_namespaces(cls, v):
        if isinstance(v, str):
            return frozenset(item.strip() for item in v.split(",") if item.strip())
        return v

    @field_validator('threshold', mode='after')
    @classmethod
    def normalize_threshold(cls, v):
        if math.isnan(v):
            logger.info("Given THRESHOLD is not a number, setting to default", default=DEFAULT_THRESHOLD)
            return DEFAULT_THRESHOLD
        if v > MAX_THRESHOLD:
            logger.info(f"Given THRESHOLD is greater than {MAX_THRESHOLD}, setting to default", default=DEFAULT_THRESHOLD)
            return DEFAULT_THRESHOLD
        if v <= 0:
            logger.info("Given THRESHOLD is less than or equal to 0, setting to default", default=DEFAULT_THRESHOLD)
            return DEFAULT_THRESHOLD
        return v

    @classmethod
    def create_from_env(cls, check_time_limit: Optional[timedelta] = None, **overrides) -> "CheckConfig":
        """Create configuration from environment variables.

        Raises ConfigurationException when a value cannot be parsed.
        """
        if check_time_limit is not None:
            overrides["check_time_limit"] = check_time_limit
        try:
            cfg = cls(**overrides)
        except ValidationError as e:
            problems = "; ".join(
                f"failed to parse {'.'.join(str(part) for part in err['loc']).upper()}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigurationException(problems, {"errors": e.errors()}) from e

        if cfg.blacklist:
            logger.info("Parsed BLACKLIST", blacklist=sorted(cfg.blacklist))
        if cfg.whitelist:
            logger.info("Parsed WHITELIST", whitelist=sorted(cfg.whitelist))
        logger.info("Usage threshold set", threshold=cfg.threshold)
        logger.info("Check time limit set", check_time_limit=str(cfg.check_time_limit))
        return cfg
