"""Namespace inclusion rules."""

from typing import Optional

from resource_quota_check.config.settings import CheckConfig

BLACKLIST = "blacklist"
WHITELIST = "whitelist"


def skip_reason(namespace: str, config: CheckConfig) -> Optional[str]:
    """Return which list excludes ``namespace``, or None when it is included.

    The blacklist is consulted first, so a namespace on both lists is
    always skipped.
    """
    if config.blacklist and namespace in config.blacklist:
        return BLACKLIST
    if config.whitelist and namespace not in config.whitelist:
        return WHITELIST
    return None


def should_skip_namespace(namespace: str, config: CheckConfig) -> bool:
    return skip_reason(namespace, config) is not None
