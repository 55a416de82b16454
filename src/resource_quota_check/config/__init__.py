from .settings import CheckConfig, DEFAULT_THRESHOLD, DEFAULT_CHECK_TIME_LIMIT

__all__ = ["CheckConfig", "DEFAULT_THRESHOLD", "DEFAULT_CHECK_TIME_LIMIT"]
