from .deadline import compute_check_time_limit, get_deadline, resolve_check_time_limit
from .reporter import KuberhealthyReporter

__all__ = ["KuberhealthyReporter", "compute_check_time_limit", "get_deadline", "resolve_check_time_limit"]
