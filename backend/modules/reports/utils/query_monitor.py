# backend/modules/reports/utils/query_monitor.py

"""
Query performance monitoring for reporting operations.

Wraps service calls, logs their duration at debug level and warns when a
call crosses the configured slow-query threshold.
"""

import functools
import logging
import time
from typing import Any, Callable, Optional

from core.config import settings

logger = logging.getLogger(__name__)


def monitor_query_performance(query_name: Optional[str] = None):
    """
    Decorator to monitor query performance.

    Usage:
        @monitor_query_performance("reports.summarize")
        def summarize(self, filters):
            ...
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            name = query_name or f"{func.__module__}.{func.__name__}"
            start_time = time.perf_counter()
            failed = False
            try:
                return func(*args, **kwargs)
            except Exception:
                failed = True
                raise
            finally:
                elapsed_ms = (time.perf_counter() - start_time) * 1000
                if elapsed_ms > settings.slow_query_threshold_ms:
                    logger.warning(
                        f"Slow query {name}: {elapsed_ms:.1f}ms "
                        f"(threshold {settings.slow_query_threshold_ms}ms)"
                    )
                else:
                    logger.debug(
                        f"Query {name} {'failed' if failed else 'completed'} "
                        f"in {elapsed_ms:.1f}ms"
                    )

        return wrapper

    return decorator
