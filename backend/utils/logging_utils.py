"""
Logging Utilities for Consistent Structured Logging

Helpers for logging parse and analysis stages with context and duration.
"""

import time
import logging
from typing import Dict, Any, Iterator, Optional
from contextlib import contextmanager

logger = logging.getLogger(__name__)


def _format_context(context: Dict[str, Any]) -> str:
    return ", ".join(f"{key}={value}" for key, value in context.items())


class Timer:
    """Measures a block and logs its duration at debug level."""

    def __init__(self, name: str, logger: Optional[logging.Logger] = None):
        self.name = name
        self.logger = logger or logging.getLogger(__name__)
        self.start_time = None
        self.duration = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - self.start_time
        self.logger.debug(f"{self.name} completed in {self.duration * 1000:.1f}ms")


@contextmanager
def log_operation(operation_name: str, context: Optional[Dict[str, Any]] = None,
                  logger: Optional[logging.Logger] = None) -> Iterator[Dict[str, Any]]:
    """
    Log the start, completion or failure of a stage with its duration.

    Yields the context dict; values the caller adds to it (counts, chosen
    system, ...) are reported on completion.

    Usage:
        with log_operation("inp_segmentation", {"lines": 4200}) as ctx:
            blocks = segment_lines(lines)
            ctx["blocks"] = len(blocks)
    """
    logger = logger or logging.getLogger(__name__)
    context = dict(context or {})
    start_time = time.perf_counter()

    logger.debug(f"Starting {operation_name}", extra={
        'operation': operation_name,
        'context': dict(context),
        'status': 'started'
    })

    try:
        yield context
    except Exception as e:
        duration = time.perf_counter() - start_time
        logger.error(f"Failed {operation_name} after {duration:.3f}s: {e}", extra={
            'operation': operation_name,
            'context': context,
            'status': 'failed',
            'duration_seconds': duration,
            'error_type': type(e).__name__,
        })
        raise

    duration = time.perf_counter() - start_time
    summary = f" ({_format_context(context)})" if context else ""
    logger.info(f"Completed {operation_name} in {duration:.3f}s{summary}", extra={
        'operation': operation_name,
        'context': context,
        'status': 'completed',
        'duration_seconds': duration
    })
