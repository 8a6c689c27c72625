"""Minimal helpers for opt-in timing instrumentation."""

from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager
from typing import Iterator

logger = logging.getLogger(__name__)

DEBUG_FILTERSCOPE = os.getenv("FILTERSCOPE_DEBUG", "").lower() in {"1", "true", "yes", "on"}


def debug_enabled() -> bool:
    """Return True when lightweight instrumentation should run."""
    return DEBUG_FILTERSCOPE


@contextmanager
def time_block(label: str) -> Iterator[None]:
    """
    Context manager that logs elapsed time when debugging is enabled.

    The overhead is essentially a couple of perf_counter() calls when disabled.
    """
    if not debug_enabled():
        yield
        return

    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.debug("[timing] %s took %.3f ms", label, elapsed_ms)
