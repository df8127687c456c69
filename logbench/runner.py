"""Timed single-insert loop shared by every backend."""

import logging
import time
from typing import Dict, List

from logbench.config import PROGRESS_EVERY

logger = logging.getLogger(__name__)


def measure_time(func, *args, **kwargs) -> int:
    """Measure execution time of a function in nanoseconds"""
    start = time.perf_counter_ns()
    func(*args, **kwargs)
    return time.perf_counter_ns() - start


def measure(backend, iterations: int, progress_every: int = PROGRESS_EVERY) -> List[int]:
    """Reset the backend's storage, then time ``iterations`` single inserts.

    Any failure propagates to the caller and no partial results are returned.
    The backend is closed in every case.
    """
    logger.info("Measuring %s for %d iterations", backend.name, iterations)
    results = []
    try:
        backend.setup()
        for i in range(iterations):
            results.append(measure_time(backend.insert))

            if i % progress_every == 0:
                print(i)
    finally:
        backend.close()

    return results


def run_all(backends, iterations: int, progress_every: int = PROGRESS_EVERY) -> Dict[str, List[int]]:
    """Measure backends one after the other, in order"""
    return {
        backend.name: measure(backend, iterations, progress_every)
        for backend in backends
    }
