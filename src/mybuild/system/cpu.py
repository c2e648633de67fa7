"""
Processor detection for sizing the parallel build.
"""

import logging

import psutil

logger = logging.getLogger(__name__)


def get_cpu_count() -> int:
    """Return the number of logical processors, at least 1.

    psutil may return None on platforms where the count is unknown.
    """
    count = psutil.cpu_count(logical=True)
    if not count:
        logger.warning("Unable to determine processor count, building with -j1")
        return 1
    return count
