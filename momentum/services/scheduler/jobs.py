"""
Scheduler Job Definitions
"""
import logging

from momentum.utils import cache

logger = logging.getLogger(__name__)


def sweep_cache() -> int:
    """
    Drop expired cache entries so idle users do not accumulate in memory

    Returns:
        Number of entries removed
    """
    try:
        return cache.cleanup_expired()
    except Exception as e:
        logger.error(f"[CACHE SWEEP] Error sweeping cache: {e}", exc_info=True)
        return 0
