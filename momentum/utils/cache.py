"""
TTL Cache - In-memory key/value store with per-entry expiry
"""
from datetime import timedelta
from typing import Dict, Any, Optional
import logging
import threading

from momentum.core.config import settings
from momentum.utils.timezone import get_local_now

logger = logging.getLogger(__name__)

# In-memory cache storage
# Format: {key: {"data": ..., "timestamp": datetime, "expires_at": datetime}}
entries: Dict[str, Dict[str, Any]] = {}

# Shared by request handlers and the scheduler's sweep thread
_lock = threading.Lock()


def _is_valid(entry: Optional[Dict[str, Any]]) -> bool:
    if not entry:
        return False
    return get_local_now() < entry["expires_at"]


def get_cached(key: str) -> Optional[Any]:
    """
    Get a cached value, dropping it if it has expired

    Args:
        key: Cache key

    Returns:
        Cached data or None if missing or expired
    """
    with _lock:
        entry = entries.get(key)
        if entry is None:
            return None

        if not _is_valid(entry):
            entries.pop(key, None)
            return None

        return entry["data"]


def set_cached(key: str, data: Any, ttl_seconds: Optional[int] = None) -> None:
    """
    Cache a value

    Args:
        key: Cache key
        data: Value to store
        ttl_seconds: Optional expiry override (defaults to CACHE_TTL_SECONDS)
    """
    now = get_local_now()
    ttl = settings.CACHE_TTL_SECONDS if ttl_seconds is None else ttl_seconds
    with _lock:
        entries[key] = {
            "data": data,
            "timestamp": now,
            "expires_at": now + timedelta(seconds=ttl)
        }


def invalidate(key: str) -> bool:
    """
    Remove a cached value

    Returns:
        True if an entry existed and was removed, False otherwise
    """
    with _lock:
        return entries.pop(key, None) is not None


def cleanup_expired() -> int:
    """
    Remove every entry whose expiry has passed

    Returns:
        Number of entries removed
    """
    now = get_local_now()

    with _lock:
        expired_keys = [
            key
            for key, entry in entries.items()
            if entry["expires_at"] <= now
        ]

        for key in expired_keys:
            del entries[key]

    if expired_keys:
        logger.info(f"[CACHE] Removed {len(expired_keys)} expired entries")

    return len(expired_keys)


def clear() -> None:
    """Drop every cached value"""
    with _lock:
        entries.clear()


def get_cache_status(key: str) -> Dict[str, Any]:
    """
    Get information about a cached value (for debugging)

    Returns:
        Dict with exists, is_valid and expires_in (seconds, None when invalid)
    """
    with _lock:
        entry = entries.get(key)
    if entry is None:
        return {"exists": False, "is_valid": False, "expires_in": None}

    is_valid = _is_valid(entry)
    expires_in = (entry["expires_at"] - get_local_now()).total_seconds() if is_valid else None

    return {"exists": True, "is_valid": is_valid, "expires_in": expires_in}
