"""
Health Routes - Health check endpoints
"""
from fastapi import APIRouter

from momentum import __version__
from momentum.utils import cache

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "version": __version__, "cached_entries": len(cache.entries)}
