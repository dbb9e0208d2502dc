"""
Scheduler Service - Background scheduler lifecycle management
Handles starting, stopping, and configuring the APScheduler instance
"""
import logging
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from momentum.core.config import settings
from momentum.core.constants import SCHEDULER_CACHE_SWEEP_JOB_ID
from .jobs import sweep_cache

logger = logging.getLogger(__name__)

# Global scheduler instance
scheduler = None


def start_scheduler():
    """
    Start the background scheduler
    Sweeps the cache every CACHE_SWEEP_INTERVAL_SECONDS
    """
    global scheduler

    if scheduler is not None:
        logger.warning("Scheduler already running")
        return

    scheduler = BackgroundScheduler()

    scheduler.add_job(
        func=sweep_cache,
        trigger=IntervalTrigger(seconds=settings.CACHE_SWEEP_INTERVAL_SECONDS),
        id=SCHEDULER_CACHE_SWEEP_JOB_ID,
        name='Sweep expired cache entries',
        replace_existing=True
    )

    scheduler.start()
    logger.info(f"Scheduler started - sweeping cache every {settings.CACHE_SWEEP_INTERVAL_SECONDS} seconds")


def stop_scheduler():
    """Stop the background scheduler"""
    global scheduler

    if scheduler is not None:
        scheduler.shutdown()
        scheduler = None
        logger.info("Scheduler stopped")
