"""
Cleanup Scheduler Service

Removes request workspaces that were never cleaned up (e.g. the client
dropped the connection mid-download). Uses APScheduler for periodic sweeps.
"""

import logging
import shutil
from datetime import datetime, timedelta
from pathlib import Path

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from app.config import settings

logger = logging.getLogger(__name__)

scheduler = AsyncIOScheduler()

JOB_ID = "cleanup_stale_workspaces"


async def cleanup_stale_workspaces() -> dict:
    """
    Delete workspace folders older than FILE_TTL_HOURS from STORAGE_PATH.

    Returns:
        dict: Summary of cleanup operation with counts
    """
    cutoff = datetime.now() - timedelta(hours=settings.FILE_TTL_HOURS)
    cleanup_summary = {
        "directories_scanned": 0,
        "folders_deleted": 0,
        "errors": 0,
    }

    storage_path = Path(settings.STORAGE_PATH)

    if not storage_path.exists():
        logger.debug(f"Storage directory does not exist: {storage_path}")
        return cleanup_summary

    cleanup_summary["directories_scanned"] += 1

    try:
        for workspace in storage_path.iterdir():
            if not workspace.is_dir():
                continue

            try:
                folder_mtime = datetime.fromtimestamp(workspace.stat().st_mtime)

                if folder_mtime < cutoff:
                    shutil.rmtree(workspace)
                    cleanup_summary["folders_deleted"] += 1
                    logger.info(f"Cleaned up stale workspace: {workspace}")

            except OSError as e:
                cleanup_summary["errors"] += 1
                logger.error(f"Failed to clean up workspace {workspace}: {e}")

    except OSError as e:
        cleanup_summary["errors"] += 1
        logger.error(f"Failed to scan storage directory {storage_path}: {e}")

    logger.info(
        f"Cleanup completed: {cleanup_summary['folders_deleted']} folders deleted, "
        f"{cleanup_summary['errors']} errors"
    )

    return cleanup_summary


def start_cleanup_scheduler():
    """
    Start the cleanup scheduler.

    Safe to call multiple times - will not add duplicate jobs.
    """
    if scheduler.running:
        logger.debug("Scheduler already running")
        return

    if not scheduler.get_job(JOB_ID):
        scheduler.add_job(
            cleanup_stale_workspaces,
            "interval",
            hours=settings.CLEANUP_INTERVAL_HOURS,
            id=JOB_ID,
            name="Cleanup stale certificate workspaces",
            replace_existing=True,
        )
        logger.info(
            f"Scheduled cleanup job: every {settings.CLEANUP_INTERVAL_HOURS} hour(s), "
            f"TTL: {settings.FILE_TTL_HOURS} hours"
        )

    scheduler.start()
    logger.info("Cleanup scheduler started")


def stop_cleanup_scheduler():
    """Stop the cleanup scheduler gracefully."""
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Cleanup scheduler stopped")


def get_scheduler_status() -> dict:
    """
    Get current scheduler status for health checks.

    Returns:
        dict: Scheduler status including running state and job info
    """
    job = scheduler.get_job(JOB_ID)
    return {
        "running": scheduler.running,
        "job_scheduled": job is not None,
        "next_run": str(job.next_run_time) if job else None,
        "interval_hours": settings.CLEANUP_INTERVAL_HOURS,
        "ttl_hours": settings.FILE_TTL_HOURS,
    }
