import logging
import os
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from app.core.config import settings
from app.core.database import SessionLocal
from app.utils.deps import build_test_taking_service

logger = logging.getLogger(__name__)

scheduler = AsyncIOScheduler()


async def sweep_test_sessions():
    db = SessionLocal()
    try:
        service = build_test_taking_service(db)
        expired = service.expire_overdue_sessions()
        purged = service.purge_finished_sessions(settings.COMPLETED_SESSION_TTL_MINUTES)
        if expired or purged:
            logger.info(f"Session sweep: {len(expired)} timed out, {purged} purged")
    except Exception as e:
        logger.error(f"Error sweeping test sessions: {e}")
    finally:
        db.close()


def start_scheduler():
    if os.getenv("TESTING") == "true":
        logger.info("Scheduler disabled in test environment")
        return

    if not scheduler.running:
        scheduler.add_job(
            sweep_test_sessions,
            'interval',
            seconds=settings.SESSION_SWEEP_INTERVAL_SECONDS,
            id='sweep_test_sessions',
            name='Expire Overdue Test Sessions',
            replace_existing=True
        )
        scheduler.start()
        logger.info("Scheduler started with test session sweep job")


def stop_scheduler():
    if scheduler.running:
        scheduler.shutdown()
        logger.info("Scheduler stopped")
