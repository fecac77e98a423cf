import time
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.exceptions import NotFoundError
from app.db.database import transaction
from app.models.livecomment import LivecommentReport
from app.schemas.livecomment import LivecommentReport as LivecommentReportResponse
from app.services.livecomment import get_livecomment, fill_livecomment_response
from app.services.livestream import get_livestream
from app.services.profile import get_profile
from shared.utils.logging import setup_logging

logger = setup_logging()


async def create_report(
        db: AsyncSession,
        user_id: int,
        livestream_id: int,
        livecomment_id: int,
        now: int) -> LivecommentReport:
    """Record an abuse report. The same user may report a comment repeatedly."""
    await get_livestream(db, livestream_id)
    livecomment = await get_livecomment(db, livecomment_id)
    if livecomment.livestream_id != livestream_id:
        logger.error(f'Livecomment {livecomment_id} does not belong to livestream {livestream_id}')
        raise NotFoundError("livecomment not found")

    report = LivecommentReport(
        user_id=user_id,
        livestream_id=livestream_id,
        livecomment_id=livecomment_id,
        created_at=now,
    )
    db.add(report)
    await db.flush()
    return report


async def fill_livecomment_report_response(
        db: AsyncSession,
        report: LivecommentReport) -> LivecommentReportResponse:
    reporter = await get_profile(db, report.user_id)
    livecomment = await get_livecomment(db, report.livecomment_id)
    return LivecommentReportResponse(
        id=report.id,
        reporter=reporter,
        livecomment=await fill_livecomment_response(db, livecomment),
        created_at=report.created_at,
    )


async def report_livecomment(
        db: AsyncSession,
        user_id: int,
        livestream_id: int,
        livecomment_id: int,
        now: int | None = None) -> LivecommentReportResponse:
    now = int(time.time()) if now is None else now
    async with transaction(db):
        report = await create_report(db, user_id, livestream_id, livecomment_id, now)
        logger.info("Livecomment reported", report_id=report.id, livecomment_id=livecomment_id)
        return await fill_livecomment_report_response(db, report)
