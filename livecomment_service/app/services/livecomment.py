import time
from collections.abc import Iterable
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.exceptions import InvalidArgumentError, NotFoundError, SpamRejectedError
from app.db.database import transaction
from app.models.livecomment import Livecomment
from app.models.livestream import Livestream
from app.schemas.livecomment import Livecomment as LivecommentResponse
from app.schemas.livestream import Livestream as LivestreamResponse
from app.schemas.user import User as UserResponse
from app.services.livestream import get_livestream, fill_livestream_response
from app.services.ng_word import list_user_ng_words
from app.services.profile import get_profile, get_profiles
from app.utils.spam_filter import find_ng_word
from shared.utils.logging import setup_logging

logger = setup_logging()


def parse_limit(raw: str | None) -> int | None:
    if raw is None or raw == "":
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise InvalidArgumentError("limit query parameter must be integer")
    validate_limit(limit)
    return limit


def validate_limit(limit) -> None:
    if limit is None:
        return
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise InvalidArgumentError("limit query parameter must be a non-negative integer")


async def create_livecomment(
        db: AsyncSession,
        user_id: int,
        livestream_id: int,
        comment: str,
        tip: int,
        now: int) -> Livecomment:
    await get_livestream(db, livestream_id)
    livecomment = Livecomment(
        user_id=user_id,
        livestream_id=livestream_id,
        comment=comment,
        tip=tip,
        created_at=now,
    )
    db.add(livecomment)
    await db.flush()
    return livecomment


async def list_livecomments(
        db: AsyncSession,
        livestream_id: int,
        limit: int | None = None) -> list[Livecomment]:
    """Comments of a livestream, newest first; ties are ordered by id."""
    validate_limit(limit)
    query = (
        select(Livecomment)
        .where(Livecomment.livestream_id == livestream_id)
        .order_by(Livecomment.created_at.desc(), Livecomment.id.desc())
    )
    if limit is not None:
        query = query.limit(limit)
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_livecomment(db: AsyncSession, livecomment_id: int) -> Livecomment:
    livecomment = await db.get(Livecomment, livecomment_id)
    if not livecomment:
        logger.error(f'Livecomment {livecomment_id} not found')
        raise NotFoundError("livecomment not found")
    return livecomment


async def delete_livecomments(db: AsyncSession, livecomment_ids: Iterable[int]) -> int:
    ids = set(livecomment_ids)
    if not ids:
        return 0
    result = await db.execute(
        delete(Livecomment)
        .where(Livecomment.id.in_(ids))
        .execution_options(synchronize_session=False)
    )
    return result.rowcount


async def fill_livecomment_response(
        db: AsyncSession,
        livecomment: Livecomment,
        livestream: LivestreamResponse | None = None,
        user: UserResponse | None = None) -> LivecommentResponse:
    if user is None:
        user = await get_profile(db, livecomment.user_id)
    if livestream is None:
        livestream = await fill_livestream_response(db, await get_livestream(db, livecomment.livestream_id))
    return LivecommentResponse(
        id=livecomment.id,
        user=user,
        livestream=livestream,
        comment=livecomment.comment,
        tip=livecomment.tip,
        created_at=livecomment.created_at,
    )


async def fill_livecomments_response(
        db: AsyncSession,
        livestream: Livestream,
        livecomments: list[Livecomment]) -> list[LivecommentResponse]:
    livestream_response = await fill_livestream_response(db, livestream)
    profiles = await get_profiles(db, [lc.user_id for lc in livecomments])
    return [
        await fill_livecomment_response(db, lc, livestream_response, profiles[lc.user_id])
        for lc in livecomments
    ]


async def get_livecomments(
        db: AsyncSession,
        livestream_id: int,
        limit: int | None = None) -> list[LivecommentResponse]:
    async with transaction(db):
        livestream = await get_livestream(db, livestream_id)
        livecomments = await list_livecomments(db, livestream_id, limit)
        return await fill_livecomments_response(db, livestream, livecomments)


async def post_livecomment(
        db: AsyncSession,
        user_id: int,
        livestream_id: int,
        comment: str,
        tip: int,
        now: int | None = None) -> LivecommentResponse:
    """Spam-check and store a comment, all in one unit of work."""
    now = int(time.time()) if now is None else now
    async with transaction(db):
        livestream = await get_livestream(db, livestream_id)

        ng_words = await list_user_ng_words(db, livestream.user_id, livestream.id)
        hit = find_ng_word(comment, ng_words)
        if hit is not None:
            logger.info("Livecomment rejected as spam", livestream_id=livestream_id, user_id=user_id, ng_word=hit)
            raise SpamRejectedError()

        livecomment = await create_livecomment(db, user_id, livestream.id, comment, tip, now)
        logger.info("Livecomment posted", livecomment_id=livecomment.id, livestream_id=livestream_id)
        return await fill_livecomment_response(db, livecomment)
