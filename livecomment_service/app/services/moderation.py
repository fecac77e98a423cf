import time
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.exceptions import PermissionDeniedError
from app.db.database import transaction
from app.models.livecomment import Livecomment
from app.services.livecomment import delete_livecomments
from app.services.livestream import get_owned_livestream
from app.services.ng_word import register_ng_word, list_ng_words
from app.utils.spam_filter import is_spam
from shared.utils.logging import setup_logging

logger = setup_logging()


async def find_violating_livecomment_ids(db: AsyncSession, livestream_id: int, ng_words) -> set[int]:
    """Ids of the livestream's comments that contain any of ng_words."""
    if not ng_words:
        return set()
    result = await db.execute(
        select(Livecomment.id, Livecomment.comment).where(Livecomment.livestream_id == livestream_id)
    )
    return {livecomment_id for livecomment_id, comment in result.all() if is_spam(comment, ng_words)}


async def moderate(
        db: AsyncSession,
        user_id: int,
        livestream_id: int,
        word: str,
        now: int | None = None) -> int:
    """Register an NG word on an owned livestream and purge every comment
    that now matches any of the livestream's NG words.

    Registration and purge commit together or not at all. Returns the id
    of the new NG word.
    """
    now = int(time.time()) if now is None else now
    async with transaction(db):
        if await get_owned_livestream(db, livestream_id, user_id) is None:
            logger.error(f'User {user_id} tried to moderate livestream {livestream_id} owned by someone else')
            raise PermissionDeniedError("A streamer can't moderate livestreams that other streamers own")

        ng_word = await register_ng_word(db, user_id, livestream_id, word, now)

        ng_words = await list_ng_words(db, livestream_id)
        violating_ids = await find_violating_livecomment_ids(db, livestream_id, ng_words)
        deleted = await delete_livecomments(db, violating_ids)

        logger.info(
            "NG word registered",
            word_id=ng_word.id,
            livestream_id=livestream_id,
            ng_words=len(ng_words),
            purged_livecomments=deleted,
        )
        return ng_word.id
