from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.database import transaction
from app.models.ng_word import NGWord


async def register_ng_word(
        db: AsyncSession,
        user_id: int,
        livestream_id: int,
        word: str,
        now: int) -> NGWord:
    """Insert an NG word. Ownership of the livestream is checked by the caller."""
    ng_word = NGWord(
        user_id=user_id,
        livestream_id=livestream_id,
        word=word,
        created_at=now,
    )
    db.add(ng_word)
    await db.flush()
    return ng_word


async def list_ng_words(db: AsyncSession, livestream_id: int) -> list[NGWord]:
    result = await db.execute(
        select(NGWord).where(NGWord.livestream_id == livestream_id).order_by(NGWord.id)
    )
    return list(result.scalars().all())


async def list_user_ng_words(db: AsyncSession, user_id: int, livestream_id: int) -> list[NGWord]:
    result = await db.execute(
        select(NGWord)
        .where(NGWord.user_id == user_id, NGWord.livestream_id == livestream_id)
        .order_by(NGWord.created_at.desc(), NGWord.id.desc())
    )
    return list(result.scalars().all())


async def get_user_ng_words(db: AsyncSession, user_id: int, livestream_id: int) -> list[NGWord]:
    async with transaction(db):
        return await list_user_ng_words(db, user_id, livestream_id)
