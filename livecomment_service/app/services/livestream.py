from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.exceptions import NotFoundError
from app.models.livestream import Livestream, Tag, LivestreamTag
from app.schemas.livestream import Livestream as LivestreamResponse, Tag as TagResponse
from app.services.profile import get_profile
from shared.utils.logging import setup_logging

logger = setup_logging()


async def get_livestream(db: AsyncSession, livestream_id: int) -> Livestream:
    livestream = await db.get(Livestream, livestream_id)
    if not livestream:
        logger.error(f'Livestream {livestream_id} not found')
        raise NotFoundError("livestream not found")
    return livestream


async def get_owned_livestream(db: AsyncSession, livestream_id: int, user_id: int) -> Livestream | None:
    return await db.scalar(
        select(Livestream).where(Livestream.id == livestream_id, Livestream.user_id == user_id)
    )


async def fill_livestream_response(db: AsyncSession, livestream: Livestream) -> LivestreamResponse:
    owner = await get_profile(db, livestream.user_id)
    result = await db.execute(
        select(Tag)
        .join(LivestreamTag, LivestreamTag.tag_id == Tag.id)
        .where(LivestreamTag.livestream_id == livestream.id)
        .order_by(LivestreamTag.id)
    )
    tags = [TagResponse.model_validate(tag) for tag in result.scalars().all()]
    return LivestreamResponse(
        id=livestream.id,
        owner=owner,
        title=livestream.title,
        description=livestream.description,
        playlist_url=livestream.playlist_url,
        thumbnail_url=livestream.thumbnail_url,
        tags=tags,
        start_at=livestream.start_at,
        end_at=livestream.end_at,
    )
