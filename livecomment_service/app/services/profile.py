from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.exceptions import NotFoundError
from app.models.user import User, Theme, Icon
from app.schemas.user import User as UserResponse, Theme as ThemeResponse
from shared.utils.logging import setup_logging

logger = setup_logging()

FALLBACK_ICON_HASH = "d9f8294e9d895f81ce62e73dc7d5dff862a4fa40bd4e0fecf53f7526a8edcac0"


async def get_profile(db: AsyncSession, user_id: int) -> UserResponse:
    """Resolve the public profile of a user, with theme and icon fingerprint."""
    result = await db.execute(
        select(User, Theme.id, Theme.dark_mode, Icon.icon_hash)
        .outerjoin(Theme, Theme.user_id == User.id)
        .outerjoin(Icon, Icon.user_id == User.id)
        .where(User.id == user_id)
    )
    row = result.first()
    if row is None:
        logger.error(f'User {user_id} not found')
        raise NotFoundError("not found user that has the given id")

    user, theme_id, dark_mode, icon_hash = row
    return UserResponse(
        id=user.id,
        name=user.name,
        display_name=user.display_name,
        description=user.description,
        theme=ThemeResponse(id=theme_id or 0, dark_mode=bool(dark_mode)),
        icon_hash=icon_hash or FALLBACK_ICON_HASH,
    )


async def get_profiles(db: AsyncSession, user_ids) -> dict[int, UserResponse]:
    profiles = {}
    for user_id in dict.fromkeys(user_ids):
        profiles[user_id] = await get_profile(db, user_id)
    return profiles
