from jose import jwt, JWTError
from datetime import datetime, timezone
from fastapi import Header
from shared.utils.logging import setup_logging
from app.core.config import settings
from app.core.exceptions import UnauthorizedError

logger = setup_logging()


async def get_current_user_id(
        authorization: str | None = Header(None, alias='Authorization')) -> int:
    """Get, decode and verify session token, return user id"""
    if not authorization or not authorization.startswith("Bearer "):
        logger.error("Bearer token not found")
        raise UnauthorizedError("You need to login.")

    try:
        payload = jwt.decode(
            authorization[7:],
            settings.access_token_secret_key,
            algorithms=[settings.algorithm]
        )
    except JWTError as e:
        logger.error(f'JWT decoding error: {e}')
        raise UnauthorizedError('You need to login')

    exp = payload.get("exp")
    if not exp:
        logger.error("Token payload missing exp")
        raise UnauthorizedError('You need to be logged')

    if datetime.fromtimestamp(exp, tz=timezone.utc) < datetime.now(timezone.utc):
        logger.error("Token expired")
        raise UnauthorizedError('Session has expired')

    user_id = payload.get("sub")
    try:
        return int(user_id)
    except (TypeError, ValueError):
        logger.error("Token payload missing user id")
        raise UnauthorizedError('You need to be logged')
