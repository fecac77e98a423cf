from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError
from app.core.config import settings
from app.core.exceptions import InternalError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    create_async_engine,
    async_sessionmaker
)
from shared.utils.logging import setup_logging

logger = setup_logging()

engine = create_async_engine(settings.livecomment_db_url, echo=settings.db_echo)

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)


async def get_livecomment_db():
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()


@asynccontextmanager
async def transaction(db: AsyncSession):
    """Unit of work: commit on normal exit, rollback on errors.

    Cancellation skips the rollback; closing the session releases the
    connection and discards the open transaction.
    """
    try:
        yield db
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("Transaction failed", error=str(e))
        raise InternalError(f"Database error: {e.__class__.__name__}") from e
    except Exception:
        await db.rollback()
        raise
