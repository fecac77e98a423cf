from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy import text
from app.core.config import settings
from app.db.database import engine
from app.api.livecomments import router as livecomments_router
from app.api.health import router as health_router
import asyncio
import os
from shared.utils.logging import setup_logging

logger = setup_logging(settings.log_level)


async def wait_for_database() -> None:
    max_attempts = settings.db_connect_attempts
    delay = settings.db_connect_delay
    for attempt in range(1, max_attempts + 1):
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
                logger.info("Database connection established.")
                return
        except Exception as e:
            logger.warning(f"Attempt {attempt}/{max_attempts} failed: {e}")
            if attempt == max_attempts:
                logger.error("Max attempts reached. Exiting.")
                raise RuntimeError("Database is not available.")
            await asyncio.sleep(delay)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Livecomment Service is starting...")

    await wait_for_database()

    logger.info("Running Alembic migrations...")
    result = os.system("alembic upgrade head")
    if result != 0:
        logger.error("Alembic migrations failed")
        raise RuntimeError("Migration failed")
    logger.info("Alembic migrations applied.")

    yield

    await engine.dispose()
    logger.info("Livecomment Service is shutting down...")

app = FastAPI(
    title="Livecomment Service",
    version="1.0",
    lifespan=lifespan,
    redirect_slashes=False
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning("validation_error", errors=str(exc.errors()), path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "failed to decode the request", "errors": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": [str(part) for part in error.get("loc", ())], "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


app.include_router(livecomments_router, prefix="/api")
app.include_router(health_router)
