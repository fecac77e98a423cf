import asyncio
from shared.utils.logging import setup_logging

logger = setup_logging()


async def main():
    server = await asyncio.create_subprocess_exec("uvicorn", "app.main:app", "--host", "0.0.0.0", "--port", "8000")
    logger.info("Livecomment service started")

    await server.wait()


if __name__ == "__main__":
    asyncio.run(main())
