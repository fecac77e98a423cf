import structlog
import logging
import os


def setup_logging(level: str | None = None):
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(level=getattr(logging, level, logging.INFO))
    return structlog.get_logger()
