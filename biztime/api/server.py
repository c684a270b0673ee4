"""
FastAPI server startup script.
Installed as the ``biztime-api`` console script.
"""

import logging

import uvicorn

from biztime.api.core.config import settings
from biztime.api.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main():
    """Start the FastAPI server"""
    configure_logging()
    logger.info("Starting BizTime API on http://%s:%s", settings.API_HOST, settings.API_PORT)

    uvicorn.run(
        "biztime.api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    main()
