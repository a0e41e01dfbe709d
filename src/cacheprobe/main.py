# src/cacheprobe/main.py
"""Command line entry point: serve the probe with uvicorn.

uvicorn traps SIGTERM/SIGINT, stops accepting requests and runs the
application lifespan shutdown (which closes the Redis connection) before
the process exits with status 0.
"""

import uvicorn

from src.cacheprobe.config.settings import get_settings
from src.cacheprobe.utils.logger import logger


def run():
    settings = get_settings()
    logger.info(
        "🚀 Cache probe listening",
        host=settings.server.host,
        port=settings.server.port,
    )
    uvicorn.run(
        "src.cacheprobe.app:app",
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.logging.level.lower(),
    )
    logger.info("👋 Cache probe stopped")


if __name__ == "__main__":
    run()
