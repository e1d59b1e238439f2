"""Run the replay server: ``python -m replay_server``."""
from __future__ import annotations

import logging

import uvicorn

from .app import create_app
from .config import Settings, configure_logging

logger = logging.getLogger("replay_server")


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    logger.info("Listening on http://[%s]:%d", settings.host, settings.port)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
