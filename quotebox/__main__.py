"""``python -m quotebox`` で API サーバーを起動する。"""

import logging
import sys

import uvicorn

from quotebox.config import ConfigError, load_settings
from quotebox.logging_config import setup_logging

logger = logging.getLogger(__name__)

KEEP_ALIVE_TIMEOUT_SECONDS = 120
GRACEFUL_SHUTDOWN_SECONDS = 5


def main() -> int:
    try:
        settings = load_settings()
    except ConfigError as exc:
        setup_logging()
        logger.error("Failed to load configuration: %s", exc)
        return 1

    setup_logging(settings.log_level)
    uvicorn.run(
        "quotebox.api.main:app",
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
        timeout_keep_alive=KEEP_ALIVE_TIMEOUT_SECONDS,
        timeout_graceful_shutdown=GRACEFUL_SHUTDOWN_SECONDS,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
