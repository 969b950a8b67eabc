from __future__ import annotations

import logging

from movie_api.shared.config import Settings

ACCESS_LOGGER_NAME = "movie_api.access"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_configured = False


def configure_logging(settings: Settings) -> None:
    global _configured
    if _configured:
        return

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    if settings.access_log_path:
        handler = logging.FileHandler(settings.access_log_path, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s %(message)s"))
        logging.getLogger(ACCESS_LOGGER_NAME).addHandler(handler)
    _configured = True
