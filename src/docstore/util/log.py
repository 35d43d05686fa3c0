"""Package logger and its one-time setup"""

import logging

from docstore.config import Settings, load_config


LOGGER_NAME = "docstore"

logger = logging.getLogger(LOGGER_NAME)

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Apply log_level to the package logger and attach one stream handler at most.

    Without settings, they are read with load_config() from config.yaml and
    the environment.
    """
    if settings is None:
        settings = load_config()
    logger.setLevel(settings.log_level)
    if not any(h.get_name() == LOGGER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(LOGGER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    return logger
