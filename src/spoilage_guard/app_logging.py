"""Logging configuration helpers."""

import logging

LOGGER_NAME = "spoilage_guard"
LOG_FORMAT = "%(asctime)s %(levelname)s: %(name)s: %(message)s"


def configure_logging(*, debug: bool = False) -> logging.Logger:
    """Attach one stream handler to the package logger and set its level.

    Debug mode lowers the level so guardrail overrides are emitted. Repeated
    calls only adjust the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
