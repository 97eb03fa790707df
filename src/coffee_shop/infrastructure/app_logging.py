"""Logging configuration helpers."""

import logging


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Attach a single stream handler to the ``coffee_shop`` logger.

    Calling it again only adjusts the level.
    """
    logger = logging.getLogger("coffee_shop")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
