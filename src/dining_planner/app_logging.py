"""Logging configuration helpers."""

import logging

_NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(*, debug: bool = False) -> None:
    """Set up the dining_planner logger once and quiet per-request HTTP logs."""
    logger = logging.getLogger("dining_planner")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
