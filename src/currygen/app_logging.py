"""Logging setup for the currygen CLI."""

import logging

LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Route `currygen.*` records to stderr at `level`.

    Safe to call once per CLI invocation: the level is always updated, the
    stream handler is only attached the first time.
    """
    package_logger = logging.getLogger("currygen")
    package_logger.setLevel(level)
    package_logger.propagate = False
    if any(isinstance(h, logging.StreamHandler) for h in package_logger.handlers):
        return
    stderr_handler = logging.StreamHandler()
    stderr_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(stderr_handler)
