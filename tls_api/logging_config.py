"""Logging setup applied when the application starts."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level."""

    root = logging.getLogger()
    resolved_level = logging.getLevelName(level.upper())
    if not isinstance(resolved_level, int):
        resolved_level = logging.INFO
    if not root.handlers:
        logging.basicConfig(level=resolved_level, format=LOG_FORMAT)
    root.setLevel(resolved_level)
