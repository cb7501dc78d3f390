"""Logging setup shared by the CLI and the web UI."""

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Configure root logging once.

    Args:
        level: Logging level as an int or a level name such as "DEBUG".
            Unknown names fall back to WARNING.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
