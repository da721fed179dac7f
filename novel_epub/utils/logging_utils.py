# Standard Package imports
import logging
from typing import Optional

from rich.logging import RichHandler

# Project imports
from novel_epub.config import LOG_LEVEL, MAIN_LOGGER_NAME


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return a logger under the main application logger.

    The rich handler is attached once to the main logger, every module logger
    is a child of it so they all share the same output and level.
    """
    main_logger = logging.getLogger(MAIN_LOGGER_NAME)
    if not main_logger.handlers:
        handler = RichHandler(show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        main_logger.addHandler(handler)
        main_logger.setLevel(LOG_LEVEL)
        main_logger.propagate = False

    if not name or name == MAIN_LOGGER_NAME:
        return main_logger
    if name.startswith(MAIN_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return main_logger.getChild(name)
