# logger_setup.py

import logging

from doomfire.constants import LOG_FORMAT, LOG_LEVEL


def setup_logging(level=LOG_LEVEL):
    """
    Sets up logging for the application.

    Configures a dedicated application logger (not the root logger) that
    writes to the console. Third-party output (taichi, Qt) keeps its own
    handlers. Nothing is written to disk.

    Data Contract:
    - Inputs: level (str or int) - A logging level name or number.
    - Outputs: The configured "doomfire" logger.
    - Side Effects: Replaces any handlers previously attached to "doomfire".
    """
    logger = logging.getLogger("doomfire")
    logger.setLevel(level)

    # --- Keep records out of the root logger ---
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)

    # Clear existing handlers to avoid duplication if this function is called again
    if logger.hasHandlers():
        logger.handlers.clear()
    logger.addHandler(stream_handler)

    logger.debug(f"Logging initialized at level {logging.getLevelName(logger.level)}")
    return logger
