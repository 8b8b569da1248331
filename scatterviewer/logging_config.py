"""Logger setup for the viewer page; called once per server process from ``Home.py``."""
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int | str = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Send 'scatterviewer.*' records (clicks, relayouts, dataset loads) to stdout.

    level: a logging level or its name, as given by ViewerConfig.log_level.
    log_file: optional file that receives the same records.

    Calling it again replaces the handlers, so a re-executed page script never
    prints each record twice.
    """
    logger = logging.getLogger("scatterviewer")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Viewer logging at %s", logging.getLevelName(logger.level))
    return logger
