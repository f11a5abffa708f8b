import logging
import sys
from typing import TextIO

LOGGER_NAME = "paramsched"


def build_logger(
        qualifier: str = "main",
        level: int = logging.INFO,
        stream: TextIO | None = None
) -> logging.Logger:
    """
    Configures and returns the paramsched logger.

    Any handler left by a previous call is replaced, so calling this repeatedly
    never duplicates output. Schedulers and iterators log through this logger.

    Args:
        qualifier: A short string identifying the owner of the log messages,
            e.g. the name of the training job.
        level: The logging level for both the logger and its handler.
        stream: Where records are written. Defaults to stdout.

    Returns:
        A configured logging.Logger instance.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout if stream is None else stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        f"[paramsched] [{qualifier}] %(asctime)s - %(levelname)s - %(name)s - %(message)s"
    ))
    logger.addHandler(handler)
    return logger
