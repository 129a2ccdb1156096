# utils/logger.py
import logging
import sys
from config.paths import LOG_LEVEL, LOG_PATH, LOG_TO_FILE

_configured = False


def setup_logging(level: str = LOG_LEVEL, log_to_file: bool = LOG_TO_FILE) -> logging.Logger:
    """
    Attach the stdout (and optional file) handlers to the root logger.

    Module loggers are created with `logging.getLogger(__name__)` and propagate
    here, so the ledgers never configure handlers themselves.
    """
    global _configured

    logger = logging.getLogger()
    logger.setLevel(level)

    # Prevent duplicate handlers if called multiple times
    if _configured:
        return logger

    # Stream handler (stdout)
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_formatter = logging.Formatter("[%(levelname)s] %(message)s")
    stream_handler.setFormatter(stream_formatter)
    logger.addHandler(stream_handler)

    if log_to_file:
        # Ensure directory exists
        LOG_PATH.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(LOG_PATH, encoding="utf-8")
        file_formatter = logging.Formatter(
            "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    _configured = True
    return logger
