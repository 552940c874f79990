import logging
import os
import sys

LOG_LEVEL_ENV = "PCMCLIP_LOG_LEVEL"
DEFAULT_LEVEL = "INFO"


def setup_logger(name="pcmclip", level=None):
    """
    Returns the package logger, attaching a console handler once.
    The level comes from ``level``, then $PCMCLIP_LOG_LEVEL, then INFO.
    An unknown level name falls back to INFO with a warning.
    """
    logger = logging.getLogger(name)
    level = level or os.environ.get(LOG_LEVEL_ENV, DEFAULT_LEVEL)

    # Console Handler; stderr keeps stdout free for command output
    ch = logging.StreamHandler(sys.stderr)

    # Formatter
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    ch.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(ch)

    try:
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    except ValueError:
        logger.setLevel(DEFAULT_LEVEL)
        logger.warning(f"Unknown log level {level!r}, using {DEFAULT_LEVEL}")

    return logger


logger = setup_logger()
