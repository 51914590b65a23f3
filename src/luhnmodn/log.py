"""Logger setup shared by the library and the command line program."""

import logging
import os

from luhnmodn import config

_loggers = {}


def get_logger(name: str) -> logging.Logger:
    """
    Return a named logger with a single structured stream handler attached.

    The level comes from the LUHNMODN_LOG_LEVEL environment variable and
    defaults to WARNING so library use stays quiet.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()

        level_name = os.getenv(config.LOG_LEVEL_ENV, config.DEFAULT_LOG_LEVEL).upper()
        logger.setLevel(getattr(logging, level_name, logging.WARNING))

        formatter = logging.Formatter(
            config.LOG_FORMAT,
            datefmt=config.LOG_DATE_FORMAT,
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    _loggers[name] = logger
    return logger


def set_level(level: str):
    """Override the level of every logger handed out by get_logger."""
    for logger in _loggers.values():
        logger.setLevel(getattr(logging, level.upper(), logging.WARNING))


def log(logger: logging.Logger, level: str, message: str, **kwargs):
    """Structured logging with optional context."""
    log_method = getattr(logger, level.lower(), logger.info)

    if kwargs:
        context = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        message = f"{message} | {context}"

    log_method(message)
