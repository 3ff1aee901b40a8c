"""Logging helpers (no env reads)."""
import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str, level: int | str | None = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def set_level(level: int | str, name: str = "errorlogger") -> None:
    """Apply ``level`` to the package logger and every child already created."""
    logging.getLogger(name).setLevel(level)
    prefix = f"{name}."
    for logger_name, logger in logging.Logger.manager.loggerDict.items():
        if logger_name.startswith(prefix) and isinstance(logger, logging.Logger):
            logger.setLevel(level)
