"""Logging utilities for the logarithm package.

The rank-zero wrapping is adapted from `lightning-hydra-template` by @ashleve.
"""
import logging
import os

from lightning.pytorch.utilities import rank_zero_only

_LOGGING_LEVELS = (
    "debug",
    "info",
    "warning",
    "error",
    "exception",
    "fatal",
    "critical",
)


def get_pylogger(
    name: str = __name__, level_from_env: bool = True
) -> logging.Logger:
    """Initializes multi-process-friendly python command line logger.

    Args:
        name (str, optional): name of the logger. Defaults to `__name__`.
        level_from_env (bool, optional): if set the level is read from the
            `LOG_LEVEL` environment variable, defaulting to `INFO`. Otherwise
            the level is left unset so the logger follows its ancestors.
            Defaults to `True`.

    Returns:
        logging.Logger: the configured logger.

    Raises:
        ValueError: if `level_from_env` and `LOG_LEVEL` does not name a known
            logging level.
    """
    logger = logging.getLogger(name)
    if level_from_env:
        level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
        level = logging._nameToLevel.get(level_name)
        if not isinstance(level, int):
            raise ValueError(f"Invalid log level: {level_name}")
        logger.setLevel(level)

    # mark all logging levels with the rank zero decorator, otherwise logs
    # would get multiplied for each process in a distributed setup
    for method in _LOGGING_LEVELS:
        setattr(logger, method, rank_zero_only(getattr(logger, method)))

    return logger
