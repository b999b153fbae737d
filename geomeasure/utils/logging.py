"""Package logger for geomeasure"""

__all__ = ['LOGGER', 'set_log_level', 'warn_once']

import logging
from typing import Set, Union

LOGGER = logging.getLogger('geomeasure')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_LOG_HANDLER)

_WARNED: Set[str] = set()


def set_log_level(level: Union[int, str]) -> None:
    """
    Adjust the verbosity of the geomeasure logger, e.g. 'DEBUG' to see solver
    iteration counts.

    Args:
        level:
            A logging level name or number
    """
    LOGGER.setLevel(level)


def warn_once(message: str, *args) -> None:
    """Logs a warning the first time a given (unformatted) message is seen"""
    if message in _WARNED:
        return

    LOGGER.warning(message, *args)
    _WARNED.add(message)
