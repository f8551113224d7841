"""
Logging utilities. All loggers are children of the `rlcontrol` logger and write
to stderr. The default level is WARNING so learners stay silent unless asked.

    >>> from rlcontrol.logging import get_logger, set_log_level
    >>> logger = get_logger(__name__)
    >>> set_log_level('DEBUG')
"""

import logging
import sys
from typing import Dict, Union

_DEFAULT_LEVEL = logging.WARNING
_ROOT = 'rlcontrol'

_loggers: Dict[str, logging.Logger] = {}



def get_logger(name: str = None) -> logging.Logger:
    """
    Gets or creates a logger. Loggers are cached so handlers are only attached
    once.

    Args:
    * name: Typically `__name__` of the calling module. Names outside the
    package are nested under `rlcontrol.`.

    Returns:
    * A configured `logging.Logger`.
    """
    if name is None:
        name = _ROOT
    if name != _ROOT and not name.startswith(_ROOT + '.'):
        name = '{}.{}'.format(_ROOT, name)

    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)
    root = logging.getLogger(_ROOT)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
        root.addHandler(handler)
        root.setLevel(_DEFAULT_LEVEL)
        root.propagate = False

    _loggers[name] = logger
    return logger



def set_log_level(level: Union[int, str]):
    """
    Sets the level of every `rlcontrol` logger.

    Args:
    * level: A `logging` level constant or its name, e.g. 'DEBUG'.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    get_logger(_ROOT).setLevel(level)
