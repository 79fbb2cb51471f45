"""Package-wide logging for lsgraph.

Every module logs through ``get_logger(__name__)``. Records flow up to the
``lsgraph`` logger, which owns the only handler (stdout by default). Its level
and record format come from ``EngineConfig.log_level`` and
``EngineConfig.log_format`` unless given explicitly.
"""

import logging
import sys
from typing import Optional, Union

from lsgraph.config import ENGINE_CONFIG

ROOT_LOGGER_NAME = "lsgraph"

# True once the "lsgraph" logger owns its handler
_configured = False


def _resolve_level(level: Union[int, str]) -> int:
    """Map a level number or a level name such as ``"debug"`` to a number."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level '{level}'.")
    return value


def setup_root_logger(
    level: Optional[Union[int, str]] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``lsgraph`` logger.

    Only the first call has an effect; ``reset_logging()`` re-arms it.

    Args:
        level: Level number or name; defaults to ``ENGINE_CONFIG.log_level``.
        format_string: Record format; defaults to ``ENGINE_CONFIG.log_format``.
        handler: Destination; defaults to a stream handler on stdout.
    """
    global _configured
    if _configured:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(
        _resolve_level(ENGINE_CONFIG.log_level if level is None else level)
    )
    root_logger.handlers.clear()

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or ENGINE_CONFIG.log_format))
    root_logger.addHandler(handler)

    # pytest's caplog listens on the stdlib root logger
    root_logger.propagate = True
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, level inherited from ``lsgraph``."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: Union[int, str]) -> None:
    """Set the level of the ``lsgraph`` logger and its handlers.

    Args:
        level: Level number (``logging.DEBUG``) or name (``"debug"``).

    Raises:
        ValueError: If ``level`` names no known level.
    """
    value = _resolve_level(level)
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(value)
    for handler in root_logger.handlers:
        handler.setLevel(value)


def enable_debug_logging() -> None:
    """Log engine internals (SPF and reachability progress)."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the handler and level so the next call configures from scratch."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
