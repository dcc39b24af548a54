"""Logging for funclib, built on structlog.

funclib emits debug events only (memoizer creation and cache misses) and
stays silent until structlog is configured, by the host application or by
``configure_logging``. ``configure_logging`` installs its handler on the
``funclib`` logger alone; handlers the host application put on the root
logger are left untouched.

Log hooks see every event after level filtering, as a copy of the event
dict, which is how the tests observe cache misses.
"""

from __future__ import annotations

import logging
import sys
import warnings
from collections.abc import Callable
from typing import Any

import structlog

__all__ = [
    'LOGGER_NAME',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'is_logging_configured',
    'remove_log_hook',
]

LOGGER_NAME = 'funclib'
_HANDLER_NAME = 'funclib-structlog'

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Route funclib's structlog events to stderr.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Level for the ``funclib`` logger ("DEBUG", "INFO", ...).
            Unknown names fall back to INFO.
        json_output: Render JSON lines (True) or a console layout (False).
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso'),
            _run_hooks,
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if json_output:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    library_logger = logging.getLogger(LOGGER_NAME)
    for previous in [h for h in library_logger.handlers if h.get_name() == _HANDLER_NAME]:
        library_logger.removeHandler(previous)
    library_logger.addHandler(handler)
    library_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    library_logger.propagate = False


def is_logging_configured() -> bool:
    """Return True once structlog has been configured by anyone."""
    return structlog.is_configured()


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger, named ``name`` for stdlib level filtering."""
    return structlog.get_logger(name)


def add_log_hook(hook: LogHook) -> None:
    """Call ``hook`` with a copy of every log event that passes the level filter."""
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Stop calling ``hook``. Unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    # A hook that raises is dropped with a warning; the event itself is still logged.
    for hook in list(_log_hooks):
        try:
            hook(event_dict.copy())
        except Exception as e:  # noqa: BLE001
            remove_log_hook(hook)
            warnings.warn(f'log hook {hook!r} raised {e!r} and was removed', RuntimeWarning, stacklevel=2)
    return event_dict
