"""Library configuration: FunclibConfig, init() and get_config().

Settings come from keyword arguments to ``init`` first, then from the
environment, then from the dataclass defaults:

    FUNCLIB_LOG_LEVEL     level for funclib's logger; unset keeps it silent
    FUNCLIB_LOG_JSON      "true"/"false": JSON or console log lines
    FUNCLIB_MEMO_LOCKING  "true"/"false": default per-key memoizer locking
"""

from __future__ import annotations

import dataclasses
import os
import warnings

from funclib._logging import configure_logging

__all__ = ['FunclibConfig', 'get_config', 'init', 'reset_config']

_FLAGS = {'1': True, 'true': True, 'yes': True, 'on': True, '0': False, 'false': False, 'no': False, 'off': False}


@dataclasses.dataclass(frozen=True)
class FunclibConfig:
    """Configuration for funclib.

    Attributes:
        log_level: Level for the ``funclib`` logger. None = silent.
        json_logs: Emit JSON logs when ``init`` configures logging.
        memo_locking: Default for ``Memoizer`` per-key locking.
    """

    log_level: str | None = None
    json_logs: bool = True
    memo_locking: bool = True


_config: FunclibConfig | None = None


def _flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name, '').strip().lower()
    if not raw:
        return default
    if raw not in _FLAGS:
        warnings.warn(f'Ignoring {name}={raw!r}; expected true or false', stacklevel=3)
        return default
    return _FLAGS[raw]


def _from_env() -> FunclibConfig:
    return FunclibConfig(
        log_level=os.environ.get('FUNCLIB_LOG_LEVEL') or None,
        json_logs=_flag('FUNCLIB_LOG_JSON', default=True),
        memo_locking=_flag('FUNCLIB_MEMO_LOCKING', default=True),
    )


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
    memo_locking: bool | None = None,
) -> FunclibConfig:
    """Set the configuration, configuring logging when a level is known.

    Arguments left as None fall back to the environment.

    Example:
        ```python
        import funclib

        funclib.init(log_level="DEBUG", json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    given = {'log_level': log_level, 'json_logs': json_logs, 'memo_locking': memo_locking}
    _config = dataclasses.replace(_from_env(), **{k: v for k, v in given.items() if v is not None})
    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)
    return _config


def get_config() -> FunclibConfig:
    """Return the active configuration, reading the environment on first use.

    Unlike ``init`` this never configures logging.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = _from_env()
    return _config


def reset_config() -> None:
    """Forget the active configuration so the next lookup re-reads the environment."""
    global _config  # noqa: PLW0603

    _config = None
