"""Process configuration: AssertConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_assert._logging import configure_logging

__all__ = [
    'AssertConfig',
    'get_config',
    'init',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'', '0', 'false', 'no', 'off'})
_LOG_LEVELS = frozenset({'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'})


@dataclass(frozen=True)
class AssertConfig:
    """Configuration for klaw-assert.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        try_all: Default try-all mode for new lazy assertions.
        stringify_limit: Longest rendering of a value in failure messages.
    """

    log_level: str | None = None
    try_all: bool = False
    stringify_limit: int = 100


# Global configuration (set by init())
_config: AssertConfig | None = None


def _detect_log_level() -> str | None:
    env_level = os.environ.get('KLAW_ASSERT_LOG_LEVEL', '').upper()
    if not env_level:
        return None
    if env_level not in _LOG_LEVELS:
        logging.warning("Unknown KLAW_ASSERT_LOG_LEVEL value '%s', logging stays silent", env_level)
        return None
    return env_level


def _detect_try_all() -> bool:
    env_try_all = os.environ.get('KLAW_ASSERT_TRY_ALL', '').lower()
    if env_try_all in _TRUTHY:
        return True
    if env_try_all not in _FALSY:
        logging.warning("Unknown KLAW_ASSERT_TRY_ALL value '%s', defaulting to false", env_try_all)
    return False


def _detect_stringify_limit() -> int:
    env_limit = os.environ.get('KLAW_ASSERT_STRINGIFY_LIMIT', '')
    if not env_limit:
        return AssertConfig.stringify_limit
    try:
        return _clamp_limit(int(env_limit))
    except ValueError:
        logging.warning("Unknown KLAW_ASSERT_STRINGIFY_LIMIT value '%s', defaulting to 100", env_limit)
        return AssertConfig.stringify_limit


def _clamp_limit(limit: int) -> int:
    # Truncated values keep 3 chars for the ellipsis.
    return max(4, limit)


def _config_from_env() -> AssertConfig:
    """Build a configuration from KLAW_ASSERT_* environment variables."""
    return AssertConfig(
        log_level=_detect_log_level(),
        try_all=_detect_try_all(),
        stringify_limit=_detect_stringify_limit(),
    )


def init(
    log_level: str | None = None,
    try_all: bool | None = None,
    stringify_limit: int | None = None,
) -> AssertConfig:
    """Initialize klaw-assert with the specified configuration.

    Arguments left as None are read from the environment.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        try_all: Whether new lazy assertions start in try-all mode.
        stringify_limit: Longest rendering of a value in failure messages.

    Returns:
        The AssertConfig that was set.

    Example:
        ```python
        from klaw_assert import init

        init(log_level='DEBUG', try_all=True)
        ```
    """
    global _config  # noqa: PLW0603

    detected = _config_from_env()
    _config = AssertConfig(
        log_level=log_level.upper() if log_level is not None else detected.log_level,
        try_all=detected.try_all if try_all is None else try_all,
        stringify_limit=detected.stringify_limit if stringify_limit is None else _clamp_limit(stringify_limit),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level)

    return _config


def get_config() -> AssertConfig:
    """Get the current configuration.

    Unlike a runtime that must be started, assertions work without ``init()``:
    the first call reads the environment and keeps the result until ``init()``
    replaces it.

    Returns:
        The current AssertConfig.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = _config_from_env()
    return _config
