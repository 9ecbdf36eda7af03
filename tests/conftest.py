"""Pytest configuration: isolate process-wide configuration and logging state."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
from klaw_assert import _config
from klaw_assert._logging import clear_log_hooks

if TYPE_CHECKING:
    from collections.abc import Generator

_ENV_VARS = ('KLAW_ASSERT_LOG_LEVEL', 'KLAW_ASSERT_TRY_ALL', 'KLAW_ASSERT_STRINGIFY_LIMIT')


@pytest.fixture(autouse=True)
def isolate_config() -> Generator[None]:
    """Run every test with no init() and no KLAW_ASSERT_* variables set."""
    clean_env = {key: value for key, value in os.environ.items() if key not in _ENV_VARS}
    with patch.dict(os.environ, clean_env, clear=True):
        _config._config = None
        yield
    _config._config = None


@pytest.fixture(autouse=True)
def isolate_logging() -> Generator[None]:
    """Restore root logger handlers and level, and drop log hooks."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    clear_log_hooks()
    yield
    clear_log_hooks()
    root.handlers[:] = handlers
    root.setLevel(level)
