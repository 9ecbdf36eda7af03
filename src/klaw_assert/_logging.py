"""Structured logging for klaw-assert.

Assertion diagnostics (collected lazy failures, verification summaries) are
structlog events routed through stdlib logging. ``configure_logging`` installs
one ``ProcessorFormatter`` handler so that these events and third-party stdlib
records are rendered the same way.

Library loggers check the stdlib level before doing any work: nothing is
emitted until the host application, or ``init(log_level=...)``, configures
logging.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

type LogHook = Callable[[dict[str, Any]], None]

_DEFAULT_LOGGER = 'klaw_assert'

# Marks the handler installed by configure_logging, so reconfiguring replaces it
# without touching handlers the host application added.
_HANDLER_NAME = 'klaw_assert'


def _pre_chain() -> list[Any]:
    """Processors applied to every record, structlog or foreign."""
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _run_hooks,
    ]


def _event_chain() -> list[Any]:
    """Processors for klaw-assert's own structlog events."""
    import structlog

    return [
        structlog.stdlib.filter_by_level,
        *_pre_chain(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Route log records to stderr through a structlog formatter.

    Args:
        level: Root logging level ("DEBUG", "INFO", "WARNING", "ERROR",
            "CRITICAL"). Unknown names fall back to INFO.
        json_output: Render JSON lines. If False, render for a console, with
            colours when stderr is a terminal.

    Example:
        ```python
        from klaw_assert import configure_logging, lazy

        configure_logging('DEBUG', json_output=False)
        lazy().that('x', 'age').integer().verify_now()
        # logs assertion_collected and lazy_assertion_verified, then raises
        ```
    """
    import structlog

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger on top of the stdlib logger ``name``.

    Args:
        name: Logger name. Defaults to ``klaw_assert``.

    Returns:
        A structlog BoundLogger. Events below the stdlib logger's effective
        level are dropped before any processing.
    """
    import structlog

    return structlog.wrap_logger(
        logging.getLogger(name or _DEFAULT_LOGGER),
        processors=_event_chain(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


# --- Log hooks ---

_log_hooks: list[LogHook] = []


def add_log_hook(hook: LogHook) -> None:
    """Call ``hook`` with a copy of every log entry, e.g. to count failures.

    Args:
        hook: Callable that receives the entry's event dict.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister ``hook``. Unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: BLE001, S112
            continue  # a broken hook must not break logging
    return event_dict
