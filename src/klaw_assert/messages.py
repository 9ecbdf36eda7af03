"""Failure message generation and value stringification."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from klaw_assert._config import get_config

__all__ = ['MessageCallback', 'generate_message', 'stringify']

type MessageCallback = Callable[[dict[str, Any]], str]


def stringify(value: Any, limit: int | None = None) -> str:
    """Render a value for use in a failure message.

    Args:
        value: Any value.
        limit: Longest rendering of a scalar. Defaults to the configured
            ``stringify_limit``.

    Returns:
        ``<TRUE>``/``<FALSE>`` for booleans, ``<NULL>`` for None, ``<ARRAY>``
        for containers, the class name for other objects, and the (possibly
        truncated) text of scalars.

    Example:
        ```python
        stringify(None)
        # '<NULL>'
        stringify('x' * 120)[-3:]
        # '...'
        ```
    """
    if isinstance(value, bool):
        return '<TRUE>' if value else '<FALSE>'
    if value is None:
        return '<NULL>'
    if isinstance(value, (int, float, complex, str)):
        text = str(value)
        limit = get_config().stringify_limit if limit is None else limit
        if len(text) > limit:
            text = text[: limit - 3] + '...'
        return text
    if isinstance(value, (bytes, bytearray)):
        return stringify(value.decode('utf-8', errors='replace'), limit)
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return '<ARRAY>'
    if isinstance(value, type):
        return value.__qualname__
    return type(value).__qualname__


class _FormatParams(dict[str, str]):
    """Leave unknown placeholders in place instead of raising."""

    def __missing__(self, key: str) -> str:
        return '{' + key + '}'


def generate_message(
    message: str | MessageCallback | None,
    default: str,
    parameters: Mapping[str, Any],
    render: Callable[[Any], str] = stringify,
) -> str:
    """Resolve the message of a failing predicate.

    Args:
        message: Caller-supplied message. A callable receives a copy of
            ``parameters`` (raw, unrendered values) and returns the message.
            A string is used as a template, like ``default``.
        default: Template used when ``message`` is empty, e.g.
            ``'Expected a value less than {limit}. Got: {value}'``.
        parameters: The predicate's named arguments, plus ``value``,
            ``property_path`` and ``assertion``.
        render: Turns parameter values into text for template placeholders.

    Returns:
        The final message.
    """
    if callable(message):
        return str(message(dict(parameters)))

    template = message or default
    rendered = _FormatParams({key: render(param) for key, param in parameters.items()})
    try:
        return template.format_map(rendered)
    except (ValueError, IndexError, AttributeError, KeyError, TypeError):
        # Not a template, e.g. a literal '{' in a custom message.
        return template
