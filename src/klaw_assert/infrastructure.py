"""Shared helpers for predicate mixins: exception factory, messages, traversal."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, ClassVar

from klaw_assert.codes import Code
from klaw_assert.errors import AssertionFailedError
from klaw_assert.messages import MessageCallback, generate_message
from klaw_assert.messages import stringify as _stringify

__all__ = ['AssertionInfrastructure', 'Message', 'predicate']

type Message = str | MessageCallback | None

_PREDICATE_MARKER = '__klaw_predicate__'


def predicate[F: Callable[..., Any]](fn: F) -> F:
    """Register a method as a predicate of its assertion class.

    Registered predicates gain ``null_or_<name>`` and ``all_<name>`` variants
    and can be called on chains. Subclasses may override a predicate without
    repeating the decorator.
    """
    setattr(fn, _PREDICATE_MARKER, True)
    return fn


def is_predicate(attr: Any) -> bool:
    return getattr(attr, _PREDICATE_MARKER, False) is True


class AssertionInfrastructure:
    """Core helpers used by every predicate mixin.

    Every predicate follows the same contract: return ``True`` when the value
    passes, otherwise ``raise self._fail(...)`` with its own parameter map.
    """

    exception_class: ClassVar[type[AssertionFailedError]] = AssertionFailedError

    def stringify(self, value: Any) -> str:
        """Render a value for failure messages. Override to customise."""
        return _stringify(value)

    def create_exception(
        self,
        value: Any,
        message: str,
        code: int,
        property_path: str | None = None,
        constraints: Mapping[str, Any] | None = None,
    ) -> AssertionFailedError:
        """Build (but do not raise) an instance of ``exception_class``."""
        return self.exception_class(message, code, property_path, value, constraints or {})

    def _fail(
        self,
        name: str,
        value: Any,
        message: Message,
        default: str,
        code: int,
        property_path: str | None,
        *,
        constraints: Mapping[str, Any] | None = None,
        **params: Any,
    ) -> AssertionFailedError:
        parameters = {
            'value': value,
            **params,
            'property_path': property_path,
            'assertion': f'{type(self).__name__}.{name}',
        }
        text = generate_message(message, default, parameters, self.stringify)
        return self.create_exception(value, text, code, property_path, constraints)

    @staticmethod
    def _is_traversable(value: Any) -> bool:
        if isinstance(value, (str, bytes, bytearray)):
            return False
        return isinstance(value, Iterable)

    @staticmethod
    def _elements(values: Any) -> Iterator[Any]:
        if isinstance(values, Mapping):
            return iter(values.values())
        return iter(values)

    @predicate
    def is_traversable(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value can be iterated element by element.

        Strings and bytes are scalars here, not traversables.
        """
        if not self._is_traversable(value):
            raise self._fail(
                'is_traversable',
                value,
                message,
                'Expected a traversable. Got: {value}',
                Code.INVALID_TRAVERSABLE,
                property_path,
            )
        return True
