"""Type predicates: what kind of value is this?"""

from __future__ import annotations

import io
import re
from collections.abc import Iterable, Sequence
from numbers import Number
from typing import Any

from klaw_assert.codes import Code
from klaw_assert.infrastructure import AssertionInfrastructure, Message, predicate

__all__ = ['TypeAssertions']

_NUMERIC_RE = re.compile(r'\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*')
_INTEGERISH_RE = re.compile(r'\d+|-[1-9]\d*')
_SCALARS = (bool, int, float, complex, str, bytes)
_CONTAINERS = (list, tuple, dict, set, frozenset)


class TypeAssertions(AssertionInfrastructure):
    @predicate
    def integer(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is an int. Booleans are not integers."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise self._fail(
                'integer', value, message, 'Expected an integer. Got: {value}', Code.INVALID_INTEGER, property_path
            )
        return True

    @predicate
    def float(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is a float."""
        if not isinstance(value, float):
            raise self._fail('float', value, message, 'Expected a float. Got: {value}', Code.INVALID_FLOAT, property_path)
        return True

    @predicate
    def digit(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value consists of ASCII digits only, e.g. ``7`` or ``'042'``."""
        text = value if isinstance(value, str) else ''
        if isinstance(value, int) and not isinstance(value, bool):
            text = str(value)
        if not (text.isascii() and text.isdigit()):
            raise self._fail('digit', value, message, 'Expected a digit. Got: {value}', Code.INVALID_DIGIT, property_path)
        return True

    @predicate
    def integerish(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is an int, a whole float, or the text of an integer.

        Leading zeros are accepted (``'007'``). Signs other than a leading
        minus, whitespace and decimal points are not.
        """
        if isinstance(value, bool):
            ok = False
        elif isinstance(value, int):
            ok = True
        elif isinstance(value, float):
            ok = value.is_integer()
        elif isinstance(value, str):
            ok = _INTEGERISH_RE.fullmatch(value) is not None
        else:
            ok = False
        if not ok:
            raise self._fail(
                'integerish',
                value,
                message,
                'Expected an integerish value. Got: {value}',
                Code.INVALID_INTEGERISH,
                property_path,
            )
        return True

    @predicate
    def boolean(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        if not isinstance(value, bool):
            raise self._fail(
                'boolean', value, message, 'Expected a boolean. Got: {value}', Code.INVALID_BOOLEAN, property_path
            )
        return True

    @predicate
    def scalar(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is a bool, number, str or bytes."""
        if not isinstance(value, _SCALARS):
            raise self._fail(
                'scalar', value, message, 'Expected a scalar. Got: {value}', Code.INVALID_SCALAR, property_path
            )
        return True

    @predicate
    def string(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        if not isinstance(value, str):
            raise self._fail(
                'string', value, message, 'Expected a string. Got: {value}', Code.INVALID_STRING, property_path
            )
        return True

    @predicate
    def numeric(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is a number or a string holding a decimal number.

        Example:
            ```python
            assertion.numeric(' 1.5e3')
            # True
            assertion.numeric('nan')
            # raises AssertionFailedError
            ```
        """
        if isinstance(value, bool):
            ok = False
        elif isinstance(value, Number):
            ok = not isinstance(value, complex)
        elif isinstance(value, str):
            ok = _NUMERIC_RE.fullmatch(value) is not None
        else:
            ok = False
        if not ok:
            raise self._fail(
                'numeric', value, message, 'Expected a numeric. Got: {value}', Code.INVALID_NUMERIC, property_path
            )
        return True

    @predicate
    def is_resource(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is an open file object."""
        if not isinstance(value, io.IOBase) or value.closed:
            raise self._fail(
                'is_resource', value, message, 'Expected a resource. Got: {value}', Code.INVALID_RESOURCE, property_path
            )
        return True

    @predicate
    def is_array(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is a list, tuple or dict."""
        if not isinstance(value, (list, tuple, dict)):
            raise self._fail(
                'is_array', value, message, 'Expected an array. Got: {value}', Code.INVALID_ARRAY, property_path
            )
        return True

    @predicate
    def is_object(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is an instance of some class other than the builtin scalars and containers."""
        if value is None or isinstance(value, (*_SCALARS, *_CONTAINERS)):
            raise self._fail(
                'is_object', value, message, 'Expected an object. Got: {value}', Code.INVALID_OBJECT, property_path
            )
        return True

    @predicate
    def is_callable(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        if not callable(value):
            raise self._fail(
                'is_callable', value, message, 'Expected a callable. Got: {value}', Code.INVALID_CALLABLE, property_path
            )
        return True

    @predicate
    def is_iterable(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is iterable. Strings and bytes are not."""
        if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Iterable):
            raise self._fail(
                'is_iterable', value, message, 'Expected an iterable. Got: {value}', Code.INVALID_ITERABLE, property_path
            )
        return True

    @predicate
    def is_instance_of_any(
        self,
        value: Any,
        classes: Sequence[type],
        message: Message = None,
        property_path: str | None = None,
    ) -> bool:
        if not isinstance(value, tuple(classes)):
            raise self._fail(
                'is_instance_of_any',
                value,
                message,
                'Expected an instance of any of {classes}. Got: {value}',
                Code.INVALID_INSTANCE_OF_ANY,
                property_path,
                classes=_class_names(classes),
            )
        return True

    @predicate
    def is_any_of(
        self,
        value: Any,
        classes: Sequence[type],
        message: Message = None,
        property_path: str | None = None,
    ) -> bool:
        """Assert that value is an instance, or a subclass, of any of ``classes``."""
        if not _is_a(value, tuple(classes)):
            raise self._fail(
                'is_any_of',
                value,
                message,
                'Expected an instance of any of this classes or any of those classes among their parents '
                '"{classes}". Got: {value}',
                Code.INVALID_ANY_OF,
                property_path,
                classes=_class_names(classes),
            )
        return True

    @predicate
    def is_not_a(self, value: Any, cls: type, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is neither an instance nor a subclass of ``cls``."""
        if _is_a(value, (cls,)):
            raise self._fail(
                'is_not_a',
                value,
                message,
                'Expected an instance of this class or to this class among its parents other than "{cls}". '
                'Got: {value}',
                Code.INVALID_NOT_A,
                property_path,
                cls=cls,
            )
        return True


def _is_a(value: Any, classes: tuple[type, ...]) -> bool:
    if isinstance(value, type):
        return issubclass(value, classes)
    return isinstance(value, classes)


def _class_names(classes: Sequence[type]) -> str:
    return ', '.join(cls.__qualname__ for cls in classes)
