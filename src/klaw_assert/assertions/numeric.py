"""Ordering and range predicates.

Values that cannot be ordered against the limit (``'a' < 3``) fail the
predicate instead of leaking a ``TypeError``.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from klaw_assert.assertions.types import TypeAssertions
from klaw_assert.codes import Code
from klaw_assert.infrastructure import Message, predicate

__all__ = ['NumericAssertions']


def _holds(op: Callable[[Any, Any], bool], left: Any, right: Any) -> bool:
    try:
        return bool(op(left, right))
    except TypeError:
        return False


def _as_number(value: Any) -> Any:
    # Numeric strings compare by their numeric value.
    return float(value) if isinstance(value, str) else value


class NumericAssertions(TypeAssertions):
    @predicate
    def less_than(self, value: Any, limit: Any, message: Message = None, property_path: str | None = None) -> bool:
        if not _holds(operator.lt, value, limit):
            raise self._fail(
                'less_than',
                value,
                message,
                'Expected a value less than {limit}. Got: {value}',
                Code.INVALID_LESS,
                property_path,
                constraints={'limit': limit},
                limit=limit,
            )
        return True

    @predicate
    def less_or_equal_than(
        self, value: Any, limit: Any, message: Message = None, property_path: str | None = None
    ) -> bool:
        if not _holds(operator.le, value, limit):
            raise self._fail(
                'less_or_equal_than',
                value,
                message,
                'Expected a value less than or equal to {limit}. Got: {value}',
                Code.INVALID_LESS_OR_EQUAL,
                property_path,
                constraints={'limit': limit},
                limit=limit,
            )
        return True

    @predicate
    def greater_than(self, value: Any, limit: Any, message: Message = None, property_path: str | None = None) -> bool:
        if not _holds(operator.gt, value, limit):
            raise self._fail(
                'greater_than',
                value,
                message,
                'Expected a value greater than {limit}. Got: {value}',
                Code.INVALID_GREATER,
                property_path,
                constraints={'limit': limit},
                limit=limit,
            )
        return True

    @predicate
    def greater_or_equal_than(
        self, value: Any, limit: Any, message: Message = None, property_path: str | None = None
    ) -> bool:
        if not _holds(operator.ge, value, limit):
            raise self._fail(
                'greater_or_equal_than',
                value,
                message,
                'Expected a value greater than or equal to {limit}. Got: {value}',
                Code.INVALID_GREATER_OR_EQUAL,
                property_path,
                constraints={'limit': limit},
                limit=limit,
            )
        return True

    @predicate
    def between(
        self,
        value: Any,
        lower: Any,
        upper: Any,
        message: Message = None,
        property_path: str | None = None,
    ) -> bool:
        """Assert that ``lower <= value <= upper``.

        Example:
            ```python
            assertion.between(9.9, 10, 20)
            # raises AssertionFailedError:
            # 'Expected a value between 10 and 20 (inclusive). Got: 9.9'
            ```
        """
        if not (_holds(operator.le, lower, value) and _holds(operator.le, value, upper)):
            raise self._fail(
                'between',
                value,
                message,
                'Expected a value between {lower} and {upper} (inclusive). Got: {value}',
                Code.INVALID_BETWEEN,
                property_path,
                constraints={'lower': lower, 'upper': upper},
                lower=lower,
                upper=upper,
            )
        return True

    @predicate
    def between_exclusive(
        self,
        value: Any,
        lower: Any,
        upper: Any,
        message: Message = None,
        property_path: str | None = None,
    ) -> bool:
        """Assert that ``lower < value < upper``."""
        if not (_holds(operator.lt, lower, value) and _holds(operator.lt, value, upper)):
            raise self._fail(
                'between_exclusive',
                value,
                message,
                'Expected a value between {lower} and {upper} (exclusive). Got: {value}',
                Code.INVALID_BETWEEN_EXCLUSIVE,
                property_path,
                constraints={'lower': lower, 'upper': upper},
                lower=lower,
                upper=upper,
            )
        return True

    @predicate
    def range(
        self,
        value: Any,
        min_value: Any,
        max_value: Any,
        message: Message = None,
        property_path: str | None = None,
    ) -> bool:
        """Assert that value is numeric and within ``[min_value, max_value]``."""
        self.numeric(value, message, property_path)
        number = _as_number(value)
        if not (_holds(operator.ge, number, min_value) and _holds(operator.le, number, max_value)):
            raise self._fail(
                'range',
                value,
                message,
                'Expected a number between {min_value} and {max_value}. Got: {value}',
                Code.INVALID_RANGE,
                property_path,
                constraints={'min': min_value, 'max': max_value},
                min_value=min_value,
                max_value=max_value,
            )
        return True

    @predicate
    def min(self, value: Any, min_value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is numeric and at least ``min_value``."""
        self.numeric(value, message, property_path)
        if not _holds(operator.ge, _as_number(value), min_value):
            raise self._fail(
                'min',
                value,
                message,
                'Expected a number at least {min_value}. Got: {value}',
                Code.INVALID_MIN,
                property_path,
                constraints={'min': min_value},
                min_value=min_value,
            )
        return True

    @predicate
    def max(self, value: Any, max_value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is numeric and at most ``max_value``."""
        self.numeric(value, message, property_path)
        if not _holds(operator.le, _as_number(value), max_value):
            raise self._fail(
                'max',
                value,
                message,
                'Expected a number at most {max_value}. Got: {value}',
                Code.INVALID_MAX,
                property_path,
                constraints={'max': max_value},
                max_value=max_value,
            )
        return True

    @predicate
    def positive_integer(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise self._fail(
                'positive_integer',
                value,
                message,
                'Expected a positive integer. Got: {value}',
                Code.INVALID_POSITIVE_INTEGER,
                property_path,
            )
        return True

    @predicate
    def natural(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is an int ``>= 0``."""
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise self._fail(
                'natural',
                value,
                message,
                'Expected a non-negative integer. Got: {value}',
                Code.INVALID_NATURAL,
                property_path,
            )
        return True
