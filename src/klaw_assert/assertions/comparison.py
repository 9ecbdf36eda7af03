"""Equality predicates."""

from __future__ import annotations

from typing import Any

from klaw_assert.codes import Code
from klaw_assert.infrastructure import AssertionInfrastructure, Message, predicate

__all__ = ['ComparisonAssertions']


def _identical(value: Any, expected: Any) -> bool:
    # Equal and of exactly the same type: 1 is not identical to 1.0 or True.
    return value is expected or (type(value) is type(expected) and value == expected)


class ComparisonAssertions(AssertionInfrastructure):
    @predicate
    def eq(self, value: Any, expected: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that ``value == expected``."""
        if value != expected:
            raise self._fail(
                'eq',
                value,
                message,
                'Expected a value equal to {expected}. Got: {value}',
                Code.INVALID_EQ,
                property_path,
                constraints={'expected': expected},
                expected=expected,
            )
        return True

    @predicate
    def same(self, value: Any, expected: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value equals ``expected`` and has exactly its type."""
        if not _identical(value, expected):
            raise self._fail(
                'same',
                value,
                message,
                'Expected a value identical to {expected}. Got: {value}',
                Code.INVALID_SAME,
                property_path,
                constraints={'expected': expected},
                expected=expected,
            )
        return True

    @predicate
    def not_eq(self, value: Any, expected: Any, message: Message = None, property_path: str | None = None) -> bool:
        if value == expected:
            raise self._fail(
                'not_eq',
                value,
                message,
                'Expected a value not equal to {expected}. Got: {value}',
                Code.INVALID_NOT_EQ,
                property_path,
                constraints={'expected': expected},
                expected=expected,
            )
        return True

    @predicate
    def not_same(self, value: Any, expected: Any, message: Message = None, property_path: str | None = None) -> bool:
        if _identical(value, expected):
            raise self._fail(
                'not_same',
                value,
                message,
                'Expected a value not identical to {expected}. Got: {value}',
                Code.INVALID_NOT_SAME,
                property_path,
                constraints={'expected': expected},
                expected=expected,
            )
        return True
