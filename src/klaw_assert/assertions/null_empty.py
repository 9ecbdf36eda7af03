"""Null and emptiness predicates. A value is empty when it is falsy."""

from __future__ import annotations

from typing import Any

from klaw_assert.codes import Code
from klaw_assert.infrastructure import AssertionInfrastructure, Message, predicate

__all__ = ['NullEmptyAssertions']


class NullEmptyAssertions(AssertionInfrastructure):
    @predicate
    def not_empty(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is truthy: not None, False, zero, or an empty string or container."""
        if not value:
            raise self._fail(
                'not_empty', value, message, 'Expected a non-empty value. Got: {value}', Code.VALUE_EMPTY, property_path
            )
        return True

    @predicate
    def no_content(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is falsy."""
        if value:
            raise self._fail(
                'no_content', value, message, 'Expected an empty value. Got: {value}', Code.VALUE_NOT_EMPTY, property_path
            )
        return True

    @predicate
    def null(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        if value is not None:
            raise self._fail('null', value, message, 'Expected null. Got: {value}', Code.VALUE_NOT_NULL, property_path)
        return True

    @predicate
    def not_null(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        if value is None:
            raise self._fail(
                'not_null', value, message, 'Expected a value other than null.', Code.VALUE_NULL, property_path
            )
        return True

    @predicate
    def not_blank(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is not empty and, for strings, not only whitespace."""
        if not value or (isinstance(value, str) and not value.strip()):
            raise self._fail(
                'not_blank',
                value,
                message,
                'Expected a non-blank value. Got: {value}',
                Code.INVALID_NOT_BLANK,
                property_path,
            )
        return True
