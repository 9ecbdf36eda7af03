"""Identity checks against ``True`` and ``False``. Truthy values are not ``True``."""

from __future__ import annotations

from typing import Any

from klaw_assert.codes import Code
from klaw_assert.infrastructure import AssertionInfrastructure, Message, predicate

__all__ = ['BooleanAssertions']


class BooleanAssertions(AssertionInfrastructure):
    @predicate
    def true(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        if value is not True:
            raise self._fail(
                'true', value, message, 'Expected a value to be true. Got: {value}', Code.INVALID_TRUE, property_path
            )
        return True

    @predicate
    def false(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        if value is not False:
            raise self._fail(
                'false', value, message, 'Expected a value to be false. Got: {value}', Code.INVALID_FALSE, property_path
            )
        return True

    @predicate
    def not_false(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        if value is False:
            raise self._fail(
                'not_false',
                value,
                message,
                'Expected a value other than false. Got: {value}',
                Code.INVALID_NOT_FALSE,
                property_path,
            )
        return True
