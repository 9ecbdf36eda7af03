"""Test doubles: a recording predicate source and branded error types."""

from __future__ import annotations

from typing import Any

from klaw_assert import Assert, Assertion, AssertionFailedError, LazyAssertionError, predicate


class CustomError(AssertionFailedError):
    pass


class CustomLazyError(LazyAssertionError):
    pass


class CustomAssertion(Assertion):
    """Assertion that records every predicate call it receives."""

    exception_class = CustomError

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def string(self, value: Any, message: Any = None, property_path: str | None = None) -> bool:
        self.calls.append(('string', value))
        return super().string(value, message, property_path)

    def integer(self, value: Any, message: Any = None, property_path: str | None = None) -> bool:
        self.calls.append(('integer', value))
        return super().integer(value, message, property_path)

    @predicate
    def even(self, value: Any, message: Any = None, property_path: str | None = None) -> bool:
        self.calls.append(('even', value))
        if value % 2:
            raise self._fail('even', value, message, 'Expected an even number. Got: {value}', 9001, property_path)
        return True


class CustomAssert(Assert):
    assertion_class = CustomAssertion
    lazy_exception_class = CustomLazyError
