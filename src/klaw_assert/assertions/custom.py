"""Predicates driven by caller-supplied callables."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from klaw_assert.assertions.types import TypeAssertions
from klaw_assert.codes import Code
from klaw_assert.infrastructure import Message, predicate

__all__ = ['CustomAssertions']


class CustomAssertions(TypeAssertions):
    @predicate
    def satisfy(
        self,
        value: Any,
        callback: Callable[[Any], Any],
        message: Message = None,
        property_path: str | None = None,
    ) -> bool:
        """Assert that ``callback(value)`` does not return ``False``.

        Only an explicit ``False`` fails; ``None`` and other falsy results pass.
        Exceptions raised by the callback propagate.

        Example:
            ```python
            assertion.satisfy(4, lambda n: n % 2 == 0)
            # True
            ```
        """
        self.is_callable(callback)
        if callback(value) is False:
            raise self._fail(
                'satisfy',
                value,
                message,
                'Expected value to pass custom rule. Got: {value}',
                Code.INVALID_SATISFY,
                property_path,
                callback=callback,
            )
        return True

    @predicate
    def throws(
        self,
        expression: Callable[[], Any],
        exception: type[BaseException] = Exception,
        message: Message = None,
        property_path: str | None = None,
    ) -> bool:
        """Assert that calling ``expression()`` raises an instance of ``exception``.

        Other ``Exception`` types are reported as the failure, not re-raised.
        """
        actual = 'none'
        try:
            expression()
        except exception:
            return True
        except Exception as e:  # noqa: BLE001
            actual = type(e).__qualname__
        raise self._fail(
            'throws',
            expression,
            message,
            'Expected to throw "{exception}", got "{actual}"',
            Code.INVALID_THROWS,
            property_path,
            constraints={'expected': exception.__qualname__, 'actual': actual},
            exception=exception,
            actual=actual,
        )
