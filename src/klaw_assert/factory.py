"""Entry points: ``that``, ``that_all``, ``that_null_or`` and ``lazy``.

Subclass ``Assert`` to brand every chain with your own predicate source and
aggregate error:

```python
class MyAssert(Assert):
    assertion_class = MyAssertion
    lazy_exception_class = MyLazyError


MyAssert.that(value).integer()
```
"""

from __future__ import annotations

from typing import Any, ClassVar

from klaw_assert.assertions import Assertion
from klaw_assert.chain import AssertionChain
from klaw_assert.dispatch import AbstractAssertion
from klaw_assert.errors import LazyAssertionError
from klaw_assert.infrastructure import Message
from klaw_assert.lazy import LazyAssertion

__all__ = ['Assert', 'lazy', 'that', 'that_all', 'that_null_or']


class Assert:
    """Factory for chains and lazy assertions."""

    assertion_class: ClassVar[type[AbstractAssertion]] = Assertion
    lazy_exception_class: ClassVar[type[LazyAssertionError]] = LazyAssertionError

    @classmethod
    def that(
        cls,
        value: Any,
        default_message: Message = None,
        default_property_path: str | None = None,
    ) -> AssertionChain:
        """Start a chain on ``value``.

        Example:
            ```python
            Assert.that(10, default_property_path='limit').integer().between(1, 100)
            ```
        """
        return AssertionChain(value, default_message, default_property_path, cls.assertion_class)

    @classmethod
    def that_all(
        cls,
        value: Any,
        default_message: Message = None,
        default_property_path: str | None = None,
    ) -> AssertionChain:
        """Start a chain whose predicates apply to every element of ``value``."""
        return cls.that(value, default_message, default_property_path).all()

    @classmethod
    def that_null_or(
        cls,
        value: Any,
        default_message: Message = None,
        default_property_path: str | None = None,
    ) -> AssertionChain:
        """Start a chain that passes outright when ``value`` is None."""
        return cls.that(value, default_message, default_property_path).null_or()

    @classmethod
    def lazy(cls) -> LazyAssertion:
        """Start a lazy assertion; see ``LazyAssertion``."""
        return LazyAssertion(cls.assertion_class, cls.lazy_exception_class)


def that(value: Any, default_message: Message = None, default_property_path: str | None = None) -> AssertionChain:
    return Assert.that(value, default_message, default_property_path)


def that_all(value: Any, default_message: Message = None, default_property_path: str | None = None) -> AssertionChain:
    return Assert.that_all(value, default_message, default_property_path)


def that_null_or(
    value: Any, default_message: Message = None, default_property_path: str | None = None
) -> AssertionChain:
    return Assert.that_null_or(value, default_message, default_property_path)


def lazy() -> LazyAssertion:
    return Assert.lazy()
