"""Fluent assertion chains: several predicates against one value.

Example:
    ```python
    from klaw_assert import that

    that(user.email, default_property_path='email').not_empty().email()
    that(tags).all().string().min_length(2)
    that(nickname).null_or().string()
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Self

from klaw_assert.assertions import Assertion
from klaw_assert.dispatch import ALL_PREFIX, AbstractAssertion, resolve_assertion
from klaw_assert.errors import UnknownAssertionError
from klaw_assert.infrastructure import Message

__all__ = ['AssertionChain']


class AssertionChain:
    """Applies predicates to one value, in call order, stopping at the first failure.

    Unless the caller passes them explicitly, every predicate receives the
    chain's ``default_message`` and ``default_property_path``.

    Args:
        value: The subject of every predicate in the chain.
        default_message: Message (template or callback) used by predicates
            called without one.
        default_property_path: Property path used by predicates called
            without one.
        assertion: Predicate source. Defaults to a new ``Assertion``.
    """

    def __init__(
        self,
        value: Any,
        default_message: Message = None,
        default_property_path: str | None = None,
        assertion: AbstractAssertion | type[AbstractAssertion] | None = None,
    ) -> None:
        self._value = value
        self._default_message = default_message
        self._default_property_path = default_property_path
        self._always_valid = False
        self._all = False
        self._assertion = resolve_assertion(assertion if assertion is not None else Assertion)

    @property
    def value(self) -> Any:
        return self._value

    @property
    def assertion(self) -> AbstractAssertion:
        return self._assertion

    def all(self) -> Self:
        """Apply every following predicate to each element of the value."""
        self._all = True
        return self

    def null_or(self) -> Self:
        """Skip every following predicate if the value is None."""
        if self._value is None:
            self._always_valid = True
        return self

    def set_assertion(self, source: AbstractAssertion | type[AbstractAssertion]) -> Self:
        """Swap the predicate source.

        Raises:
            InvalidConfigurationError: If ``source`` is not an ``AbstractAssertion``
                instance or subclass.
        """
        self._assertion = resolve_assertion(source)
        return self

    def __getattr__(self, name: str) -> Callable[..., Self]:
        if name.startswith('_'):
            raise AttributeError(name)
        source = self._assertion
        if type(source).base_name(name) != name:
            raise UnknownAssertionError(name)

        def call(*args: Any, **kwargs: Any) -> Self:
            bound = type(source).signature(name).bind_partial(self._value, *args, **kwargs)
            parameters = bound.signature.parameters
            if 'message' in parameters and 'message' not in bound.arguments:
                bound.arguments['message'] = self._default_message
            if 'property_path' in parameters and 'property_path' not in bound.arguments:
                bound.arguments['property_path'] = self._default_property_path

            if self._always_valid:
                return self
            method = getattr(source, f'{ALL_PREFIX}{name}' if self._all else name)
            method(*bound.args, **bound.kwargs)
            return self

        call.__name__ = name
        return call

    def __repr__(self) -> str:
        mode = 'all' if self._all else 'null_or' if self._always_valid else 'one'
        return f'<AssertionChain {mode} value={self._value!r}>'
