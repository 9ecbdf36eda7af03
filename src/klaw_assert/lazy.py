"""Lazy assertions: validate many values, then report every failure at once.

Example:
    ```python
    from klaw_assert import lazy

    (
        lazy()
        .that(form['email'], 'email').not_empty().email()
        .that(form['age'], 'age').try_all().integer().between(18, 130)
        .verify_now()
    )
    # raises LazyAssertionError:
    # The following 2 assertions failed:
    # 1) email: Expected a valid email address. Got: nope
    # 2) age: Expected an integer. Got: 17.5
    ```

Nothing is evaluated until ``verify_now()``. Each entry stops at its first
failure unless it (or the whole collector) is in try-all mode.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Self

import msgspec

from klaw_assert._config import get_config
from klaw_assert._logging import get_logger
from klaw_assert.assertions import Assertion
from klaw_assert.chain import AssertionChain
from klaw_assert.dispatch import AbstractAssertion, resolve_assertion
from klaw_assert.errors import (
    AssertionFailedError,
    InvalidConfigurationError,
    LazyAssertionError,
    UnknownAssertionError,
)
from klaw_assert.infrastructure import Message

__all__ = ['LazyAssertion', 'LazyChain']

logger = get_logger(__name__)


class _Call(msgspec.Struct, frozen=True):
    """A recorded chain call, replayed by verify_now()."""

    name: str
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = msgspec.field(default_factory=dict)

    def apply(self, chain: AssertionChain) -> None:
        getattr(chain, self.name)(*self.args, **self.kwargs)


class LazyChain:
    """One ``that(value, property_path)`` entry of a lazy assertion.

    Predicate calls are recorded, not run. Unknown predicate names are still
    rejected immediately.
    """

    def __init__(
        self,
        parent: LazyAssertion,
        value: Any,
        property_path: str | None,
        default_message: Message = None,
    ) -> None:
        self._parent = parent
        self.value = value
        self.property_path = property_path
        self.default_message = default_message
        self.calls: list[_Call] = []
        self.try_all_mode = False

    def try_all(self) -> Self:
        """Run every call of this entry, collecting each failure."""
        self.try_all_mode = True
        return self

    def all(self) -> Self:
        self.calls.append(_Call('all'))
        return self

    def null_or(self) -> Self:
        self.calls.append(_Call('null_or'))
        return self

    def that(self, value: Any, property_path: str | None = None, default_message: Message = None) -> LazyChain:
        """Start the next entry on the same collector."""
        return self._parent.that(value, property_path, default_message)

    def verify_now(self) -> bool:
        """Verify the whole collector this entry belongs to."""
        return self._parent.verify_now()

    def __getattr__(self, name: str) -> Callable[..., Self]:
        if name.startswith('_'):
            raise AttributeError(name)
        source = self._parent.assertion
        if type(source).base_name(name) != name:
            raise UnknownAssertionError(name)

        def record(*args: Any, **kwargs: Any) -> Self:
            self.calls.append(_Call(name, args, kwargs))
            return self

        record.__name__ = name
        return record

    def __repr__(self) -> str:
        return f'<LazyChain {self.property_path!r} calls={len(self.calls)} try_all={self.try_all_mode}>'


class LazyAssertion:
    """Collects assertion chains and verifies them together.

    Args:
        assertion: Predicate source for every entry. Defaults to ``Assertion``.
        exception_class: Aggregate error raised by ``verify_now()``.
    """

    def __init__(
        self,
        assertion: AbstractAssertion | type[AbstractAssertion] | None = None,
        exception_class: type[LazyAssertionError] = LazyAssertionError,
    ) -> None:
        self._entries: list[LazyChain] = []
        self._errors: list[AssertionFailedError] = []
        self._try_all = get_config().try_all
        self._assertion = resolve_assertion(assertion if assertion is not None else Assertion)
        self._exception_class = LazyAssertionError
        self.set_exception_class(exception_class)

    @property
    def assertion(self) -> AbstractAssertion:
        return self._assertion

    @property
    def exception_class(self) -> type[LazyAssertionError]:
        return self._exception_class

    @property
    def entries(self) -> list[LazyChain]:
        return list(self._entries)

    @property
    def errors(self) -> list[AssertionFailedError]:
        """Failures collected by the last ``verify_now()``."""
        return list(self._errors)

    def that(self, value: Any, property_path: str | None = None, default_message: Message = None) -> LazyChain:
        """Add an entry for ``value``; failures are reported under ``property_path``."""
        entry = LazyChain(self, value, property_path, default_message)
        self._entries.append(entry)
        return entry

    def try_all(self) -> Self:
        """Put every entry, including ones already added, in try-all mode."""
        self._try_all = True
        return self

    def set_assertion(self, source: AbstractAssertion | type[AbstractAssertion]) -> Self:
        self._assertion = resolve_assertion(source)
        return self

    def set_exception_class(self, exception_class: type[LazyAssertionError]) -> Self:
        """Raise ``exception_class`` from ``verify_now()``.

        Raises:
            InvalidConfigurationError: If it is not a ``LazyAssertionError`` subclass.
        """
        if not (isinstance(exception_class, type) and issubclass(exception_class, LazyAssertionError)):
            msg = f'{exception_class!r} is not (a subclass of) {LazyAssertionError.__name__}'
            raise InvalidConfigurationError(msg)
        self._exception_class = exception_class
        return self

    def verify_now(self) -> bool:
        """Run every entry and raise one aggregate error if any failed.

        Returns:
            True if every recorded assertion passed.

        Raises:
            LazyAssertionError: (or the configured subclass) listing every
                collected failure, in entry order.
        """
        self._errors = []
        for entry in self._entries:
            self._run(entry)

        logger.debug('lazy_assertion_verified', entries=len(self._entries), failures=len(self._errors))
        if self._errors:
            raise self._exception_class.from_errors(self._errors)
        return True

    def _run(self, entry: LazyChain) -> None:
        try_all = entry.try_all_mode or self._try_all
        chain = AssertionChain(entry.value, entry.default_message, entry.property_path, self._assertion)
        for call in entry.calls:
            try:
                call.apply(chain)
            except AssertionFailedError as e:
                logger.debug(
                    'assertion_collected',
                    property_path=e.property_path,
                    code=e.code,
                    assertion=call.name,
                    error=e.message,
                )
                self._errors.append(e)
                if not try_all:
                    return

    def __repr__(self) -> str:
        return f'<LazyAssertion entries={len(self._entries)} try_all={self._try_all}>'
