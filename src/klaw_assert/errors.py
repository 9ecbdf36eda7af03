"""Error types: dual struct+exception for failures, plus usage errors.

Three kinds of error are kept disjoint:

- ``AssertionFailedError``: a predicate did not hold for the given value.
- ``LazyAssertionError``: several failures collected by ``lazy()``. It is an
  ``AssertionFailedError``, so code catching the general kind also catches it.
- ``AssertionUsageError``: the API was called incorrectly. Never a subclass of
  ``AssertionFailedError``, so input validation handlers do not swallow it.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import msgspec

__all__ = [
    'AssertionFailedError',
    'AssertionUsageError',
    'Failure',
    'InvalidConfigurationError',
    'LazyAssertionError',
    'MissingArgumentError',
    'UnknownAssertionError',
]


# --- Validation failures ---


class Failure(msgspec.Struct, frozen=True):
    """A failed assertion - struct variant for inspection and serialization."""

    code: int
    message: str
    value: Any = None
    property_path: str | None = None
    constraints: dict[str, Any] = msgspec.field(default_factory=dict)

    def to_exception(self) -> AssertionFailedError:
        """Convert to exception for raise-based code."""
        return AssertionFailedError(
            self.message,
            self.code,
            self.property_path,
            self.value,
            self.constraints,
        )


class AssertionFailedError(ValueError):
    """A failed assertion - exception variant.

    Attributes are read-only once constructed.
    """

    def __init__(
        self,
        message: str,
        code: int,
        property_path: str | None = None,
        value: Any = None,
        constraints: Mapping[str, Any] | None = None,
    ) -> None:
        self._code = code
        self._property_path = property_path
        self._value = value
        self._constraints = dict(constraints or {})
        super().__init__(message)

    @property
    def message(self) -> str:
        """The resolved, human-readable message."""
        return str(self.args[0]) if self.args else ''

    @property
    def code(self) -> int:
        """Code identifying which predicate failed."""
        return self._code

    @property
    def property_path(self) -> str | None:
        """Caller-supplied locator of the field that failed, e.g. ``user.email``."""
        return self._property_path

    @property
    def value(self) -> Any:
        """The value that caused the assertion to fail."""
        return self._value

    @property
    def constraints(self) -> dict[str, Any]:
        """The bounds the value was checked against, e.g. ``{'min': 1, 'max': 5}``."""
        return dict(self._constraints)

    def to_struct(self) -> Failure:
        """Convert to struct for inspection or serialization."""
        return Failure(
            code=int(self._code),
            message=self.message,
            value=self._value,
            property_path=self._property_path,
            constraints=dict(self._constraints),
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return (
            type(self),
            (self.message, self._code, self._property_path, self._value, self._constraints),
        )


class LazyAssertionError(AssertionFailedError):
    """Aggregate of every failure collected by a lazy assertion run."""

    def __init__(self, message: str, errors: Sequence[AssertionFailedError]) -> None:
        self._errors = list(errors)
        super().__init__(message, 0)

    @classmethod
    def from_errors(cls, errors: Sequence[AssertionFailedError]) -> LazyAssertionError:
        """Build the aggregate, enumerating each failure's path and message.

        Args:
            errors: The collected failures, in the order they were collected.

        Returns:
            An instance of ``cls`` (subclasses are honoured).

        Example:
            ```python
            LazyAssertionError.from_errors([email_error, age_error]).message
            # 'The following 2 assertions failed:\\n1) email: ...\\n2) age: ...\\n'
            ```
        """
        lines = [f'The following {len(errors)} assertions failed:']
        lines.extend(
            f'{index}) {error.property_path or ""}: {error.message}' for index, error in enumerate(errors, start=1)
        )
        return cls('\n'.join(lines) + '\n', errors)

    @property
    def errors(self) -> list[AssertionFailedError]:
        """The underlying failures, in entry order."""
        return list(self._errors)

    def error_exceptions(self) -> list[AssertionFailedError]:
        """Alias of ``errors``."""
        return self.errors

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.message, self._errors))


# --- Usage errors ---


class AssertionUsageError(Exception):
    """The assertion API was used incorrectly (a programming mistake)."""


class UnknownAssertionError(AssertionUsageError, AttributeError):
    """No assertion with the requested name exists on the predicate source."""

    def __init__(self, name: str) -> None:
        self.assertion_name = name
        super().__init__(f"Assertion '{name}' does not exist.")


class MissingArgumentError(AssertionUsageError, TypeError):
    """A ``null_or_*`` or ``all_*`` variant was called without its subject."""

    def __init__(self, name: str) -> None:
        self.assertion_name = name
        super().__init__(f'{name}(): missing the first argument.')


class InvalidConfigurationError(AssertionUsageError, TypeError):
    """An incompatible predicate source or exception class was supplied."""
