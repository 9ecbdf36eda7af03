"""Predicate sources and the ``null_or_*`` / ``all_*`` variant dispatch.

Any subclass of ``AbstractAssertion`` exposes its registered predicates plus
two derived variants per predicate, without writing them by hand:

- ``null_or_<name>(value, ...)`` passes when ``value`` is None, otherwise
  delegates to ``<name>``.
- ``all_<name>(values, ...)`` applies ``<name>`` to every element and stops at
  the first failure.

Example:
    ```python
    from klaw_assert import assertion

    assertion.null_or_integer(None)
    # True
    assertion.all_integer([1, '2', 3])
    # raises AssertionFailedError for '2'; 3 is never checked
    ```
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any, ClassVar

import wrapt

from klaw_assert.errors import (
    AssertionFailedError,
    InvalidConfigurationError,
    MissingArgumentError,
    UnknownAssertionError,
)
from klaw_assert.infrastructure import AssertionInfrastructure, is_predicate

__all__ = [
    'ALL_PREFIX',
    'NULL_OR_PREFIX',
    'AbstractAssertion',
    'for_all',
    'null_or',
    'resolve_assertion',
]

NULL_OR_PREFIX = 'null_or_'
ALL_PREFIX = 'all_'


def null_or(func: Callable[..., Any], name: str | None = None) -> Callable[..., Any]:
    """Wrap a predicate so that a None subject passes without calling it.

    Args:
        func: The predicate; its first positional argument is the subject.
        name: Name reported in usage errors. Defaults to ``null_or_<func>``.

    Returns:
        The wrapped predicate, with ``func``'s signature.
    """
    variant = name or f'{NULL_OR_PREFIX}{func.__name__}'

    @wrapt.decorator
    def wrapper(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        if not args:
            raise MissingArgumentError(variant)
        if args[0] is None:
            return True
        return wrapped(*args, **kwargs)

    return wrapper(func)


def for_all(
    func: Callable[..., Any],
    source: AssertionInfrastructure,
    name: str | None = None,
) -> Callable[..., Any]:
    """Wrap a predicate so that it applies to every element of its subject.

    Mappings contribute their values. Failure is fail-fast: the first failing
    element's error propagates and later elements are not checked.

    Args:
        func: The predicate; its first positional argument is the subject.
        source: Assertion whose ``is_traversable`` validates the subject.
        name: Name reported in usage errors. Defaults to ``all_<func>``.

    Returns:
        The wrapped predicate, with ``func``'s signature.
    """
    variant = name or f'{ALL_PREFIX}{func.__name__}'

    @wrapt.decorator
    def wrapper(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        if not args:
            raise MissingArgumentError(variant)
        values, *rest = args
        source.is_traversable(values, property_path=_property_path_of(wrapped, args, kwargs))
        for element in source._elements(values):
            wrapped(element, *rest, **kwargs)
        return True

    return wrapper(func)


def _property_path_of(func: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]) -> str | None:
    try:
        bound = inspect.signature(func).bind_partial(*args, **kwargs)
    except TypeError:
        # The predicate call reports the bad arguments itself.
        return None
    return bound.arguments.get('property_path')


@functools.cache
def _predicate_signature(cls: type[AbstractAssertion], name: str) -> inspect.Signature:
    signature = inspect.signature(getattr(cls, name))
    # Drop ``self``.
    return signature.replace(parameters=list(signature.parameters.values())[1:])


class AbstractAssertion(AssertionInfrastructure):
    """Base class for predicate sources.

    Compose predicate mixins into a subclass to build a source. Set
    ``exception_class`` to raise a branded subtype of ``AssertionFailedError``.

    Example:
        ```python
        class MyAssertion(AbstractAssertion, TypeAssertions, StringAssertions):
            exception_class = MyValidationError
        ```
    """

    _predicates: ClassVar[frozenset[str]] = frozenset({'is_traversable'})

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        exception_class = cls.exception_class
        if not (isinstance(exception_class, type) and issubclass(exception_class, AssertionFailedError)):
            msg = f'{exception_class!r} is not (a subclass of) {AssertionFailedError.__name__}'
            raise InvalidConfigurationError(msg)
        cls._predicates = frozenset(
            name for klass in cls.__mro__ for name, attr in vars(klass).items() if is_predicate(attr)
        )

    @classmethod
    def predicates(cls) -> list[str]:
        """Names of every registered predicate, sorted."""
        return sorted(cls._predicates)

    @classmethod
    def has_predicate(cls, name: str) -> bool:
        """Whether ``name`` is a predicate or one of its derived variants."""
        return cls.base_name(name) is not None

    @classmethod
    def base_name(cls, name: str) -> str | None:
        """The predicate a (possibly prefixed) name resolves to, or None."""
        if name in cls._predicates:
            return name
        for prefix in (NULL_OR_PREFIX, ALL_PREFIX):
            if name.startswith(prefix) and name[len(prefix) :] in cls._predicates:
                return name[len(prefix) :]
        return None

    @classmethod
    def signature(cls, name: str) -> inspect.Signature:
        """Signature of a predicate (or of the predicate behind a variant), without ``self``."""
        base = cls.base_name(name)
        if base is None:
            raise UnknownAssertionError(name)
        return _predicate_signature(cls, base)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith('_'):
            raise AttributeError(name)
        if name.startswith(NULL_OR_PREFIX):
            base = name[len(NULL_OR_PREFIX) :]
            if base in self._predicates:
                return null_or(getattr(self, base), name)
        if name.startswith(ALL_PREFIX):
            base = name[len(ALL_PREFIX) :]
            if base in self._predicates:
                return for_all(getattr(self, base), self, name)
        raise UnknownAssertionError(name)

    def __repr__(self) -> str:
        return f'<{type(self).__name__} with {len(self._predicates)} predicates>'


def resolve_assertion(source: Any) -> AbstractAssertion:
    """Validate a predicate source, instantiating it if given a class.

    Raises:
        InvalidConfigurationError: If ``source`` is neither an instance nor a
            subclass of ``AbstractAssertion``.
    """
    if isinstance(source, AbstractAssertion):
        return source
    if isinstance(source, type) and issubclass(source, AbstractAssertion) and source is not AbstractAssertion:
        return source()
    msg = f'{source!r} is not (a subclass of) {AbstractAssertion.__name__}'
    raise InvalidConfigurationError(msg)
