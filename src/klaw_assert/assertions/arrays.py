"""Collection predicates: sizes, keys, membership and shapes.

"Array" means a ``list``, ``tuple`` or ``dict``. Sequences are keyed by index,
dicts by key. Membership checks (``choice``, ``not_in_array``,
``unique_values``) compare strictly: equal value and identical type.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Sized
from typing import Any

from klaw_assert.assertions.comparison import ComparisonAssertions, _identical
from klaw_assert.assertions.null_empty import NullEmptyAssertions
from klaw_assert.assertions.types import TypeAssertions
from klaw_assert.codes import Code
from klaw_assert.infrastructure import Message, predicate

__all__ = ['ArrayAssertions']


def _size(value: Any) -> int | None:
    return len(value) if isinstance(value, Sized) else None


def _is_accessible(value: Any) -> bool:
    return not isinstance(value, (str, bytes, bytearray)) and hasattr(type(value), '__getitem__')


def _has_key(value: Any, key: Any) -> bool:
    if isinstance(value, Mapping):
        return key in value
    if isinstance(key, int) and not isinstance(key, bool):
        try:
            value[key]
        except (IndexError, KeyError, TypeError):
            return False
        return True
    return False


def _contains(choices: Sequence[Any], value: Any) -> bool:
    return any(_identical(value, choice) for choice in choices)


def _replace_recursive(base: Any, patch: Any) -> Any:
    """Overlay ``patch`` onto ``base``, merging nested dicts and lists by key or index."""
    if isinstance(base, dict) and isinstance(patch, Mapping):
        merged = dict(base)
        for key, item in patch.items():
            merged[key] = _replace_recursive(base[key], item) if key in base else item
        return merged
    if isinstance(base, (list, tuple)) and isinstance(patch, (list, tuple)):
        merged_list = list(base)
        for index, item in enumerate(patch):
            if index < len(merged_list):
                merged_list[index] = _replace_recursive(merged_list[index], item)
            else:
                merged_list.append(item)
        return type(base)(merged_list)
    return patch


class ArrayAssertions(TypeAssertions, ComparisonAssertions, NullEmptyAssertions):
    @predicate
    def is_countable(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that ``len(value)`` is defined."""
        if _size(value) is None:
            raise self._fail(
                'is_countable',
                value,
                message,
                'Expected a countable. Got: {value}',
                Code.INVALID_COUNTABLE,
                property_path,
            )
        return True

    @predicate
    def count(self, value: Any, count: int, message: Message = None, property_path: str | None = None) -> bool:
        size = _size(value)
        if size != count:
            raise self._fail(
                'count',
                value,
                message,
                'Expected a collection with exactly {count} elements, but got {actual} elements. Got: {value}',
                Code.INVALID_COUNT,
                property_path,
                constraints={'count': count},
                count=count,
                actual=size,
            )
        return True

    @predicate
    def min_count(self, value: Any, count: int, message: Message = None, property_path: str | None = None) -> bool:
        size = _size(value)
        if size is None or size < count:
            raise self._fail(
                'min_count',
                value,
                message,
                'Expected a collection with at least {count} elements, but got {actual} elements. Got: {value}',
                Code.INVALID_MIN_COUNT,
                property_path,
                constraints={'count': count},
                count=count,
                actual=size,
            )
        return True

    @predicate
    def max_count(self, value: Any, count: int, message: Message = None, property_path: str | None = None) -> bool:
        size = _size(value)
        if size is None or size > count:
            raise self._fail(
                'max_count',
                value,
                message,
                'Expected a collection with at most {count} elements, but got {actual} elements. Got: {value}',
                Code.INVALID_MAX_COUNT,
                property_path,
                constraints={'count': count},
                count=count,
                actual=size,
            )
        return True

    @predicate
    def count_between(
        self,
        value: Any,
        min_count: int,
        max_count: int,
        message: Message = None,
        property_path: str | None = None,
    ) -> bool:
        size = _size(value)
        if size is None or not min_count <= size <= max_count:
            raise self._fail(
                'count_between',
                value,
                message,
                'Expected an array to contain between {min_count} and {max_count} elements. Got: {actual}',
                Code.INVALID_COUNT_BETWEEN,
                property_path,
                constraints={'min': min_count, 'max': max_count},
                min_count=min_count,
                max_count=max_count,
                actual=size,
            )
        return True

    @predicate
    def is_array_accessible(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value supports ``value[key]``. Strings and bytes do not count."""
        if not _is_accessible(value):
            raise self._fail(
                'is_array_accessible',
                value,
                message,
                'Expected an array accessible. Got: {value}',
                Code.INVALID_ARRAY_ACCESSIBLE,
                property_path,
            )
        return True

    @predicate
    def key_exists(self, value: Any, key: Any, message: Message = None, property_path: str | None = None) -> bool:
        self.is_array(value, message, property_path)
        if not _has_key(value, key):
            raise self._fail(
                'key_exists',
                value,
                message,
                'Expected an array with key {key}. Got: {value}',
                Code.INVALID_KEY_EXISTS,
                property_path,
                constraints={'key': key},
                key=key,
            )
        return True

    @predicate
    def key_not_exists(
        self, value: Any, key: Any, message: Message = None, property_path: str | None = None
    ) -> bool:
        self.is_array(value, message, property_path)
        if _has_key(value, key):
            raise self._fail(
                'key_not_exists',
                value,
                message,
                'Expected an array without key {key}. Got: {value}',
                Code.INVALID_KEY_NOT_EXISTS,
                property_path,
                constraints={'key': key},
                key=key,
            )
        return True

    @predicate
    def key_isset(self, value: Any, key: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that ``value[key]`` exists and is not None."""
        self.is_array_accessible(value, message, property_path)
        if not _has_key(value, key) or value[key] is None:
            raise self._fail(
                'key_isset',
                value,
                message,
                'Expected an array with key {key} set. Got: {value}',
                Code.INVALID_KEY_ISSET,
                property_path,
                constraints={'key': key},
                key=key,
            )
        return True

    @predicate
    def not_empty_key(self, value: Any, key: Any, message: Message = None, property_path: str | None = None) -> bool:
        self.key_isset(value, key, message, property_path)
        self.not_empty(value[key], message, property_path)
        return True

    @predicate
    def unique_values(self, values: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that no element occurs twice. The first duplicate is reported as the failing value."""
        self.is_traversable(values, message, property_path)
        seen: list[Any] = []
        for element in self._elements(values):
            if _contains(seen, element):
                raise self._fail(
                    'unique_values',
                    element,
                    message,
                    'Expected array to contain only unique values. Got duplicate: {value}',
                    Code.INVALID_UNIQUE_VALUES,
                    property_path,
                    constraints={'value': element},
                )
            seen.append(element)
        return True

    @predicate
    def choice(
        self, value: Any, choices: Sequence[Any], message: Message = None, property_path: str | None = None
    ) -> bool:
        """Assert that value is one of ``choices``.

        Example:
            ```python
            assertion.choice('b', ['a', 'b'])
            # True
            assertion.choice(1, [True, '1'])
            # raises AssertionFailedError: 'Expected one of <TRUE>, 1. Got: 1'
            ```
        """
        if not _contains(choices, value):
            raise self._fail(
                'choice',
                value,
                message,
                'Expected one of {choices}. Got: {value}',
                Code.INVALID_CHOICE,
                property_path,
                constraints={'choices': list(choices)},
                choices=', '.join(self.stringify(choice) for choice in choices),
            )
        return True

    @predicate
    def in_array(
        self, value: Any, choices: Sequence[Any], message: Message = None, property_path: str | None = None
    ) -> bool:
        """Alias of ``choice``."""
        return self.choice(value, choices, message, property_path)

    @predicate
    def one_of(
        self, value: Any, choices: Sequence[Any], message: Message = None, property_path: str | None = None
    ) -> bool:
        """Alias of ``choice``."""
        return self.choice(value, choices, message, property_path)

    @predicate
    def not_in_array(
        self, value: Any, choices: Sequence[Any], message: Message = None, property_path: str | None = None
    ) -> bool:
        if _contains(choices, value):
            raise self._fail(
                'not_in_array',
                value,
                message,
                'Expected a value not in {choices}. Got: {value}',
                Code.INVALID_VALUE_IN_ARRAY,
                property_path,
                constraints={'choices': list(choices)},
                choices=choices,
            )
        return True

    @predicate
    def choices_not_empty(
        self,
        values: Any,
        choices: Sequence[Any],
        message: Message = None,
        property_path: str | None = None,
    ) -> bool:
        """Assert that ``values`` is not empty and holds a non-empty entry under every key in ``choices``."""
        self.not_empty(values, message, property_path)
        for key in choices:
            self.not_empty_key(values, key, message, property_path)
        return True

    @predicate
    def eq_array_subset(
        self, value: Any, subset: Any, message: Message = None, property_path: str | None = None
    ) -> bool:
        """Assert that overlaying ``subset`` onto value changes nothing, i.e. value already contains it."""
        self.is_array(value, message, property_path)
        self.is_array(subset, message, property_path)
        self.eq(_replace_recursive(value, subset), value, message, property_path)
        return True

    @predicate
    def is_list(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is a ``list`` or ``tuple``."""
        if not isinstance(value, (list, tuple)):
            raise self._fail(
                'is_list',
                value,
                message,
                'Expected list - non-associative array. Got: {value}',
                Code.INVALID_LIST,
                property_path,
            )
        return True

    @predicate
    def is_non_empty_list(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        self.is_list(value, message, property_path)
        self.not_empty(value, message, property_path)
        return True

    @predicate
    def is_map(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is a ``dict`` whose keys are all strings."""
        if not isinstance(value, dict) or not all(isinstance(key, str) for key in value):
            raise self._fail(
                'is_map',
                value,
                message,
                'Expected map - associative array with string keys. Got: {value}',
                Code.INVALID_MAP,
                property_path,
            )
        return True

    @predicate
    def is_non_empty_map(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        self.is_map(value, message, property_path)
        self.not_empty(value, message, property_path)
        return True

    @predicate
    def valid_array_key(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is an ``int`` or ``str``."""
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise self._fail(
                'valid_array_key',
                value,
                message,
                'Expected string or integer. Got: {value}',
                Code.INVALID_ARRAY_KEY,
                property_path,
            )
        return True
