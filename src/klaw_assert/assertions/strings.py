"""String predicates: patterns, lengths, affixes and character classes.

Every predicate here first asserts that the value is a ``str``. Lengths count
code points. Character-class checks (``alpha``, ``digits``, ``lower``,
``upper``) are ASCII-only; use ``unicode_letters`` for other scripts.
"""

from __future__ import annotations

import re
from typing import Any

from klaw_assert.assertions.comparison import ComparisonAssertions
from klaw_assert.assertions.types import TypeAssertions
from klaw_assert.codes import Code
from klaw_assert.errors import AssertionFailedError
from klaw_assert.infrastructure import Message, predicate

__all__ = ['StringAssertions']

type Pattern = str | re.Pattern[str]

_ALNUM_RE = re.compile(r'[a-zA-Z][a-zA-Z0-9]*')
_ALPHA_RE = re.compile(r'[a-zA-Z]+')
_DIGITS_RE = re.compile(r'[0-9]+')
_LOWER_RE = re.compile(r'[a-z]+')
_UPPER_RE = re.compile(r'[A-Z]+')
_WHITESPACE_RE = re.compile(r'\s*')


def _pattern_text(pattern: Pattern) -> str:
    return pattern.pattern if isinstance(pattern, re.Pattern) else pattern


class StringAssertions(TypeAssertions, ComparisonAssertions):
    @predicate
    def regex(self, value: Any, pattern: Pattern, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that ``pattern`` matches somewhere in value (``re.search``)."""
        self.string(value, message, property_path)
        if re.search(pattern, value) is None:
            raise self._fail(
                'regex',
                value,
                message,
                'Expected a value matching regex. Got: {value}',
                Code.INVALID_REGEX,
                property_path,
                constraints={'pattern': _pattern_text(pattern)},
                pattern=pattern,
            )
        return True

    @predicate
    def not_regex(
        self, value: Any, pattern: Pattern, message: Message = None, property_path: str | None = None
    ) -> bool:
        self.string(value, message, property_path)
        if re.search(pattern, value) is not None:
            raise self._fail(
                'not_regex',
                value,
                message,
                'Expected a value not matching regex. Got: {value}',
                Code.INVALID_NOT_REGEX,
                property_path,
                constraints={'pattern': _pattern_text(pattern)},
                pattern=pattern,
            )
        return True

    @predicate
    def length(self, value: Any, length: int, message: Message = None, property_path: str | None = None) -> bool:
        self.string(value, message, property_path)
        if len(value) != length:
            raise self._fail(
                'length',
                value,
                message,
                'Expected string to be exactly {length} characters long, but got {actual} characters. Got: {value}',
                Code.INVALID_LENGTH,
                property_path,
                constraints={'length': length},
                length=length,
                actual=len(value),
            )
        return True

    @predicate
    def min_length(
        self, value: Any, min_length: int, message: Message = None, property_path: str | None = None
    ) -> bool:
        self.string(value, message, property_path)
        if len(value) < min_length:
            raise self._fail(
                'min_length',
                value,
                message,
                'Expected string to be at least {min_length} characters long, but got {actual} characters. '
                'Got: {value}',
                Code.INVALID_MIN_LENGTH,
                property_path,
                constraints={'min_length': min_length},
                min_length=min_length,
                actual=len(value),
            )
        return True

    @predicate
    def max_length(
        self, value: Any, max_length: int, message: Message = None, property_path: str | None = None
    ) -> bool:
        self.string(value, message, property_path)
        if len(value) > max_length:
            raise self._fail(
                'max_length',
                value,
                message,
                'Expected string to be at most {max_length} characters long, but got {actual} characters. '
                'Got: {value}',
                Code.INVALID_MAX_LENGTH,
                property_path,
                constraints={'max_length': max_length},
                max_length=max_length,
                actual=len(value),
            )
        return True

    @predicate
    def between_length(
        self,
        value: Any,
        min_length: int,
        max_length: int,
        message: Message = None,
        property_path: str | None = None,
    ) -> bool:
        """Assert ``min_length`` then ``max_length``; the failing bound's code is reported."""
        self.min_length(value, min_length, message, property_path)
        self.max_length(value, max_length, message, property_path)
        return True

    @predicate
    def starts_with(self, value: Any, needle: str, message: Message = None, property_path: str | None = None) -> bool:
        self.string(value, message, property_path)
        if not value.startswith(needle):
            raise self._fail(
                'starts_with',
                value,
                message,
                'Expected string to start with {needle}. Got: {value}',
                Code.INVALID_STRING_START,
                property_path,
                constraints={'needle': needle},
                needle=needle,
            )
        return True

    @predicate
    def ends_with(self, value: Any, needle: str, message: Message = None, property_path: str | None = None) -> bool:
        self.string(value, message, property_path)
        if not value.endswith(needle):
            raise self._fail(
                'ends_with',
                value,
                message,
                'Expected string to end with {needle}. Got: {value}',
                Code.INVALID_STRING_END,
                property_path,
                constraints={'needle': needle},
                needle=needle,
            )
        return True

    @predicate
    def contains(self, value: Any, needle: str, message: Message = None, property_path: str | None = None) -> bool:
        self.string(value, message, property_path)
        if needle not in value:
            raise self._fail(
                'contains',
                value,
                message,
                'Expected string to contain {needle}. Got: {value}',
                Code.INVALID_STRING_CONTAINS,
                property_path,
                constraints={'needle': needle},
                needle=needle,
            )
        return True

    @predicate
    def not_contains(
        self, value: Any, needle: str, message: Message = None, property_path: str | None = None
    ) -> bool:
        self.string(value, message, property_path)
        if needle in value:
            raise self._fail(
                'not_contains',
                value,
                message,
                'Expected string to not contain {needle}. Got: {value}',
                Code.INVALID_STRING_NOT_CONTAINS,
                property_path,
                constraints={'needle': needle},
                needle=needle,
            )
        return True

    @predicate
    def alnum(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is an ASCII letter followed by ASCII letters or digits."""
        try:
            self.string(value)
        except AssertionFailedError:
            ok = False
        else:
            ok = _ALNUM_RE.fullmatch(value) is not None
        if not ok:
            raise self._fail(
                'alnum',
                value,
                message,
                'Expected an alphanumeric value. Got: {value}',
                Code.INVALID_ALNUM,
                property_path,
            )
        return True

    @predicate
    def string_not_empty(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        self.string(value, message, property_path)
        self.not_eq(value, '', message, property_path)
        return True

    @predicate
    def starts_with_letter(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        self.string(value, message, property_path)
        if not (value[:1].isascii() and value[:1].isalpha()):
            raise self._fail(
                'starts_with_letter',
                value,
                message,
                'Expected a value to start with a letter. Got: {value}',
                Code.INVALID_STRING_START,
                property_path,
            )
        return True

    @predicate
    def unicode_letters(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is non-empty and made of letters in any script."""
        self.string(value, message, property_path)
        if not value.isalpha():
            raise self._fail(
                'unicode_letters',
                value,
                message,
                'Expected a value to contain only Unicode letters. Got: {value}',
                Code.INVALID_REGEX,
                property_path,
            )
        return True

    @predicate
    def alpha(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        self.string(value, message, property_path)
        if _ALPHA_RE.fullmatch(value) is None:
            raise self._fail(
                'alpha',
                value,
                message,
                'Expected a value to contain only letters. Got: {value}',
                Code.INVALID_REGEX,
                property_path,
            )
        return True

    @predicate
    def digits(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        if not isinstance(value, str) or _DIGITS_RE.fullmatch(value) is None:
            raise self._fail(
                'digits',
                value,
                message,
                'Expected a value to contain digits only. Got: {value}',
                Code.INVALID_REGEX,
                property_path,
            )
        return True

    @predicate
    def lower(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        if not isinstance(value, str) or _LOWER_RE.fullmatch(value) is None:
            raise self._fail(
                'lower',
                value,
                message,
                'Expected a value to contain lowercase characters only. Got: {value}',
                Code.INVALID_REGEX,
                property_path,
            )
        return True

    @predicate
    def upper(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        if not isinstance(value, str) or _UPPER_RE.fullmatch(value) is None:
            raise self._fail(
                'upper',
                value,
                message,
                'Expected a value to contain uppercase characters only. Got: {value}',
                Code.INVALID_REGEX,
                property_path,
            )
        return True

    @predicate
    def length_between(
        self,
        value: Any,
        min_length: int,
        max_length: int,
        message: Message = None,
        property_path: str | None = None,
    ) -> bool:
        """Assert that ``str(value)`` has between ``min_length`` and ``max_length`` characters."""
        length = len(str(value))
        if not min_length <= length <= max_length:
            raise self._fail(
                'length_between',
                value,
                message,
                'Expected a value to contain between {min_length} and {max_length} characters. Got: {value}',
                Code.INVALID_LENGTH,
                property_path,
                constraints={'min': min_length, 'max': max_length},
                min_length=min_length,
                max_length=max_length,
            )
        return True

    @predicate
    def not_whitespace_only(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        self.string(value, message, property_path)
        if _WHITESPACE_RE.fullmatch(value) is not None:
            raise self._fail(
                'not_whitespace_only',
                value,
                message,
                'Expected a non-whitespace string. Got: {value}',
                Code.INVALID_REGEX,
                property_path,
            )
        return True
