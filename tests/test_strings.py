"""Tests for string, comparison and custom predicates."""

from __future__ import annotations

import re
from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st
from klaw_assert import AssertionFailedError, Code, assertion

from tests.strategies import texts


def _fails(name: str, value: Any, *args: Any) -> AssertionFailedError:
    with pytest.raises(AssertionFailedError) as exc_info:
        getattr(assertion, name)(value, *args)
    return exc_info.value


class TestPatterns:
    """Tests for regex and not_regex."""

    def test_regex_searches(self) -> None:
        assert assertion.regex('order-42', r'\d+') is True
        assert assertion.regex('abc', re.compile('^a')) is True

    def test_regex_failure(self) -> None:
        error = _fails('regex', 'abc', r'\d')
        assert error.code == Code.INVALID_REGEX
        assert error.constraints == {'pattern': r'\d'}

    def test_regex_requires_string(self) -> None:
        assert _fails('regex', 42, r'\d').code == Code.INVALID_STRING

    def test_not_regex(self) -> None:
        assert assertion.not_regex('abc', r'\d') is True
        assert _fails('not_regex', 'a1', r'\d').code == Code.INVALID_NOT_REGEX


class TestLengths:
    """Tests for length, min_length, max_length, between_length and length_between."""

    def test_length_counts_code_points(self) -> None:
        assert assertion.length('żółw', 4) is True

    def test_length_failure(self) -> None:
        error = _fails('length', 'abc', 2)
        assert error.code == Code.INVALID_LENGTH
        assert error.message == (
            'Expected string to be exactly 2 characters long, but got 3 characters. Got: abc'
        )

    def test_min_and_max(self) -> None:
        assert assertion.min_length('abc', 3) is True
        assert assertion.max_length('abc', 3) is True
        assert _fails('min_length', 'ab', 3).constraints == {'min_length': 3}
        assert _fails('max_length', 'abcd', 3).code == Code.INVALID_MAX_LENGTH

    def test_between_length_reports_failing_bound(self) -> None:
        assert assertion.between_length('abc', 1, 3) is True
        assert _fails('between_length', '', 1, 3).code == Code.INVALID_MIN_LENGTH
        assert _fails('between_length', 'abcd', 1, 3).code == Code.INVALID_MAX_LENGTH

    def test_length_between_stringifies(self) -> None:
        assert assertion.length_between(12345, 1, 5) is True
        error = _fails('length_between', 'abcdef', 1, 5)
        assert error.code == Code.INVALID_LENGTH
        assert error.constraints == {'min': 1, 'max': 5}

    @given(texts)
    def test_length_agrees_with_len(self, text: str) -> None:
        assert assertion.length(text, len(text)) is True


class TestAffixes:
    """Tests for starts_with, ends_with, contains and not_contains."""

    def test_starts_with(self) -> None:
        assert assertion.starts_with('klaw', 'kl') is True
        assert _fails('starts_with', 'klaw', 'aw').code == Code.INVALID_STRING_START

    def test_ends_with(self) -> None:
        assert assertion.ends_with('klaw', 'aw') is True
        assert _fails('ends_with', 'klaw', 'kl').code == Code.INVALID_STRING_END

    def test_contains(self) -> None:
        assert assertion.contains('klaw', 'la') is True
        error = _fails('contains', 'klaw', 'x')
        assert error.code == Code.INVALID_STRING_CONTAINS
        assert error.constraints == {'needle': 'x'}

    def test_not_contains(self) -> None:
        assert assertion.not_contains('klaw', 'x') is True
        assert _fails('not_contains', 'klaw', 'la').code == Code.INVALID_STRING_NOT_CONTAINS

    @given(texts, texts)
    def test_concatenation_has_both_affixes(self, head: str, tail: str) -> None:
        value = head + tail
        assert assertion.starts_with(value, head) is True
        assert assertion.ends_with(value, tail) is True
        assert assertion.contains(value, head) is True


class TestCharacterClasses:
    """Tests for alnum, alpha, digits, lower, upper, unicode_letters and friends."""

    @pytest.mark.parametrize(('name', 'good', 'bad'), [
        ('alpha', 'abcXYZ', 'abc1'),
        ('digits', '0123', '12a'),
        ('lower', 'abc', 'abC'),
        ('upper', 'ABC', 'AbC'),
        ('unicode_letters', 'żółw', 'żółw1'),
    ])  # fmt: skip
    def test_classes_share_regex_code(self, name: str, good: str, bad: str) -> None:
        assert getattr(assertion, name)(good) is True
        assert _fails(name, bad).code == Code.INVALID_REGEX

    @pytest.mark.parametrize('name', ['alpha', 'digits', 'lower', 'upper', 'unicode_letters'])
    def test_empty_string_rejected(self, name: str) -> None:
        with pytest.raises(AssertionFailedError):
            getattr(assertion, name)('')

    def test_alnum(self) -> None:
        assert assertion.alnum('a1b2') is True
        assert _fails('alnum', '1ab').code == Code.INVALID_ALNUM
        assert _fails('alnum', 12).code == Code.INVALID_ALNUM

    def test_starts_with_letter(self) -> None:
        assert assertion.starts_with_letter('a1') is True
        assert _fails('starts_with_letter', '1a').code == Code.INVALID_STRING_START
        assert _fails('starts_with_letter', '').code == Code.INVALID_STRING_START

    def test_not_whitespace_only(self) -> None:
        assert assertion.not_whitespace_only(' x ') is True
        assert _fails('not_whitespace_only', ' \t').code == Code.INVALID_REGEX
        assert _fails('not_whitespace_only', '').code == Code.INVALID_REGEX

    def test_string_not_empty(self) -> None:
        assert assertion.string_not_empty('x') is True
        assert _fails('string_not_empty', '').code == Code.INVALID_NOT_EQ
        assert _fails('string_not_empty', None).code == Code.INVALID_STRING


class TestComparison:
    """Tests for eq, same, not_eq and not_same."""

    def test_eq_is_loose(self) -> None:
        assert assertion.eq(1, 1.0) is True
        error = _fails('eq', 1, 2)
        assert error.code == Code.INVALID_EQ
        assert error.constraints == {'expected': 2}

    def test_same_is_type_strict(self) -> None:
        assert assertion.same('a', 'a') is True
        assert _fails('same', 1, 1.0).code == Code.INVALID_SAME
        assert _fails('same', 1, True).code == Code.INVALID_SAME

    def test_not_eq(self) -> None:
        assert assertion.not_eq(1, 2) is True
        assert _fails('not_eq', 1, 1.0).code == Code.INVALID_NOT_EQ

    def test_not_same(self) -> None:
        assert assertion.not_same(1, 1.0) is True
        assert _fails('not_same', 'a', 'a').code == Code.INVALID_NOT_SAME

    @given(st.one_of(st.integers(), texts))
    def test_value_same_as_itself(self, value: Any) -> None:
        assert assertion.same(value, value) is True
        assert assertion.eq(value, value) is True


class TestCustom:
    """Tests for satisfy and throws."""

    def test_satisfy(self) -> None:
        assert assertion.satisfy(4, lambda n: n % 2 == 0) is True
        assert _fails('satisfy', 3, lambda n: n % 2 == 0).code == Code.INVALID_SATISFY

    def test_satisfy_only_false_fails(self) -> None:
        """None and other falsy results pass."""
        assert assertion.satisfy(1, lambda n: None) is True
        assert assertion.satisfy(1, lambda n: 0) is True

    def test_satisfy_callback_errors_propagate(self) -> None:
        with pytest.raises(ZeroDivisionError):
            assertion.satisfy(0, lambda n: 1 / n)

    def test_satisfy_requires_callable(self) -> None:
        assert _fails('satisfy', 1, 'not callable').code == Code.INVALID_CALLABLE

    def test_throws(self) -> None:
        def boom() -> None:
            raise KeyError('k')

        assert assertion.throws(boom) is True
        assert assertion.throws(boom, LookupError) is True

    def test_throws_wrong_type(self) -> None:
        def boom() -> None:
            raise KeyError('k')

        error = _fails('throws', boom, ValueError)
        assert error.code == Code.INVALID_THROWS
        assert error.message == 'Expected to throw "ValueError", got "KeyError"'

    def test_throws_nothing_raised(self) -> None:
        error = _fails('throws', lambda: None)
        assert error.constraints == {'expected': 'Exception', 'actual': 'none'}
