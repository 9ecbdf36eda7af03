"""Tests for the failure model and usage errors."""

from __future__ import annotations

import pickle
from typing import Any

import msgspec
import pytest
from hypothesis import given
from klaw_assert import (
    AssertionFailedError,
    AssertionUsageError,
    Code,
    Failure,
    InvalidConfigurationError,
    LazyAssertionError,
    MissingArgumentError,
    UnknownAssertionError,
    assertion,
)

from tests.doubles import CustomLazyError
from tests.strategies import constraints, integers, plain_messages, property_paths


class TestAssertionFailedError:
    """Tests for the exception variant of a failure."""

    def test_fields(self) -> None:
        error = AssertionFailedError('bad', Code.INVALID_MIN, 'user.age', 3, {'min': 5})
        assert error.message == 'bad'
        assert str(error) == 'bad'
        assert error.code == Code.INVALID_MIN
        assert error.property_path == 'user.age'
        assert error.value == 3
        assert error.constraints == {'min': 5}

    def test_defaults(self) -> None:
        error = AssertionFailedError('bad', 1)
        assert error.property_path is None
        assert error.value is None
        assert error.constraints == {}

    def test_read_only(self) -> None:
        error = AssertionFailedError('bad', 1)
        with pytest.raises(AttributeError):
            error.code = 2  # type: ignore[misc]
        with pytest.raises(AttributeError):
            error.property_path = 'x'  # type: ignore[misc]

    def test_constraints_copied(self) -> None:
        """Mutating the returned constraints does not change the error."""
        error = AssertionFailedError('bad', 1, constraints={'min': 1})
        error.constraints['min'] = 99
        assert error.constraints == {'min': 1}

    def test_is_value_error(self) -> None:
        """Failures can be caught as ValueError by input validation code."""
        with pytest.raises(ValueError):
            assertion.integer('x')

    def test_predicate_populates_fields(self) -> None:
        with pytest.raises(AssertionFailedError) as exc_info:
            assertion.range(7, 1, 5, property_path='n')
        error = exc_info.value
        assert error.code == Code.INVALID_RANGE
        assert error.value == 7
        assert error.constraints == {'min': 1, 'max': 5}
        assert error.message == 'Expected a number between 1 and 5. Got: 7'

    def test_pickle(self) -> None:
        error = AssertionFailedError('bad', 10, 'p', [1], {'k': 'v'})
        restored = pickle.loads(pickle.dumps(error))
        assert type(restored) is AssertionFailedError
        assert (restored.message, restored.code, restored.property_path) == ('bad', 10, 'p')
        assert restored.value == [1]
        assert restored.constraints == {'k': 'v'}

    @given(plain_messages, integers, property_paths, constraints)
    def test_struct_round_trip(self, message: str, code: int, path: str | None, bounds: dict[str, Any]) -> None:
        """to_struct() and to_exception() preserve every field."""
        error = AssertionFailedError(message, code, path, 'v', bounds)
        back = error.to_struct().to_exception()
        assert (back.message, back.code, back.property_path, back.value) == (message, code, path, 'v')
        assert back.constraints == bounds


class TestFailure:
    """Tests for the struct variant of a failure."""

    def test_frozen(self) -> None:
        failure = Failure(code=10, message='bad')
        with pytest.raises(AttributeError):
            failure.code = 11  # type: ignore[misc]

    def test_json_serialization(self) -> None:
        failure = AssertionFailedError('bad', Code.INVALID_EMAIL, 'email', 'nope').to_struct()
        data = msgspec.json.decode(msgspec.json.encode(failure))
        assert data == {
            'code': 201,
            'message': 'bad',
            'value': 'nope',
            'property_path': 'email',
            'constraints': {},
        }

    def test_decode(self) -> None:
        raw = b'{"code": 15, "message": "null", "property_path": "a"}'
        failure = msgspec.json.decode(raw, type=Failure)
        assert failure == Failure(code=15, message='null', property_path='a')


class TestLazyAssertionError:
    """Tests for the aggregate error."""

    def test_from_errors_format(self) -> None:
        errors = [
            AssertionFailedError('Value "10" expected to be string.', 16, 'foo'),
            AssertionFailedError('Value "<NULL>" is empty.', 14, 'bar'),
        ]
        aggregate = LazyAssertionError.from_errors(errors)
        assert aggregate.message == (
            'The following 2 assertions failed:\n'
            '1) foo: Value "10" expected to be string.\n'
            '2) bar: Value "<NULL>" is empty.\n'
        )
        assert aggregate.errors == errors
        assert aggregate.error_exceptions() == errors

    def test_missing_path_rendered_empty(self) -> None:
        """A failure without a property path leaves the path slot blank."""
        aggregate = LazyAssertionError.from_errors([AssertionFailedError('bad', 1)])
        assert aggregate.message == 'The following 1 assertions failed:\n1) : bad\n'
        assert 'None' not in aggregate.message

    def test_subclass_preserved(self) -> None:
        aggregate = CustomLazyError.from_errors([AssertionFailedError('bad', 1, 'a')])
        assert type(aggregate) is CustomLazyError

    def test_is_assertion_failed(self) -> None:
        assert issubclass(LazyAssertionError, AssertionFailedError)

    def test_errors_copied(self) -> None:
        aggregate = LazyAssertionError.from_errors([AssertionFailedError('bad', 1, 'a')])
        aggregate.errors.clear()
        assert len(aggregate.errors) == 1

    def test_pickle(self) -> None:
        aggregate = LazyAssertionError.from_errors([AssertionFailedError('bad', 1, 'a')])
        restored = pickle.loads(pickle.dumps(aggregate))
        assert restored.message == aggregate.message
        assert restored.errors[0].property_path == 'a'


class TestUsageErrors:
    """Tests for the usage error hierarchy."""

    @pytest.mark.parametrize('error_type', [UnknownAssertionError, MissingArgumentError, InvalidConfigurationError])
    def test_never_assertion_failures(self, error_type: type[Exception]) -> None:
        """Usage errors are disjoint from failures."""
        assert issubclass(error_type, AssertionUsageError)
        assert not issubclass(error_type, AssertionFailedError)

    def test_unknown_message(self) -> None:
        error = UnknownAssertionError('foo')
        assert str(error) == "Assertion 'foo' does not exist."
        assert error.assertion_name == 'foo'

    def test_missing_argument_message(self) -> None:
        assert str(MissingArgumentError('all_integer')) == 'all_integer(): missing the first argument.'

    def test_not_caught_as_value_error(self) -> None:
        """Handlers for invalid input do not swallow programming mistakes."""
        with pytest.raises(UnknownAssertionError):
            try:
                assertion.does_not_exist(1)
            except ValueError:
                pytest.fail('usage error caught as ValueError')
