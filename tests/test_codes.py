"""Tests for failure codes."""

from __future__ import annotations

import pytest
from klaw_assert import Code


class TestCode:
    """Tests for the Code enum."""

    def test_values_unique(self) -> None:
        """No two failure codes share a value."""
        values = [member.value for member in Code]
        assert len(values) == len(set(values))
        assert len(Code.__members__) == len(list(Code))

    @pytest.mark.parametrize(
        ('member', 'value'),
        [
            (Code.INVALID_FLOAT, 9),
            (Code.INVALID_INTEGER, 10),
            (Code.VALUE_EMPTY, 14),
            (Code.INVALID_STRING, 16),
            (Code.INVALID_TRAVERSABLE, 44),
            (Code.INVALID_DIRECTORY, 101),
            (Code.INVALID_EMAIL, 201),
            (Code.INVALID_BETWEEN, 219),
            (Code.INVALID_STRING_END, 238),
            (Code.INVALID_THROWS, 245),
        ],
    )
    def test_stable_values(self, member: Code, value: int) -> None:
        """Codes are part of the public contract and never change."""
        assert member == value

    def test_compares_as_int(self) -> None:
        assert Code(16) is Code.INVALID_STRING
        assert Code.INVALID_STRING + 0 == 16
