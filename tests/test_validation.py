"""Tests for format and runtime environment predicates."""

from __future__ import annotations

import os
import platform
from typing import Any
from unittest.mock import patch

import pytest
from hypothesis import given
from hypothesis import strategies as st
from klaw_assert import AssertionFailedError, Code, IpFlag, assertion
from klaw_assert.assertions import compare_versions


def _fails(name: str, value: Any, *args: Any) -> AssertionFailedError:
    with pytest.raises(AssertionFailedError) as exc_info:
        getattr(assertion, name)(value, *args)
    return exc_info.value


class TestEmailUrl:
    """Tests for email and url."""

    @pytest.mark.parametrize('value', ['ada@example.com', 'first.last+tag@mail.example.org'])
    def test_email(self, value: str) -> None:
        assert assertion.email(value) is True

    @pytest.mark.parametrize('value', ['nope', 'a@b', '@example.com', 'a@@example.com', 'a b@example.com'])
    def test_email_rejects(self, value: str) -> None:
        assert _fails('email', value).code == Code.INVALID_EMAIL

    def test_email_requires_string(self) -> None:
        assert _fails('email', None).code == Code.INVALID_STRING

    @pytest.mark.parametrize(
        'value',
        ['http://example.com', 'https://sub.example.com:8080/path?q=1#frag', 'http://[::1]/', 'http://localhost'],
    )
    def test_url(self, value: str) -> None:
        assert assertion.url(value) is True

    @pytest.mark.parametrize(
        'value',
        ['example.com', 'ftp://example.com', 'http://', 'http://exa mple.com', 'http://example.com:99999', 'http://-bad-.com'],
    )
    def test_url_rejects(self, value: str) -> None:
        assert _fails('url', value).code == Code.INVALID_URL


class TestIdentifiers:
    """Tests for uuid, e164 and base64."""

    @pytest.mark.parametrize(
        'value',
        [
            'ff6f8cb0-c57d-11e1-9b21-0800200c9a66',
            'urn:uuid:ff6f8cb0-c57d-11e1-9b21-0800200c9a66',
            '{ff6f8cb0-c57d-11e1-9b21-0800200c9a66}',
            '00000000-0000-0000-0000-000000000000',
        ],
    )
    def test_uuid(self, value: str) -> None:
        assert assertion.uuid(value) is True

    @pytest.mark.parametrize('value', ['ff6f8cb0c57d11e19b210800200c9a66', 'zz6f8cb0-c57d-11e1-9b21-0800200c9a66', 1])
    def test_uuid_rejects(self, value: Any) -> None:
        assert _fails('uuid', value).code == Code.INVALID_UUID

    @given(st.uuids())
    def test_any_uuid(self, value: Any) -> None:
        assert assertion.uuid(str(value)) is True

    def test_e164(self) -> None:
        assert assertion.e164('+14155552671') is True
        assert assertion.e164('14155552671') is True
        for value in ('+04155552671', '+1415555267100000', 'phone', 14155552671):
            assert _fails('e164', value).code == Code.INVALID_E164

    def test_base64(self) -> None:
        assert assertion.base64('aGVsbG8=') is True
        assert assertion.base64(b'aGVsbG8=') is True
        for value in ('aGVsbG8', 'a$b=', None):
            assert _fails('base64', value).code == Code.INVALID_BASE64


class TestIp:
    """Tests for ip, ipv4 and ipv6."""

    def test_any_version(self) -> None:
        assert assertion.ip('8.8.8.8') is True
        assert assertion.ip('2001:4860:4860::8888') is True
        assert _fails('ip', '999.1.1.1').code == Code.INVALID_IP
        assert _fails('ip', 17).code == Code.INVALID_STRING

    def test_versions(self) -> None:
        assert assertion.ipv4('8.8.8.8') is True
        assert assertion.ipv6('::1') is True
        assert _fails('ipv4', '::1').message == 'Expected a valid IPv4 address. Got: ::1'
        assert _fails('ipv6', '8.8.8.8').code == Code.INVALID_IP

    def test_private_range(self) -> None:
        assert assertion.ip('10.0.0.1') is True
        error = _fails('ip', '10.0.0.1', IpFlag.NO_PRIV_RANGE)
        assert error.constraints == {'flag': IpFlag.NO_PRIV_RANGE}
        assert _fails('ipv4', '192.168.1.1', IpFlag.NO_PRIV_RANGE).code == Code.INVALID_IP

    def test_reserved_range(self) -> None:
        assert _fails('ip', '240.0.0.1', IpFlag.NO_RES_RANGE).code == Code.INVALID_IP
        assert _fails('ip', '127.0.0.1', IpFlag.NO_RES_RANGE).code == Code.INVALID_IP
        assert assertion.ip('8.8.8.8', IpFlag.NO_PRIV_RANGE | IpFlag.NO_RES_RANGE) is True

    @given(st.ip_addresses(v=4))
    def test_any_ipv4(self, address: Any) -> None:
        assert assertion.ipv4(str(address)) is True


class TestDocuments:
    """Tests for is_json_string and date."""

    @pytest.mark.parametrize('value', ['{"a": [1, 2]}', '[]', '"text"', 'null', b'true', 12, 1.5])
    def test_is_json_string(self, value: Any) -> None:
        assert assertion.is_json_string(value) is True

    @pytest.mark.parametrize('value', ['{a: 1}', '', "{'a': 1}", None, ['x'], True])
    def test_is_json_string_rejects(self, value: Any) -> None:
        assert _fails('is_json_string', value).code == Code.INVALID_JSON_STRING

    def test_date(self) -> None:
        assert assertion.date('2024-02-29', '%Y-%m-%d') is True
        assert assertion.date('31/12/1999 23:59', '%d/%m/%Y %H:%M') is True

    @pytest.mark.parametrize('value', ['2023-02-29', '2024-2-29', '2024-02-29T00:00', 'yesterday'])
    def test_date_rejects(self, value: str) -> None:
        error = _fails('date', value, '%Y-%m-%d')
        assert error.code == Code.INVALID_DATE
        assert error.constraints == {'format': '%Y-%m-%d'}


class TestCompareVersions:
    """Tests for compare_versions()."""

    @pytest.mark.parametrize(
        ('left', 'right', 'expected'),
        [
            ('1.0', '1.0', 0),
            ('1.0.1', '1.0', 1),
            ('1.2', '1.10', -1),
            ('1.0rc1', '1.0', -1),
            ('1.0a1', '1.0b1', -1),
            ('1.0dev', '1.0alpha', -1),
            ('1.0', '1.0pl1', -1),
            ('3.13.1', '3.13', 1),
        ],
    )
    def test_ordering(self, left: str, right: str, expected: int) -> None:
        assert compare_versions(left, right) == expected
        assert compare_versions(right, left) == -expected

    @given(st.lists(st.integers(min_value=0, max_value=999), min_size=1, max_size=4))
    def test_reflexive(self, parts: list[int]) -> None:
        version = '.'.join(map(str, parts))
        assert compare_versions(version, version) == 0


class TestEnvironment:
    """Tests for version, python_version, extension_loaded, extension_version and defined."""

    @pytest.mark.parametrize('operator', ['>=', 'ge', '>', 'gt', '!=', 'ne', '<>'])
    def test_version_greater(self, operator: str) -> None:
        assert assertion.version('2.1', operator, '2.0') is True

    def test_version_failure(self) -> None:
        error = _fails('version', '1.0', '>=', '2.0')
        assert error.code == Code.INVALID_VERSION
        assert error.message == 'Expected version >= 2.0. Got: 1.0'
        assert error.constraints == {'operator': '>=', 'version': '2.0'}

    def test_version_unknown_operator(self) -> None:
        assert _fails('version', '1.0', '~=', '1.0').code == Code.INVALID_VERSION

    def test_version_empty_operator(self) -> None:
        error = _fails('version', '1.0', '', '1.0')
        assert error.code == Code.VALUE_EMPTY
        assert error.message == 'Version comparison operator is required and cannot be empty.'

    def test_python_version(self) -> None:
        assert assertion.python_version('>=', '3.0') is True
        assert assertion.python_version('==', platform.python_version()) is True
        assert _fails('python_version', '<', '3.0').code == Code.INVALID_VERSION

    def test_extension_loaded(self) -> None:
        assert assertion.extension_loaded('json') is True
        assert assertion.extension_loaded('msgspec') is True
        for value in ('no_such_module_xyz', '', 5, '.relative'):
            assert _fails('extension_loaded', value).code == Code.INVALID_EXTENSION

    def test_extension_version(self) -> None:
        assert assertion.extension_version('msgspec', '>=', '0.1') is True
        assert _fails('extension_version', 'msgspec', '<', '0.1').code == Code.INVALID_VERSION
        assert _fails('extension_version', 'no_such_module_xyz', '>=', '1').code == Code.INVALID_EXTENSION

    def test_extension_version_unknown(self) -> None:
        """Modules without metadata or __version__ cannot be compared."""
        error = _fails('extension_version', 'json.decoder', '>=', '1')
        assert error.code == Code.INVALID_VERSION
        assert error.message == 'Unable to determine extension version.'

    def test_defined(self) -> None:
        with patch.dict(os.environ, {'KLAW_ASSERT_TEST_FLAG': ''}):
            assert assertion.defined('KLAW_ASSERT_TEST_FLAG') is True
        assert _fails('defined', 'KLAW_ASSERT_TEST_FLAG').code == Code.INVALID_CONSTANT
        assert _fails('defined', None).code == Code.INVALID_CONSTANT
