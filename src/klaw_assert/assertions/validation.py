"""Format predicates: email, URL, UUID, IP, E.164, base64, JSON and dates."""

from __future__ import annotations

import base64
import binascii
import ipaddress
import re
from datetime import datetime
from enum import IntFlag
from typing import Any
from urllib.parse import urlsplit

import msgspec

from klaw_assert.assertions.types import TypeAssertions
from klaw_assert.codes import Code
from klaw_assert.infrastructure import Message, predicate

__all__ = ['IpFlag', 'ValidationAssertions']


class IpFlag(IntFlag):
    """Options for ``ip``. Combine with ``|``."""

    IPV4 = 1
    IPV6 = 2
    NO_PRIV_RANGE = 4
    NO_RES_RANGE = 8


_EMAIL_RE = re.compile(
    r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r'@([A-Za-z0-9]([A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z]{2,63}'
)
_HOSTNAME_RE = re.compile(r'(?!-)[\w-]{1,63}(?<!-)(\.(?!-)[\w-]{1,63}(?<!-))*\.?')
_URL_SCHEMES = frozenset({'http', 'https'})
_UUID_RE = re.compile(r'[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12}')
_NIL_UUID = '00000000-0000-0000-0000-000000000000'
_E164_RE = re.compile(r'\+?[1-9]\d{1,14}')


def _valid_url(value: str) -> bool:
    if any(ch.isspace() for ch in value):
        return False
    try:
        parts = urlsplit(value)
        parts.port  # noqa: B018 - raises ValueError on a malformed port
    except ValueError:
        return False
    if parts.scheme.lower() not in _URL_SCHEMES or not parts.hostname:
        return False
    host = parts.hostname
    if '[' in parts.netloc:
        return _parse_ip(host) is not None
    return _HOSTNAME_RE.fullmatch(host) is not None


def _parse_ip(value: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address | None:
    try:
        return ipaddress.ip_address(value)
    except ValueError:
        return None


def _ip_allowed(address: ipaddress.IPv4Address | ipaddress.IPv6Address, flags: IpFlag) -> bool:
    versions = flags & (IpFlag.IPV4 | IpFlag.IPV6)
    if versions and not (
        (address.version == 4 and IpFlag.IPV4 in flags) or (address.version == 6 and IpFlag.IPV6 in flags)
    ):
        return False
    if IpFlag.NO_PRIV_RANGE in flags and address.is_private and not address.is_loopback:
        return False
    reserved = address.is_reserved or address.is_loopback or address.is_unspecified or address.is_link_local
    return not (IpFlag.NO_RES_RANGE in flags and reserved)


class ValidationAssertions(TypeAssertions):
    @predicate
    def email(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        self.string(value, message, property_path)
        if _EMAIL_RE.fullmatch(value) is None:
            raise self._fail(
                'email', value, message, 'Expected a valid email address. Got: {value}', Code.INVALID_EMAIL, property_path
            )
        return True

    @predicate
    def url(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is an absolute http(s) URL with a valid host."""
        self.string(value, message, property_path)
        if not _valid_url(value):
            raise self._fail('url', value, message, 'Expected a valid URL. Got: {value}', Code.INVALID_URL, property_path)
        return True

    @predicate
    def uuid(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is a hyphenated UUID.

        ``urn:uuid:`` prefixes and braces are ignored. The nil UUID is valid.
        """
        ok = False
        if isinstance(value, str):
            text = value.replace('urn:', '').replace('uuid:', '').replace('{', '').replace('}', '')
            ok = text == _NIL_UUID or _UUID_RE.fullmatch(text) is not None
        if not ok:
            raise self._fail('uuid', value, message, 'Expected a valid UUID. Got: {value}', Code.INVALID_UUID, property_path)
        return True

    @predicate
    def ip(
        self,
        value: Any,
        flags: IpFlag | None = None,
        message: Message = None,
        property_path: str | None = None,
    ) -> bool:
        """Assert that value is an IP address allowed by ``flags``.

        Example:
            ```python
            assertion.ip('10.0.0.1')
            # True
            assertion.ip('10.0.0.1', IpFlag.NO_PRIV_RANGE)
            # raises AssertionFailedError
            ```
        """
        self.string(value, message, property_path)
        address = _parse_ip(value)
        if address is None or not _ip_allowed(address, IpFlag(flags or 0)):
            raise self._fail(
                'ip',
                value,
                message,
                'Expected a valid IP address. Got: {value}',
                Code.INVALID_IP,
                property_path,
                constraints={'flag': flags},
                flags=flags,
            )
        return True

    @predicate
    def ipv4(
        self,
        value: Any,
        flags: IpFlag | None = None,
        message: Message = None,
        property_path: str | None = None,
    ) -> bool:
        return self.ip(
            value,
            IpFlag(flags or 0) | IpFlag.IPV4,
            message or 'Expected a valid IPv4 address. Got: {value}',
            property_path,
        )

    @predicate
    def ipv6(
        self,
        value: Any,
        flags: IpFlag | None = None,
        message: Message = None,
        property_path: str | None = None,
    ) -> bool:
        return self.ip(
            value,
            IpFlag(flags or 0) | IpFlag.IPV6,
            message or 'Expected a valid IPv6 address. Got: {value}',
            property_path,
        )

    @predicate
    def e164(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is a phone number in E.164 format, e.g. ``'+14155552671'``."""
        if not isinstance(value, str) or _E164_RE.fullmatch(value) is None:
            raise self._fail('e164', value, message, 'Expected a valid E164. Got: {value}', Code.INVALID_E164, property_path)
        return True

    @predicate
    def base64(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is strictly valid, padded base64."""
        try:
            ok = isinstance(value, (str, bytes)) and base64.b64decode(value, validate=True) is not None
        except (binascii.Error, ValueError):
            ok = False
        if not ok:
            raise self._fail(
                'base64', value, message, 'Expected a valid base64 string. Got: {value}', Code.INVALID_BASE64, property_path
            )
        return True

    @predicate
    def is_json_string(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value (or, for numbers, its text) is a valid JSON document."""
        if isinstance(value, (str, bytes)):
            text = value
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            text = str(value)
        else:
            text = ''
        try:
            msgspec.json.decode(text)
        except msgspec.DecodeError:
            raise self._fail(
                'is_json_string',
                value,
                message,
                'Expected a valid JSON string. Got: {value}',
                Code.INVALID_JSON_STRING,
                property_path,
            ) from None
        return True

    @predicate
    def date(self, value: Any, fmt: str, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value parses with the ``strptime`` format ``fmt`` and formats back unchanged.

        Example:
            ```python
            assertion.date('2024-02-29', '%Y-%m-%d')
            # True
            assertion.date('2024-2-29', '%Y-%m-%d')
            # raises AssertionFailedError (not zero-padded)
            ```
        """
        self.string(value, message, property_path)
        self.string(fmt, message, property_path)
        try:
            ok = datetime.strptime(value, fmt).strftime(fmt) == value  # noqa: DTZ007
        except ValueError:
            ok = False
        if not ok:
            raise self._fail(
                'date',
                value,
                message,
                'Expected a date matching format {fmt}. Got: {value}',
                Code.INVALID_DATE,
                property_path,
                constraints={'format': fmt},
                fmt=fmt,
            )
        return True
