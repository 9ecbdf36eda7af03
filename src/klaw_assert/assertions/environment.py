"""Runtime environment predicates: importable modules, versions and env vars."""

from __future__ import annotations

import importlib.util
import os
import platform
import re
from importlib import metadata
from typing import Any

from klaw_assert.assertions.null_empty import NullEmptyAssertions
from klaw_assert.codes import Code
from klaw_assert.infrastructure import Message, predicate

__all__ = ['EnvironmentAssertions', 'compare_versions']

# Ordering of pre/post-release markers; plain numbers rank as '#'.
_SPECIAL_ORDER = {'dev': 0, 'alpha': 1, 'a': 1, 'beta': 2, 'b': 2, 'rc': 3, '#': 4, 'pl': 5, 'p': 5}
_OPERATORS = {
    '<': lambda c: c < 0,
    'lt': lambda c: c < 0,
    '<=': lambda c: c <= 0,
    'le': lambda c: c <= 0,
    '>': lambda c: c > 0,
    'gt': lambda c: c > 0,
    '>=': lambda c: c >= 0,
    'ge': lambda c: c >= 0,
    '==': lambda c: c == 0,
    'eq': lambda c: c == 0,
    '!=': lambda c: c != 0,
    '<>': lambda c: c != 0,
    'ne': lambda c: c != 0,
}
_TOKEN_RE = re.compile(r'\d+|[A-Za-z]+')


def _tokens(version: str) -> list[str]:
    return _TOKEN_RE.findall(version)


def _special(token: str) -> int:
    return _SPECIAL_ORDER['#'] if token.isdigit() else _SPECIAL_ORDER.get(token.lower(), -1)


def _compare_token(left: str, right: str) -> int:
    if left.isdigit() and right.isdigit():
        return (int(left) > int(right)) - (int(left) < int(right))
    return (_special(left) > _special(right)) - (_special(left) < _special(right))


def compare_versions(left: str, right: str) -> int:
    """Compare two version strings, returning -1, 0 or 1.

    Numeric parts compare numerically. Release markers order as
    ``dev < alpha = a < beta = b < rc < (release) < pl = p``, so
    ``'1.0rc1' < '1.0' < '1.0.1'``.
    """
    left_tokens, right_tokens = _tokens(left), _tokens(right)
    for a, b in zip(left_tokens, right_tokens, strict=False):
        result = _compare_token(a, b)
        if result:
            return result
    rest = len(left_tokens) - len(right_tokens)
    if rest > 0:
        extra = left_tokens[len(right_tokens)]
        return 1 if extra.isdigit() else _compare_token(extra, '#')
    if rest < 0:
        extra = right_tokens[len(left_tokens)]
        return -1 if extra.isdigit() else _compare_token('#', extra)
    return 0


class EnvironmentAssertions(NullEmptyAssertions):
    @predicate
    def extension_loaded(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value names an importable module. The module is located, not imported."""
        try:
            found = isinstance(value, str) and bool(value) and importlib.util.find_spec(value) is not None
        except (ImportError, ValueError):
            found = False
        if not found:
            raise self._fail(
                'extension_loaded',
                value,
                message,
                'Expected extension to be loaded. Got: {value}',
                Code.INVALID_EXTENSION,
                property_path,
            )
        return True

    @predicate
    def version(
        self,
        value: Any,
        operator: str,
        version: str,
        message: Message = None,
        property_path: str | None = None,
    ) -> bool:
        """Assert that version ``value`` relates to ``version`` by ``operator``.

        Operators: ``<``, ``<=``, ``>``, ``>=``, ``==``, ``!=`` and their
        ``lt``/``le``/``gt``/``ge``/``eq``/``ne`` spellings. An unknown
        operator fails the assertion.

        Example:
            ```python
            assertion.version('3.13.1', '>=', '3.13')
            # True
            ```
        """
        self.not_empty(operator, 'Version comparison operator is required and cannot be empty.')
        check = _OPERATORS.get(operator)
        if check is None or not check(compare_versions(str(value), str(version))):
            raise self._fail(
                'version',
                value,
                message,
                'Expected version {operator} {version}. Got: {value}',
                Code.INVALID_VERSION,
                property_path,
                constraints={'operator': operator, 'version': version},
                operator=operator,
                version=version,
            )
        return True

    @predicate
    def python_version(
        self, operator: str, version: str, message: Message = None, property_path: str | None = None
    ) -> bool:
        """Assert that the running interpreter's version relates to ``version`` by ``operator``."""
        return self.version(platform.python_version(), operator, version, message, property_path)

    @predicate
    def extension_version(
        self,
        extension: str,
        operator: str,
        version: str,
        message: Message = None,
        property_path: str | None = None,
    ) -> bool:
        """Assert the installed version of a module's distribution.

        The version comes from the installed distribution metadata, falling
        back to the module's ``__version__``.
        """
        self.extension_loaded(extension, message, property_path)
        installed = _installed_version(extension)
        if installed is None:
            raise self.create_exception(
                extension, 'Unable to determine extension version.', Code.INVALID_VERSION, property_path
            )
        return self.version(installed, operator, version, message, property_path)

    @predicate
    def defined(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that the environment variable named value is set (possibly to '')."""
        if not isinstance(value, str) or value not in os.environ:
            raise self._fail(
                'defined',
                value,
                message,
                'Expected a defined environment variable. Got: {value}',
                Code.INVALID_CONSTANT,
                property_path,
            )
        return True


def _installed_version(name: str) -> str | None:
    try:
        return metadata.version(name)
    except metadata.PackageNotFoundError:
        pass
    module = importlib.import_module(name)
    found = getattr(module, '__version__', None)
    return str(found) if found is not None else None
