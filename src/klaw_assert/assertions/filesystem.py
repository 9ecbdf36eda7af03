"""Filesystem predicates. Paths may be ``str`` or ``os.PathLike``."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from klaw_assert.assertions.null_empty import NullEmptyAssertions
from klaw_assert.assertions.types import TypeAssertions
from klaw_assert.codes import Code
from klaw_assert.infrastructure import Message, predicate

__all__ = ['FileSystemAssertions']


class FileSystemAssertions(TypeAssertions, NullEmptyAssertions):
    def _path(self, value: Any, message: Message, property_path: str | None) -> Path:
        if not isinstance(value, os.PathLike):
            self.string(value, message, property_path)
        return Path(value)

    @predicate
    def file(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is a path to an existing regular file."""
        path = self._path(value, message, property_path)
        self.not_empty(os.fspath(value), message, property_path)
        if not path.is_file():
            raise self._fail('file', value, message, 'Expected file to exist. Got: {value}', Code.INVALID_FILE, property_path)
        return True

    @predicate
    def directory(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        if not self._path(value, message, property_path).is_dir():
            raise self._fail(
                'directory', value, message, 'Expected a directory. Got: {value}', Code.INVALID_DIRECTORY, property_path
            )
        return True

    @predicate
    def readable(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        path = self._path(value, message, property_path)
        if not (path.exists() and os.access(path, os.R_OK)):
            raise self._fail(
                'readable', value, message, 'Expected readable path. Got: {value}', Code.INVALID_READABLE, property_path
            )
        return True

    @predicate
    def writeable(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        path = self._path(value, message, property_path)
        if not (path.exists() and os.access(path, os.W_OK)):
            raise self._fail(
                'writeable', value, message, 'Expected writable path. Got: {value}', Code.INVALID_WRITEABLE, property_path
            )
        return True
