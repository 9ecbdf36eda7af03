"""Class and attribute predicates.

Classes may be given as objects or as dotted import paths
(``'collections.OrderedDict'``). Resolving a path imports its module.
"""

from __future__ import annotations

import importlib
import inspect
from collections.abc import Sequence
from typing import Any

from klaw_assert.assertions.types import TypeAssertions
from klaw_assert.codes import Code
from klaw_assert.infrastructure import Message, predicate

__all__ = ['ObjectAssertions']


def _resolve_class(value: Any) -> type | None:
    """Return the class ``value`` names, or None if it names none."""
    if isinstance(value, type):
        return value
    if not isinstance(value, str) or not value:
        return None
    module_name, _, attr = value.rpartition('.')
    try:
        module = importlib.import_module(module_name or 'builtins')
    except (ImportError, TypeError, ValueError):
        # Not an importable dotted path.
        return None
    resolved = getattr(module, attr, None)
    return resolved if isinstance(resolved, type) else None


def _is_interface(cls: type) -> bool:
    return inspect.isabstract(cls) or getattr(cls, '_is_protocol', False)


def _class_of(value: Any) -> type | None:
    if isinstance(value, (type, str)):
        return _resolve_class(value)
    return type(value)


def _has_property(target: Any, name: str) -> bool:
    if hasattr(target, name):
        return True
    # Declared but unset attributes, e.g. dataclass fields without defaults.
    cls = target if isinstance(target, type) else type(target)
    return any(name in inspect.get_annotations(klass) for klass in cls.__mro__)


class ObjectAssertions(TypeAssertions):
    @predicate
    def class_exists(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        if _resolve_class(value) is None:
            raise self._fail(
                'class_exists', value, message, 'Expected an existing class. Got: {value}', Code.INVALID_CLASS, property_path
            )
        return True

    @predicate
    def interface_exists(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value names a class with abstract methods, or a ``Protocol``."""
        cls = _resolve_class(value)
        if cls is None or not _is_interface(cls):
            raise self._fail(
                'interface_exists',
                value,
                message,
                'Expected an existing interface. Got: {value}',
                Code.INVALID_INTERFACE,
                property_path,
            )
        return True

    @predicate
    def is_instance_of(self, value: Any, cls: type, message: Message = None, property_path: str | None = None) -> bool:
        if not isinstance(value, cls):
            raise self._fail(
                'is_instance_of',
                value,
                message,
                'Expected an instance of {cls}. Got: {value}',
                Code.INVALID_INSTANCE_OF,
                property_path,
                constraints={'class': cls},
                cls=cls,
            )
        return True

    @predicate
    def not_is_instance_of(
        self, value: Any, cls: type, message: Message = None, property_path: str | None = None
    ) -> bool:
        if isinstance(value, cls):
            raise self._fail(
                'not_is_instance_of',
                value,
                message,
                'Expected not an instance of {cls}. Got: {value}',
                Code.INVALID_NOT_INSTANCE_OF,
                property_path,
                constraints={'class': cls},
                cls=cls,
            )
        return True

    @predicate
    def subclass_of(self, value: Any, cls: type, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value (a class, or an instance's class) strictly derives from ``cls``."""
        klass = _class_of(value)
        if klass is None or klass is cls or not issubclass(klass, cls):
            raise self._fail(
                'subclass_of',
                value,
                message,
                'Expected a subclass of {cls}. Got: {value}',
                Code.INVALID_SUBCLASS_OF,
                property_path,
                constraints={'class': cls},
                cls=cls,
            )
        return True

    @predicate
    def implements_interface(
        self, value: Any, interface: type, message: Message = None, property_path: str | None = None
    ) -> bool:
        """Assert that value (a class, path or instance) is a subclass of ``interface``.

        Virtual subclasses registered on an ABC count.
        """
        klass = _class_of(value)
        try:
            ok = klass is not None and issubclass(klass, interface)
        except TypeError:
            # Non-runtime-checkable protocols refuse issubclass().
            klass = None
            ok = False
        if not ok:
            raise self._fail(
                'implements_interface',
                value,
                message,
                'Expected a class implementing {interface}. Got: {value}'
                if klass is not None
                else 'Class failed reflection. Got: {value}',
                Code.INTERFACE_NOT_IMPLEMENTED,
                property_path,
                constraints={'interface': interface},
                interface=interface,
            )
        return True

    @predicate
    def method_exists(self, value: Any, obj: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that ``obj`` has a callable attribute named value."""
        self.is_object(obj, message, property_path)
        if not isinstance(value, str) or not callable(getattr(obj, value, None)):
            raise self._fail(
                'method_exists',
                value,
                message,
                'Expected method to exist. Got: {value}',
                Code.INVALID_METHOD,
                property_path,
                constraints={'object': type(obj).__qualname__},
                obj=obj,
            )
        return True

    @predicate
    def method_not_exists(
        self, value: Any, method: str, message: Message = None, property_path: str | None = None
    ) -> bool:
        target = _resolve_class(value) if isinstance(value, str) else value
        if target is not None and callable(getattr(target, method, None)):
            raise self._fail(
                'method_not_exists',
                value,
                message,
                'Expected method {method} to not exist. Got: {value}',
                Code.INVALID_METHOD_NOT_EXISTS,
                property_path,
                constraints={'method': method},
                method=method,
            )
        return True

    @predicate
    def object_or_class(self, value: Any, message: Message = None, property_path: str | None = None) -> bool:
        """Assert that value is an object, or names an existing class."""
        if isinstance(value, str) or value is None:
            self.class_exists(value, message, property_path)
        else:
            self.is_object(value, message, property_path)
        return True

    @predicate
    def property_exists(
        self, value: Any, name: str, message: Message = None, property_path: str | None = None
    ) -> bool:
        self.object_or_class(value)
        if not _has_property(_target(value), name):
            raise self._fail(
                'property_exists',
                value,
                message,
                'Expected a class with property {name}. Got: {value}',
                Code.INVALID_PROPERTY,
                property_path,
                constraints={'property': name},
                name=name,
            )
        return True

    @predicate
    def properties_exist(
        self,
        value: Any,
        names: Sequence[str],
        message: Message = None,
        property_path: str | None = None,
    ) -> bool:
        """Assert that every attribute in ``names`` exists; all missing ones are listed."""
        self.object_or_class(value)
        for name in names:
            self.string(name, message, property_path)
        target = _target(value)
        missing = [name for name in names if not _has_property(target, name)]
        if missing:
            raise self._fail(
                'properties_exist',
                value,
                message,
                'Expected a class with properties {missing}. Got: {value}',
                Code.INVALID_PROPERTY,
                property_path,
                constraints={'properties': list(names)},
                missing=', '.join(missing),
            )
        return True

    @predicate
    def property_not_exists(
        self, value: Any, name: str, message: Message = None, property_path: str | None = None
    ) -> bool:
        self.object_or_class(value)
        if _has_property(_target(value), name):
            raise self._fail(
                'property_not_exists',
                value,
                message,
                'Expected property {name} to not exist. Got: {value}',
                Code.INVALID_PROPERTY_NOT_EXISTS,
                property_path,
                constraints={'property': name},
                name=name,
            )
        return True


def _target(value: Any) -> Any:
    return _resolve_class(value) if isinstance(value, str) else value
