"""Accessor resolution - getter/setter discovery by naming convention.

Property ``value`` is read by ``getValue()`` (or ``isValue()``) and written by
``setValue(v)``. A property whose name starts with an underscore keeps its name
unchanged in the accessor: ``_value`` pairs with ``get_value()``.

All queries re-walk the class hierarchy on every call. Nothing is cached.
"""

from __future__ import annotations

from dataclasses import dataclass

from beanprobe.config.models import ConventionsConfig
from beanprobe.core.errors import InvalidArgumentError, NotFoundError
from beanprobe.core.logging import get_logger
from beanprobe.introspect.models import MethodInfo
from beanprobe.introspect.reflection import declared_methods, find_method, type_hierarchy

log = get_logger(__name__)


def accessor_suffix(property_name: str) -> str:
    """Get suffix of accessor method names for a property.

    The suffix for ``value`` is ``Value``. A property name starting with an
    underscore is its own suffix.

    Raises:
        InvalidArgumentError: If ``property_name`` is empty, or its first
            character upper-cases to more than one character (``ß``).
    """
    if not property_name:
        raise InvalidArgumentError.empty_name("property name")
    if property_name[0] == "_":
        return property_name
    first = property_name[0].upper()
    if len(first) != 1:
        raise InvalidArgumentError.invalid_suffix(
            property_name, f"'{property_name[0]}' has no single-character upper case"
        )
    return first + property_name[1:]


def _property_name_from_suffix(suffix: str) -> str:
    """Inverse of ``accessor_suffix``: ``Value`` becomes ``value``."""
    if not suffix:
        raise InvalidArgumentError.invalid_suffix(suffix, "suffix is empty")
    if suffix[0] == "_":
        return suffix
    if not suffix[0].isupper():
        raise InvalidArgumentError.invalid_suffix(suffix, "first character must be upper case")
    first = suffix[0].lower()
    if len(first) != 1:
        raise InvalidArgumentError.invalid_suffix(
            suffix, f"'{suffix[0]}' has no single-character lower case"
        )
    return first + suffix[1:]


@dataclass(frozen=True, slots=True)
class PropertyAccessors:
    """A discovered property with its getter and, when writable, its setter."""

    name: str
    getter: MethodInfo
    setter: MethodInfo | None = None

    @property
    def read_only(self) -> bool:
        return self.setter is None


class AccessorResolver:
    """Resolves getters and setters under a set of naming conventions."""

    def __init__(self, conventions: ConventionsConfig | None = None) -> None:
        self._conventions = conventions or ConventionsConfig()

    @property
    def conventions(self) -> ConventionsConfig:
        return self._conventions

    def is_getter(self, method: MethodInfo) -> bool:
        """Check if a method is a getter.

        A getter is named with a getter prefix, is not static and takes no
        parameters. The return type is only checked when the conventions
        require it, and then only rejects an explicit ``None``.
        """
        if not method.name.startswith(self._conventions.getter_prefixes):
            return False
        if method.is_static or method.parameters:
            return False
        if self._conventions.require_getter_return and method.returns_none:
            return False
        return True

    def find_getters(self, cls: type) -> list[MethodInfo]:
        """Find all getters of ``cls`` and its ancestors.

        Any attribute declared on a subclass shadows ancestor declarations of
        the same name, so ``getX(self, scale)`` or ``getX = None`` on a
        subclass hides an inherited ``getX(self)``. Subclass getters come
        first; within one class, getters keep their definition order.
        Synthetic methods are skipped but still shadow.
        """
        getters: list[MethodInfo] = []
        seen: set[str] = set()
        for level in type_hierarchy(cls):
            declared = {m.name: m for m in declared_methods(level)}
            for name in vars(level):
                if name in seen:
                    continue
                seen.add(name)
                method = declared.get(name)
                if method is not None and not method.synthetic and self.is_getter(method):
                    getters.append(method)
        return getters

    def find_getter(self, cls: type, property_name: str) -> MethodInfo | None:
        """Find the getter of ``property_name`` in ``cls`` or its ancestors.

        Each getter prefix is tried in order over the whole hierarchy, so
        ``getActive`` on a base class wins over ``isActive`` on a subclass.
        A subclass attribute named like the accessor hides the ancestor's
        method, as ``find_method`` describes.
        """
        suffix = accessor_suffix(property_name)
        for prefix in self._conventions.getter_prefixes:
            getter = find_method(cls, prefix + suffix)
            if getter is not None:
                log.debug(
                    "accessors.getter_resolved",
                    cls=cls.__qualname__,
                    property=property_name,
                    method=getter.qualname,
                )
                return getter
        log.debug("accessors.getter_missing", cls=cls.__qualname__, property=property_name)
        return None

    def get_getter(self, cls: type, property_name: str) -> MethodInfo:
        """Like ``find_getter`` but raises ``NotFoundError`` when absent."""
        getter = self.find_getter(cls, property_name)
        if getter is None:
            raise NotFoundError.getter(cls, property_name)
        return getter

    def property_name(self, getter: MethodInfo) -> str:
        """Get the property name a getter reads.

        Raises:
            InvalidArgumentError: If the method name has no getter prefix, or
                the remainder is not a valid accessor suffix.
        """
        for prefix in self._conventions.getter_prefixes:
            if getter.name.startswith(prefix):
                return _property_name_from_suffix(getter.name[len(prefix) :])
        raise InvalidArgumentError.not_a_getter(getter.declaring_type, getter.name)

    def setter_name(self, getter: MethodInfo) -> str:
        return self._conventions.setter_prefix + accessor_suffix(self.property_name(getter))

    def find_setter(self, getter: MethodInfo) -> MethodInfo | None:
        """Find the setter paired with ``getter``.

        Takes the nearest declaration of the setter name, starting at the
        getter's declaring class, and accepts it when it is a one-parameter
        method whose parameter type is exactly the getter's return type.
        """
        name = self.setter_name(getter)
        setter = find_method(getter.declaring_type, name, getter.return_type)
        if setter is None:
            log.debug("accessors.setter_missing", getter=getter.qualname, setter=name)
        else:
            log.debug("accessors.setter_resolved", getter=getter.qualname, setter=setter.qualname)
        return setter

    def get_setter(self, getter: MethodInfo) -> MethodInfo:
        """Like ``find_setter`` but raises ``NotFoundError`` when absent."""
        setter = self.find_setter(getter)
        if setter is None:
            raise NotFoundError.setter(getter.declaring_type, getter.name, self.setter_name(getter))
        return setter

    def find_properties(self, cls: type) -> dict[str, PropertyAccessors]:
        """Pair every getter of ``cls`` with its setter, keyed by property name.

        Order follows ``find_getters``. Getters whose names do not map back to
        a property (``getaway``, a bare ``get``) are skipped. When two getters
        read the same property (``getActive`` and ``isActive``), the first one
        found wins.
        """
        properties: dict[str, PropertyAccessors] = {}
        for getter in self.find_getters(cls):
            try:
                name = self.property_name(getter)
            except InvalidArgumentError as e:
                log.debug("accessors.getter_skipped", method=getter.qualname, reason=e.message)
                continue
            if name in properties:
                log.debug(
                    "accessors.getter_shadowed",
                    property=name,
                    method=getter.qualname,
                    winner=properties[name].getter.qualname,
                )
                continue
            properties[name] = PropertyAccessors(
                name=name, getter=getter, setter=self.find_setter(getter)
            )
        return properties


_default_resolver = AccessorResolver()


def is_getter(method: MethodInfo) -> bool:
    return _default_resolver.is_getter(method)


def find_getters(cls: type) -> list[MethodInfo]:
    return _default_resolver.find_getters(cls)


def find_getter(cls: type, property_name: str) -> MethodInfo | None:
    return _default_resolver.find_getter(cls, property_name)


def get_getter(cls: type, property_name: str) -> MethodInfo:
    return _default_resolver.get_getter(cls, property_name)


def property_name(getter: MethodInfo) -> str:
    return _default_resolver.property_name(getter)


def find_setter(getter: MethodInfo) -> MethodInfo | None:
    return _default_resolver.find_setter(getter)


def get_setter(getter: MethodInfo) -> MethodInfo:
    return _default_resolver.get_setter(getter)


def find_properties(cls: type) -> dict[str, PropertyAccessors]:
    return _default_resolver.find_properties(cls)
