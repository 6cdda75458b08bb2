"""Accessors module exports."""

from beanprobe.accessors.ops import (
    AccessorResolver,
    PropertyAccessors,
    accessor_suffix,
    find_getter,
    find_getters,
    find_properties,
    find_setter,
    get_getter,
    get_setter,
    is_getter,
    property_name,
)

__all__ = [
    "AccessorResolver",
    "PropertyAccessors",
    "accessor_suffix",
    "find_getter",
    "find_getters",
    "find_properties",
    "find_setter",
    "get_getter",
    "get_setter",
    "is_getter",
    "property_name",
]
