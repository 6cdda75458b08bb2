"""beanprobe - getter/setter discovery by naming convention."""

from beanprobe.accessors import (
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
from beanprobe.core.errors import (
    BeanProbeError,
    ConfigError,
    InvalidArgumentError,
    NotFoundError,
)
from beanprobe.introspect import MethodInfo, find_method

__version__ = "0.1.0"

__all__ = [
    "AccessorResolver",
    "BeanProbeError",
    "ConfigError",
    "InvalidArgumentError",
    "MethodInfo",
    "NotFoundError",
    "PropertyAccessors",
    "accessor_suffix",
    "find_getter",
    "find_getters",
    "find_method",
    "find_properties",
    "find_setter",
    "get_getter",
    "get_setter",
    "is_getter",
    "property_name",
]
