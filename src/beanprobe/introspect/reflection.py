"""Reflective walks over a class and its ancestors."""

from __future__ import annotations

from typing import Any

from beanprobe.core.errors import InvalidArgumentError
from beanprobe.introspect.models import MethodInfo


def type_hierarchy(cls: type) -> tuple[type, ...]:
    """Return ``cls`` and its ancestors, most-derived first (the MRO)."""
    if not isinstance(cls, type):
        raise InvalidArgumentError.not_a_class(cls)
    return cls.__mro__


def declared_methods(cls: type) -> list[MethodInfo]:
    """Methods declared directly on ``cls``, in definition order.

    Inherited methods are not included. Synthetic methods are included and
    flagged; callers decide whether to skip them.
    """
    if not isinstance(cls, type):
        raise InvalidArgumentError.not_a_class(cls)
    methods: list[MethodInfo] = []
    for name, member in vars(cls).items():
        info = MethodInfo.from_member(cls, name, member)
        if info is not None:
            methods.append(info)
    return methods


def find_method(cls: type, name: str, *param_types: Any) -> MethodInfo | None:
    """Find a method by name and exact parameter types.

    Walks ``cls`` and its ancestors to the first class that declares
    ``name`` and returns that declaration when it is a method whose parameter
    types equal ``param_types`` element by element. Any attribute of that name
    hides the ancestors' declarations, so a subclass method with other
    parameters (or ``name = None``) ends the search with None. Passing no
    ``param_types`` matches methods that take no parameters. Static and class
    methods are candidates too.
    """
    for level in type_hierarchy(cls):
        namespace = vars(level)
        if name not in namespace:
            continue
        info = MethodInfo.from_member(level, name, namespace[name])
        if info is not None and info.param_types == param_types:
            return info
        return None
    return None
