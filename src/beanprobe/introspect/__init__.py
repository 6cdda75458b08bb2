"""Introspect module exports."""

from beanprobe.introspect.models import MISSING, MethodInfo, MethodKind, ParameterInfo
from beanprobe.introspect.reflection import declared_methods, find_method, type_hierarchy

__all__ = [
    "MISSING",
    "MethodInfo",
    "MethodKind",
    "ParameterInfo",
    "declared_methods",
    "find_method",
    "type_hierarchy",
]
