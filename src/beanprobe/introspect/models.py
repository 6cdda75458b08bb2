"""Method descriptors built from class attributes.

A ``MethodInfo`` is a read-only snapshot of one method as declared on one
class: its name, declaring class, parameters (without the bound ``self`` or
``cls``), resolved return type, kind and synthetic flag.
"""

from __future__ import annotations

import inspect
import types
import typing
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

MISSING: Any = inspect.Parameter.empty
"""Type of a parameter or return slot that carries no annotation."""

# Filename given to code compiled by exec()/eval(), as used by dataclasses
# and collections.namedtuple to generate methods.
_GENERATED_FILENAME = "<string>"

_BOUND_FIRST_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


class MethodKind(str, Enum):
    """How a method is bound when accessed through an instance."""

    INSTANCE = "instance"
    STATIC = "static"
    CLASS = "class"


@dataclass(frozen=True, slots=True)
class ParameterInfo:
    """A single declared parameter."""

    name: str
    annotation: Any = MISSING


@dataclass(frozen=True, slots=True)
class MethodInfo:
    """A method declared directly on ``declaring_type``."""

    name: str
    declaring_type: type
    function: Callable[..., Any]
    kind: MethodKind
    parameters: tuple[ParameterInfo, ...] = ()
    return_type: Any = MISSING
    synthetic: bool = False

    @property
    def is_static(self) -> bool:
        return self.kind is not MethodKind.INSTANCE

    @property
    def param_types(self) -> tuple[Any, ...]:
        return tuple(p.annotation for p in self.parameters)

    @property
    def returns_none(self) -> bool:
        """True when the return annotation declares ``None``."""
        return self.return_type in (None, types.NoneType, "None")

    @property
    def qualname(self) -> str:
        return f"{self.declaring_type.__qualname__}.{self.name}"

    def signature(self) -> str:
        """Render as ``Owner.name(param: type, ...) -> type``."""
        params = ", ".join(
            p.name if p.annotation is MISSING else f"{p.name}: {_type_name(p.annotation)}"
            for p in self.parameters
        )
        rendered = f"{self.qualname}({params})"
        if self.return_type is not MISSING:
            rendered += f" -> {_type_name(self.return_type)}"
        return rendered

    @classmethod
    def from_member(cls, owner: type, name: str, member: Any) -> MethodInfo | None:
        """Describe ``member`` as found in ``vars(owner)[name]``.

        Returns None when the attribute is not a Python-level method
        (properties, nested classes, data attributes, C slot wrappers).
        """
        if isinstance(member, staticmethod):
            func, kind = member.__func__, MethodKind.STATIC
        elif isinstance(member, classmethod):
            func, kind = member.__func__, MethodKind.CLASS
        else:
            func, kind = member, MethodKind.INSTANCE
        if not isinstance(func, types.FunctionType):
            return None

        sig = inspect.signature(func)
        hints = _resolved_hints(func)

        params = list(sig.parameters.values())
        if kind is not MethodKind.STATIC and params and params[0].kind in _BOUND_FIRST_KINDS:
            params = params[1:]

        return cls(
            name=name,
            declaring_type=owner,
            function=func,
            kind=kind,
            parameters=tuple(
                ParameterInfo(name=p.name, annotation=hints.get(p.name, p.annotation))
                for p in params
            ),
            return_type=hints.get("return", sig.return_annotation),
            synthetic=func.__code__.co_filename == _GENERATED_FILENAME,
        )


_UNRESOLVABLE = (NameError, TypeError, AttributeError, SyntaxError)


def _resolved_hints(func: types.FunctionType) -> dict[str, Any]:
    try:
        return typing.get_type_hints(func)
    except _UNRESOLVABLE:
        pass
    # Resolve slot by slot; only the failing slots keep their raw annotation.
    return {
        slot: _resolve_annotation(annotation, func.__globals__)
        for slot, annotation in func.__annotations__.items()
    }


def _resolve_annotation(annotation: Any, globalns: dict[str, Any]) -> Any:
    if not isinstance(annotation, str):
        return annotation
    try:
        return eval(annotation, globalns)  # noqa: S307
    except _UNRESOLVABLE:
        return annotation


def _type_name(annotation: Any) -> str:
    if annotation is None or annotation is types.NoneType:
        return "None"
    if isinstance(annotation, type):
        return annotation.__qualname__
    if isinstance(annotation, str):
        return annotation
    return repr(annotation).replace("typing.", "")
