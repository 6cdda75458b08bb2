"""CLI utilities."""

from __future__ import annotations

import importlib
import json
from typing import Any

import click

from beanprobe.accessors.ops import AccessorResolver
from beanprobe.introspect.models import MethodInfo


class ClassTarget(click.ParamType):
    """A class given as ``package.module:Class`` (or ``module:Outer.Inner``)."""

    name = "module:Class"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> type:
        if isinstance(value, type):
            return value

        module_name, sep, attr_path = str(value).partition(":")
        if not sep or not module_name or not attr_path:
            self.fail(f"'{value}' is not in 'module:Class' form", param, ctx)

        try:
            target: Any = importlib.import_module(module_name)
        except ImportError as e:
            self.fail(f"Cannot import module '{module_name}': {e}", param, ctx)

        for part in attr_path.split("."):
            try:
                target = getattr(target, part)
            except AttributeError:
                self.fail(f"'{module_name}' has no attribute '{attr_path}'", param, ctx)

        if not isinstance(target, type):
            self.fail(f"'{value}' is not a class", param, ctx)
        return target


CLASS_TARGET = ClassTarget()


def get_resolver(ctx: click.Context) -> AccessorResolver:
    """Build a resolver from the conventions loaded by the root command."""
    config = ctx.find_root().obj["config"]
    return AccessorResolver(config.conventions)


def method_to_dict(method: MethodInfo | None) -> dict[str, Any] | None:
    if method is None:
        return None
    owner = method.declaring_type
    return {
        "name": method.name,
        "declaring_class": f"{owner.__module__}.{owner.__qualname__}",
        "kind": method.kind.value,
        "signature": method.signature(),
    }


def echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2))
