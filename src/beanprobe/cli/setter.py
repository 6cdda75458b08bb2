"""beanprobe setter command - resolve the setter paired with a property's getter."""

import click

from beanprobe.cli.utils import CLASS_TARGET, echo_json, get_resolver, method_to_dict
from beanprobe.core.errors import BeanProbeError


@click.command()
@click.argument("target", type=CLASS_TARGET)
@click.argument("property_name", metavar="PROPERTY")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def setter_command(ctx: click.Context, target: type, property_name: str, as_json: bool) -> None:
    """Show the setter of PROPERTY on TARGET.

    The getter is resolved first; the setter must take exactly the getter's
    return type.
    """
    resolver = get_resolver(ctx)
    try:
        getter = resolver.get_getter(target, property_name)
        setter = resolver.get_setter(getter)
    except BeanProbeError as e:
        raise click.ClickException(e.message) from e

    if as_json:
        echo_json({"getter": method_to_dict(getter), "setter": method_to_dict(setter)})
    else:
        click.echo(setter.signature())
