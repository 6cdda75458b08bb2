"""beanprobe getter command - resolve the getter of one property."""

import click

from beanprobe.cli.utils import CLASS_TARGET, echo_json, get_resolver, method_to_dict
from beanprobe.core.errors import BeanProbeError


@click.command()
@click.argument("target", type=CLASS_TARGET)
@click.argument("property_name", metavar="PROPERTY")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def getter_command(ctx: click.Context, target: type, property_name: str, as_json: bool) -> None:
    """Show the getter of PROPERTY on TARGET.

    TARGET is the class to inspect, as package.module:Class.
    """
    try:
        getter = get_resolver(ctx).get_getter(target, property_name)
    except BeanProbeError as e:
        raise click.ClickException(e.message) from e

    if as_json:
        echo_json(method_to_dict(getter))
    else:
        click.echo(getter.signature())
