"""beanprobe properties command - list discovered properties of a class."""

import click

from beanprobe.cli.utils import CLASS_TARGET, echo_json, get_resolver, method_to_dict


@click.command()
@click.argument("target", type=CLASS_TARGET)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def properties_command(ctx: click.Context, target: type, as_json: bool) -> None:
    """List the properties of a class with their getters and setters.

    TARGET is the class to inspect, as package.module:Class.
    """
    properties = get_resolver(ctx).find_properties(target)

    if as_json:
        echo_json(
            [
                {
                    "property": prop.name,
                    "read_only": prop.read_only,
                    "getter": method_to_dict(prop.getter),
                    "setter": method_to_dict(prop.setter),
                }
                for prop in properties.values()
            ]
        )
        return

    if not properties:
        click.echo(f"No properties found on {target.__qualname__}")
        return

    width = max(len(name) for name in properties)
    for prop in properties.values():
        setter = prop.setter.qualname if prop.setter else "-"
        click.echo(f"{prop.name:<{width}}  {prop.getter.qualname}  {setter}")
