"""beanprobe CLI - inspect getters and setters of a class."""

from pathlib import Path

import click

from beanprobe import __version__
from beanprobe.cli.getter import getter_command
from beanprobe.cli.properties import properties_command
from beanprobe.cli.setter import setter_command
from beanprobe.config.loader import load_config
from beanprobe.core.errors import ConfigError
from beanprobe.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="beanprobe")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML config file",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """beanprobe - getter/setter discovery by naming convention."""
    ctx.ensure_object(dict)
    try:
        config = load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(e.message) from e

    configure_logging(config=config.logging, verbose=verbose)

    ctx.obj["config"] = config


cli.add_command(properties_command, name="properties")
cli.add_command(getter_command, name="getter")
cli.add_command(setter_command, name="setter")


if __name__ == "__main__":
    cli()
