import json

import click
import tomlkit

from clmath.cli import cli
from clmath.config import settings


@cli.group()
def config() -> None:
    """
    Configuration commands
    """


@config.command("show")
@click.option("--json", "as_json", is_flag=True, help="Print the settings as JSON.")
@click.option("--toml", "as_toml", is_flag=True, help="Print the settings as TOML (default).")
def show(as_json: bool, as_toml: bool) -> None:
    """
    Print the active settings. Values are read from ~/.config/clmath/config.toml when that
    file exists, and from CLMATH_ environment variables.
    """

    if as_json and as_toml:
        raise click.UsageError("--json and --toml are mutually exclusive.")

    values = settings.model_dump(mode="json")
    if as_json:
        click.echo(json.dumps(values, indent=2))
    else:
        click.echo(tomlkit.dumps(values))
