import click

from clmath.bit_math import most_significant_bit
from clmath.cli import cli
from clmath.exceptions import ClmathError


@cli.group()
def bits() -> None:
    """
    Bit math commands
    """


@bits.command("msb")
@click.argument("number", type=int)
def msb(number: int) -> None:
    """
    Print the index of the most significant bit of NUMBER.
    """

    try:
        click.echo(most_significant_bit(number))
    except ClmathError as exc:
        raise click.ClickException(str(exc)) from exc
