import click

from clmath.cli import cli
from clmath.exceptions import ClmathError
from clmath.tick_math import get_sqrt_ratio_at_tick, get_tick_at_sqrt_ratio


@cli.group()
def tick() -> None:
    """
    Tick conversion commands. Separate negative ticks from the command with "--".
    """


@tick.command("sqrt-price")
@click.argument("tick_index", metavar="TICK", type=int)
def sqrt_price(tick_index: int) -> None:
    """
    Print the Q64.96 square root price at TICK.
    """

    try:
        click.echo(get_sqrt_ratio_at_tick(tick_index))
    except ClmathError as exc:
        raise click.ClickException(str(exc)) from exc


@tick.command("from-sqrt-price")
@click.argument("sqrt_price_x96", type=int)
def from_sqrt_price(sqrt_price_x96: int) -> None:
    """
    Print the greatest tick with a square root price at or below SQRT_PRICE_X96.
    """

    try:
        click.echo(get_tick_at_sqrt_ratio(sqrt_price_x96))
    except ClmathError as exc:
        raise click.ClickException(str(exc)) from exc
