import click
import pydantic

from clmath.cli import cli
from clmath.exceptions import ClmathError
from clmath.liquidity_math import add_delta
from clmath.tick import tick_spacing_to_max_liquidity_per_tick


@cli.group()
def liquidity() -> None:
    """
    Liquidity commands
    """


@liquidity.command("max-per-tick")
@click.argument("tick_spacing", type=int)
def max_per_tick(tick_spacing: int) -> None:
    """
    Print the maximum liquidity that a single tick may hold for TICK_SPACING.
    """

    try:
        click.echo(tick_spacing_to_max_liquidity_per_tick(tick_spacing))
    except pydantic.ValidationError as exc:
        raise click.BadParameter(
            f"{tick_spacing} is not a valid tick spacing", param_hint="TICK_SPACING"
        ) from exc


@liquidity.command("add-delta")
@click.argument("x", type=int)
@click.argument("y", type=int)
def add_liquidity_delta(x: int, y: int) -> None:
    """
    Print liquidity X after applying the signed delta Y. Separate a negative delta from the
    command with "--", e.g. "add-delta -- 5 -3".
    """

    try:
        click.echo(add_delta(x, y))
    except ClmathError as exc:
        raise click.ClickException(str(exc)) from exc
