import click

from clmath.version import __version__


@click.group()
@click.version_option(version=__version__)
def cli() -> None: ...


from . import bits, config, liquidity, tick  # noqa: F401, E402
