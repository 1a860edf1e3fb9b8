import json

import pytest
from click.testing import CliRunner

from clmath import __version__
from clmath.cli import cli
from clmath.constants import MAX_UINT128, Q96
from clmath.tick_math import MAX_SQRT_RATIO, MIN_SQRT_RATIO, MIN_TICK


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_cli_help(runner: CliRunner):
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0


def test_cli_version(runner: CliRunner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_config_show_default(runner: CliRunner):
    result = runner.invoke(cli, ["config", "show"])
    assert result.exit_code == 0
    assert "cache_size" in result.output


def test_cli_config_show_json(runner: CliRunner):
    result = runner.invoke(cli, ["config", "show", "--json"])
    assert result.exit_code == 0
    assert "cache_size" in json.loads(result.output)


def test_cli_tick_sqrt_price(runner: CliRunner):
    result = runner.invoke(cli, ["tick", "sqrt-price", "0"])
    assert result.exit_code == 0
    assert result.output.strip() == str(Q96)

    result = runner.invoke(cli, ["tick", "sqrt-price", "--", str(MIN_TICK)])
    assert result.exit_code == 0
    assert result.output.strip() == str(MIN_SQRT_RATIO)

    result = runner.invoke(cli, ["tick", "sqrt-price", "887273"])
    assert result.exit_code == 1
    assert "TickOutOfRange" in result.output


def test_cli_tick_from_sqrt_price(runner: CliRunner):
    result = runner.invoke(cli, ["tick", "from-sqrt-price", str(MIN_SQRT_RATIO)])
    assert result.exit_code == 0
    assert result.output.strip() == str(MIN_TICK)

    result = runner.invoke(cli, ["tick", "from-sqrt-price", str(MAX_SQRT_RATIO)])
    assert result.exit_code == 1
    assert "SqrtPriceOutOfRange" in result.output


def test_cli_liquidity_max_per_tick(runner: CliRunner):
    result = runner.invoke(cli, ["liquidity", "max-per-tick", "60"])
    assert result.exit_code == 0
    assert result.output.strip() == "11505743598341114571880798222544994"

    result = runner.invoke(cli, ["liquidity", "max-per-tick", "0"])
    assert result.exit_code == 2


def test_cli_liquidity_add_delta(runner: CliRunner):
    result = runner.invoke(cli, ["liquidity", "add-delta", "0", "5"])
    assert result.exit_code == 0
    assert result.output.strip() == "5"

    result = runner.invoke(cli, ["liquidity", "add-delta", "--", "5", "-10"])
    assert result.exit_code == 1
    assert "underflow" in result.output

    result = runner.invoke(cli, ["liquidity", "add-delta", str(MAX_UINT128), "1"])
    assert result.exit_code == 1
    assert "overflow" in result.output


def test_cli_bits_msb(runner: CliRunner):
    result = runner.invoke(cli, ["bits", "msb", str(2**128)])
    assert result.exit_code == 0
    assert result.output.strip() == "128"

    result = runner.invoke(cli, ["bits", "msb", "0"])
    assert result.exit_code == 1
    assert "Zero" in result.output


def test_cli_config_show_toml(runner: CliRunner):
    result = runner.invoke(cli, ["config", "show", "--toml"])
    assert result.exit_code == 0
    assert "cache_size = " in result.output


def test_cli_config_show_rejects_both_formats(runner: CliRunner):
    result = runner.invoke(cli, ["config", "show", "--json", "--toml"])
    assert result.exit_code == 2
    assert "mutually exclusive" in result.output
