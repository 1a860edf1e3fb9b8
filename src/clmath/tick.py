from pydantic import validate_call

from clmath.constants import MAX_UINT128
from clmath.functions import evm_divide
from clmath.tick_math import MAX_TICK, MIN_TICK
from clmath.types import Liquidity, Tick
from clmath.validation.evm_values import ValidatedTickSpacing


@validate_call
def get_min_usable_tick(tick_spacing: ValidatedTickSpacing) -> Tick:
    """
    Find the lowest tick that is a multiple of the tick spacing and within the tick range.
    """
    return evm_divide(MIN_TICK, tick_spacing) * tick_spacing


@validate_call
def get_max_usable_tick(tick_spacing: ValidatedTickSpacing) -> Tick:
    """
    Find the highest tick that is a multiple of the tick spacing and within the tick range.
    """
    return (MAX_TICK // tick_spacing) * tick_spacing


@validate_call
def tick_spacing_to_max_liquidity_per_tick(tick_spacing: ValidatedTickSpacing) -> Liquidity:
    """
    Derive the maximum liquidity per tick from the given tick spacing, such that the liquidity
    summed over every usable tick cannot exceed the maximum uint128 value.
    """

    min_tick = get_min_usable_tick(tick_spacing)
    max_tick = get_max_usable_tick(tick_spacing)
    num_ticks = (max_tick - min_tick) // tick_spacing + 1
    return MAX_UINT128 // num_ticks
