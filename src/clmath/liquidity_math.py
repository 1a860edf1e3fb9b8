from clmath.constants import MAX_UINT128, MIN_UINT128
from clmath.exceptions import LiquidityOverflowError, LiquidityUnderflowError
from clmath.types import Liquidity, LiquidityDelta


def add_delta(x: Liquidity, y: LiquidityDelta) -> Liquidity:
    """
    Add a signed liquidity delta to a liquidity value, checking that the result fits in a uint128
    instead of wrapping.
    """

    if x > MAX_UINT128 or y > MAX_UINT128:
        raise LiquidityOverflowError(x=x, y=y)
    if x < MIN_UINT128:
        raise LiquidityUnderflowError(x=x, y=y)

    if y < 0:
        if -y > x:
            raise LiquidityUnderflowError(x=x, y=y)
        return x - abs(y)

    if x + y > MAX_UINT128:
        raise LiquidityOverflowError(x=x, y=y)
    return x + y
