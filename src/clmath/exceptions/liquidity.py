from clmath.exceptions.base import ClmathError


class LiquidityMathError(ClmathError):
    """
    Exception raised inside liquidity math helpers.
    """

    def __init__(self, x: int, y: int, message: str) -> None:
        self.x = x
        self.y = y
        super().__init__(message=message)


class LiquidityOverflowError(LiquidityMathError):
    """
    The liquidity operand, the delta, or their sum exceeds the maximum uint128 value.
    """

    def __init__(self, x: int, y: int) -> None:
        super().__init__(x=x, y=y, message=f"Liquidity overflow: {x} + {y}")


class LiquidityUnderflowError(LiquidityMathError):
    """
    A negative delta would reduce the liquidity below zero.
    """

    def __init__(self, x: int, y: int) -> None:
        super().__init__(x=x, y=y, message=f"Liquidity underflow: {x} + {y}")
