class ClmathError(Exception):
    """
    Root of every exception raised by the math functions in this package.

    Input range violations raise `DomainError`, and checked liquidity arithmetic raises a subclass
    of `LiquidityMathError`. Both derive from this class, so a caller simulating a pool step can
    treat any `ClmathError` as a rejected operation:

    ```
    try:
        liquidity = clmath.add_delta(liquidity, liquidity_delta)
    except LiquidityUnderflowError:
        ... # burn exceeds the position
    except ClmathError:
        ... # any other rejected input
    ```

    The formatted message is kept on the `.message` attribute.
    """

    message: str | None = None

    def __init__(self, message: str | None = None) -> None:
        if message:
            self.message = message
            super().__init__(message)


class ClmathValueError(ClmathError): ...
