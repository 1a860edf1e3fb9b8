import enum

from clmath.exceptions.base import ClmathValueError


class DomainErrorKind(enum.Enum):
    ZERO = "Zero"
    TOO_LARGE = "TooLarge"
    TICK_OUT_OF_RANGE = "TickOutOfRange"
    SQRT_PRICE_OUT_OF_RANGE = "SqrtPriceOutOfRange"


class DomainError(ClmathValueError):
    """
    Raised when an input lies outside the valid range of a math function.

    The `kind` attribute identifies which range was violated, and `value` holds the rejected input.
    """

    def __init__(self, kind: DomainErrorKind, value: int) -> None:
        self.kind = kind
        self.value = value
        super().__init__(message=f"{kind.value}: {value}")
