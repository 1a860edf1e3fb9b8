from clmath.exceptions.base import ClmathError, ClmathValueError
from clmath.exceptions.domain import DomainError, DomainErrorKind
from clmath.exceptions.liquidity import (
    LiquidityMathError,
    LiquidityOverflowError,
    LiquidityUnderflowError,
)

from . import base, domain, liquidity

__all__ = (
    "ClmathError",
    "ClmathValueError",
    "DomainError",
    "DomainErrorKind",
    "LiquidityMathError",
    "LiquidityOverflowError",
    "LiquidityUnderflowError",
    "base",
    "domain",
    "liquidity",
)
