from .config import settings
from .logging import logger
from .version import __version__

# isort: split

from .bit_math import most_significant_bit
from .constants import MAX_UINT128, MAX_UINT256, Q32, Q96, Q128
from .exceptions import (
    ClmathError,
    DomainError,
    DomainErrorKind,
    LiquidityOverflowError,
    LiquidityUnderflowError,
)
from .liquidity_math import add_delta
from .tick import (
    get_max_usable_tick,
    get_min_usable_tick,
    tick_spacing_to_max_liquidity_per_tick,
)
from .tick_math import (
    MAX_SQRT_RATIO,
    MAX_TICK,
    MIN_SQRT_RATIO,
    MIN_TICK,
    get_sqrt_ratio_at_tick,
    get_tick_at_sqrt_ratio,
)

__all__ = (
    "MAX_SQRT_RATIO",
    "MAX_TICK",
    "MAX_UINT128",
    "MAX_UINT256",
    "MIN_SQRT_RATIO",
    "MIN_TICK",
    "Q32",
    "Q96",
    "Q128",
    "ClmathError",
    "DomainError",
    "DomainErrorKind",
    "LiquidityOverflowError",
    "LiquidityUnderflowError",
    "__version__",
    "add_delta",
    "bit_math",
    "constants",
    "exceptions",
    "functions",
    "get_max_usable_tick",
    "get_min_usable_tick",
    "get_sqrt_ratio_at_tick",
    "get_tick_at_sqrt_ratio",
    "liquidity_math",
    "logger",
    "most_significant_bit",
    "settings",
    "tick",
    "tick_math",
    "tick_spacing_to_max_liquidity_per_tick",
    "validation",
)
