import functools

from clmath.bit_math import most_significant_bit
from clmath.config import settings
from clmath.constants import MAX_UINT256, Q32, Q128
from clmath.exceptions import DomainError, DomainErrorKind
from clmath.functions import div_rounding_up, mul_shift
from clmath.logging import logger
from clmath.types import SqrtPriceX96, Tick

MIN_TICK = -887272
MAX_TICK = -MIN_TICK
MIN_SQRT_RATIO = 4295128739
MAX_SQRT_RATIO = 1461446703485210103287273052203988822378723970342

# Q128.128 seed values for the ratio: sqrt(1.0001)^-1 when the lowest tick bit is set, else 1.0
ODD_TICK_SEED_RATIO = 0xFFFCB933BD6FAD37AA2D162D1A594001
EVEN_TICK_SEED_RATIO = Q128

# Each multiplier is sqrt(1.0001)^(-mask) in Q128.128 form, applied when that tick bit is set
RATIO_MULTIPLIERS: tuple[tuple[int, int], ...] = (
    (0x2, 0xFFF97272373D413259A46990580E213A),
    (0x4, 0xFFF2E50F5F656932EF12357CF3C7FDCC),
    (0x8, 0xFFE5CACA7E10E4E61C3624EAA0941CD0),
    (0x10, 0xFFCB9843D60F6159C9DB58835C926644),
    (0x20, 0xFF973B41FA98C081472E6896DFB254C0),
    (0x40, 0xFF2EA16466C96A3843EC78B326B52861),
    (0x80, 0xFE5DEE046A99A2A811C461F1969C3053),
    (0x100, 0xFCBE86C7900A88AEDCFFC83B479AA3A4),
    (0x200, 0xF987A7253AC413176F2B074CF7815E54),
    (0x400, 0xF3392B0822B70005940C7A398E4B70F3),
    (0x800, 0xE7159475A2C29B7443B29C7FA6E889D9),
    (0x1000, 0xD097F3BDFD2022B8845AD8F792AA5825),
    (0x2000, 0xA9F746462D870FDF8A65DC1F90E061E5),
    (0x4000, 0x70D869A156D2A1B890BB3DF62BAF32F7),
    (0x8000, 0x31BE135F97D08FD981231505542FCFA6),
    (0x10000, 0x9AA508B5B7A84E1C677DE54F3E99BC9),
    (0x20000, 0x5D6AF8DEDB81196699C329225EE604),
    (0x40000, 0x2216E584F5FA1EA926041BEDFE98),
    (0x80000, 0x48A170391F7DC42444E8FA2),
)

# Reciprocal of log2(sqrt(1.0001)), converts a Q64.64 log2 value into a Q128.128
# log_sqrt10001 value
LOG_SQRT10001_MULTIPLIER = 255738958999603826347141

# Number of fractional bits refined by repeated squaring when approximating log2
LOG2_PRECISION_ITERATIONS = 14

# Magic number represents the minimum value of the error when approximating log_sqrt10001(x),
# when sqrtPrice is from the range (2^-64, 2^64). This is safe as MIN_SQRT_RATIO is more than
# 2^-64. If MIN_SQRT_RATIO is changed, this may need to be changed too
MIN_ERROR = 291339464771989622907027621153398088495

# Magic number represents the ceiling of the maximum value of the error when
# approximating log_sqrt10001(x)
MAX_ERROR = 3402992956809132418596140100660247210


@functools.lru_cache(maxsize=settings.cache_size)
def get_sqrt_ratio_at_tick(tick: Tick) -> SqrtPriceX96:
    """
    Find the square root ratio in Q64.96 form for the given tick.
    """

    if not (MIN_TICK <= tick <= MAX_TICK):
        raise DomainError(kind=DomainErrorKind.TICK_OUT_OF_RANGE, value=tick)

    abs_tick = abs(tick)

    ratio = ODD_TICK_SEED_RATIO if abs_tick & 0x1 != 0 else EVEN_TICK_SEED_RATIO
    for tick_mask, ratio_multiplier in RATIO_MULTIPLIERS:
        if abs_tick & tick_mask != 0:
            ratio = mul_shift(ratio, ratio_multiplier)

    if tick > 0:
        ratio = MAX_UINT256 // ratio

    # Divide by 1<<32, rounding up, to go from a Q128.128 to a Q64.96. We round up in the division
    # so get_tick_at_sqrt_ratio of the output price is always consistent.
    return div_rounding_up(ratio, Q32)


@functools.lru_cache(maxsize=settings.cache_size)
def get_tick_at_sqrt_ratio(sqrt_price_x96: SqrtPriceX96) -> Tick:
    """
    Calculates the greatest tick value such that get_sqrt_ratio_at_tick(tick) <= sqrt_price_x96
    """

    if not (MIN_SQRT_RATIO <= sqrt_price_x96 < MAX_SQRT_RATIO):
        raise DomainError(kind=DomainErrorKind.SQRT_PRICE_OUT_OF_RANGE, value=sqrt_price_x96)

    ratio = sqrt_price_x96 * Q32
    msb = most_significant_bit(ratio)

    # Normalize so the most significant bit sits at position 127
    r = ratio >> msb - 127 if msb >= 128 else ratio << 127 - msb  # noqa: PLR2004

    log_2 = (msb - 128) << 64
    for i in range(LOG2_PRECISION_ITERATIONS):
        r = (r * r) >> 127
        f = r >> 128
        log_2 |= f << (63 - i)
        r >>= f

    log_sqrt10001 = log_2 * LOG_SQRT10001_MULTIPLIER  # 128.128 number

    tick_low = (log_sqrt10001 - MAX_ERROR) >> 128
    tick_high = (log_sqrt10001 + MIN_ERROR) >> 128

    if tick_low == tick_high:
        return tick_low

    logger.debug(
        f"Candidate ticks {tick_low} and {tick_high} differ for {sqrt_price_x96}, "
        "checking the upper tick."
    )
    return tick_high if get_sqrt_ratio_at_tick(tick_high) <= sqrt_price_x96 else tick_low
