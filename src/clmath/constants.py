__all__ = (
    "MAX_UINT128",
    "MAX_UINT160",
    "MAX_UINT256",
    "MIN_UINT128",
    "MIN_UINT160",
    "MIN_UINT256",
    "Q32",
    "Q96",
    "Q128",
)

import typing


def _min_uint(_: int) -> int:
    return 0


def _max_uint(bits: int) -> int:
    return typing.cast("int", 2**bits - 1)


MIN_UINT128 = _min_uint(128)
MAX_UINT128 = _max_uint(128)

MIN_UINT160 = _min_uint(160)
MAX_UINT160 = _max_uint(160)

MIN_UINT256 = _min_uint(256)
MAX_UINT256 = _max_uint(256)

# Fixed-point scale factors
Q32 = 1 << 32
Q96 = 1 << 96
Q128 = 1 << 128
