from clmath.constants import MAX_UINT256, MIN_UINT256
from clmath.exceptions import DomainError, DomainErrorKind

# Binary search table for the most significant bit, ordered by descending exponent
POWERS_OF_2: tuple[tuple[int, int], ...] = tuple(
    (exponent, 2**exponent) for exponent in (128, 64, 32, 16, 8, 4, 2, 1)
)


def most_significant_bit(number: int) -> int:
    """
    Find the most significant bit for the given number.

    The search halves the candidate range at each step: when the remaining value is at least
    2**i, it is floor-divided by 2**i and i is added to the result. After the final step the
    remaining value is 0 or 1.
    """

    if number <= MIN_UINT256:
        raise DomainError(kind=DomainErrorKind.ZERO, value=number)
    if number > MAX_UINT256:
        raise DomainError(kind=DomainErrorKind.TOO_LARGE, value=number)

    msb = 0
    for exponent, power in POWERS_OF_2:
        if number >= power:
            number //= power
            msb += exponent
    return msb
