def evm_divide(numerator: int, denominator: int) -> int:
    """
    Perform integer division, rounding towards zero to match the EVM behavior.
    """
    return -(-numerator // denominator) if numerator < 0 else numerator // denominator


def div_rounding_up(numerator: int, denominator: int) -> int:
    """
    Perform integer division of non-negative values, rounding up if any remainder exists.
    """
    quotient, remainder = divmod(numerator, denominator)
    return quotient + (0 if remainder == 0 else 1)


def mul_shift(value: int, multiplier: int, shift: int = 128) -> int:
    """
    Multiply two fixed-point values and rescale the product by discarding the low `shift` bits.
    """
    return (value * multiplier) >> shift
