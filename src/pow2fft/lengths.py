"""
Length Validation

Every transform input must hold exactly 2^n samples. These helpers
run before any arithmetic so a bad call never produces partial output.
"""

from typing import Sized

from .errors import InvalidLength, LengthMismatch


def ceil_pow2(x: int) -> int:
    """
    Smallest power of two greater than or equal to x.

    Args:
        x: Positive integer

    Returns:
        2**n such that x <= 2**n
    """
    if isinstance(x, bool) or not isinstance(x, int):
        # numpy integers expose __index__
        try:
            x = x.__index__()
        except AttributeError:
            raise TypeError(f"Expected an integer, got {type(x).__name__}") from None
    if x < 1:
        raise InvalidLength(x)
    return 1 << (x - 1).bit_length()


def is_pow2(n: int) -> bool:
    """True iff n is 1, 2, 4, 8, ..."""
    return n >= 1 and (n & (n - 1)) == 0


def check_length(n: int) -> int:
    """Raise InvalidLength unless n is a power of two."""
    if n < 1 or n != ceil_pow2(n):
        raise InvalidLength(n)
    return n


def check_pair(real: Sized, imag: Sized) -> int:
    """
    Validate a real/imaginary buffer pair.

    The real length is checked first, then the pairing.

    Returns:
        N, the common length
    """
    n = check_length(len(real))
    if len(imag) != n:
        raise LengthMismatch(n, len(imag))
    return n
