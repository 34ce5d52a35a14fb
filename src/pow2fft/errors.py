"""
Transform Errors

Both error kinds subclass ValueError so callers that already catch
ValueError for bad arguments keep working.
"""


class InvalidLength(ValueError):
    """Buffer length is not an exact power of two (N = 0 included)."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Length must be a power of two, got {length}")


class LengthMismatch(ValueError):
    """Real and imaginary buffers have different lengths."""

    def __init__(self, real_length: int, imag_length: int):
        self.real_length = real_length
        self.imag_length = imag_length
        super().__init__(
            f"Must have an equal number of real and imaginary components "
            f"({real_length} != {imag_length})"
        )
