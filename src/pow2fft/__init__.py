"""
pow2fft - Radix-2 Fourier Transforms with Cached Twiddles

Unnormalized DFT and inverse DFT for signals of length 2^n.

Features:
- Recursive Cooley-Tukey decimation-in-time
- Closed-form base cases for N = 1, 2, 4, 8
- Memoized, read-only twiddle tables shared across calls
- Real-input forward path and real-output inverse path

Quick Start:
    from pow2fft import fft, ifft, ifft_real

    signal = [1.0, 2.0, 3.0, 4.0]
    re, im = fft(signal)                   # imaginary part omitted -> zeros
    x_re, x_im = ifft(re, im)              # == 4 * signal
    x = ifft_real(re, im) / 4

Engines with their own settings and cache:
    from pow2fft import FFTEngine, EngineConfig

    engine = FFTEngine(EngineConfig(twiddle_strategy="direct", verbose=True))
    re, im = engine.fft(signal)

Errors:
    InvalidLength   length is not a power of two
    LengthMismatch  real and imaginary lengths differ
"""

__version__ = "0.1.0"

# =============================================================================
# TRANSFORMS
# =============================================================================

from .engine import (
    fft,
    ifft,
    ifft_real,
    FFTEngine,
    default_engine,
)

# =============================================================================
# LENGTHS & ERRORS
# =============================================================================

from .lengths import ceil_pow2, is_pow2, check_length, check_pair
from .errors import InvalidLength, LengthMismatch

# =============================================================================
# TWIDDLE CACHE
# =============================================================================

from .twiddle import (
    TwiddleCache,
    TwiddleStrategy,
    TwiddleTable,
    default_cache,
    get_twiddles,
    reset_twiddle_cache,
)

# =============================================================================
# CONFIG & ORACLE
# =============================================================================

from .config import EngineConfig
from .reference import naive_dft, naive_idft

__all__ = [
    "__version__",

    # Transforms
    "fft",
    "ifft",
    "ifft_real",
    "FFTEngine",
    "default_engine",

    # Lengths & errors
    "ceil_pow2",
    "is_pow2",
    "check_length",
    "check_pair",
    "InvalidLength",
    "LengthMismatch",

    # Twiddle cache
    "TwiddleCache",
    "TwiddleStrategy",
    "TwiddleTable",
    "default_cache",
    "get_twiddles",
    "reset_twiddle_cache",

    # Config & oracle
    "EngineConfig",
    "naive_dft",
    "naive_idft",
]
