"""
Recursive Butterfly Core

Radix-2 decimation-in-time recursion:

    1. split the input into even- and odd-indexed halves (length M = N/2)
    2. transform each half
    3. merge with the butterfly, for k = 0..M-1
           Q          = Odds[k] * Z_k
           Out[k]     = Evens[k] + Q
           Out[k + M] = Evens[k] - Q
       Z_k = cos(pi k/M) - i sin(pi k/M)  (forward)
       Z_k = cos(pi k/M) + i sin(pi k/M)  (inverse)

Four variants share this shape:

    fft_complex     complex in  -> complex out
    fft_real_input  real in     -> complex out   both halves stay real
    ifft_complex    complex in  -> complex out
    ifft_real_output complex in -> real out      evens real-only, odds full

Each level allocates fresh output buffers. Inputs are assumed validated
float64 arrays; see engine.py for the public entry points.

`unrolled` selects the closed-form N <= 8 arms from base_cases.py.
Without them every variant recurses down to N = 1.
"""

from typing import Tuple

import numpy as np

from . import base_cases
from .twiddle import TwiddleCache

Pair = Tuple[np.ndarray, np.ndarray]


def _merge(re_e: np.ndarray, im_e: np.ndarray,
           re_o: np.ndarray, im_o: np.ndarray,
           re_z: np.ndarray, im_z: np.ndarray) -> Pair:
    """Butterfly merge of two length-M spectra into one of length 2M."""
    re_q = re_o * re_z - im_o * im_z
    im_q = re_o * im_z + im_o * re_z
    return (np.concatenate((re_e + re_q, re_e - re_q)),
            np.concatenate((im_e + im_q, im_e - im_q)))


def _base_limit(unrolled: bool) -> int:
    return 8 if unrolled else 1


# =============================================================================
# FORWARD
# =============================================================================

def fft_complex(re: np.ndarray, im: np.ndarray,
                cache: TwiddleCache, unrolled: bool = True) -> Pair:
    """Forward transform of a complex signal."""
    N = len(re)
    if N <= _base_limit(unrolled):
        return base_cases.FORWARD[N](re, im)

    # Both halves carry imaginary data: full complex recursion
    re_e, im_e = fft_complex(re[0::2], im[0::2], cache, unrolled)
    re_o, im_o = fft_complex(re[1::2], im[1::2], cache, unrolled)

    cosines, sines = cache.get(N >> 1)
    return _merge(re_e, im_e, re_o, im_o, cosines, -sines)


def fft_real_input(re: np.ndarray,
                   cache: TwiddleCache, unrolled: bool = True) -> Pair:
    """Forward transform of a signal with zero imaginary part."""
    N = len(re)
    if N <= _base_limit(unrolled):
        return base_cases.FORWARD_REAL[N](re)

    # Even and odd samples of a real signal are real: cheap path for both
    re_e, im_e = fft_real_input(re[0::2], cache, unrolled)
    re_o, im_o = fft_real_input(re[1::2], cache, unrolled)

    cosines, sines = cache.get(N >> 1)
    return _merge(re_e, im_e, re_o, im_o, cosines, -sines)


# =============================================================================
# INVERSE
# =============================================================================

def ifft_complex(re: np.ndarray, im: np.ndarray,
                 cache: TwiddleCache, unrolled: bool = True) -> Pair:
    """Unnormalized inverse transform, complex output."""
    N = len(re)
    if N <= _base_limit(unrolled):
        return base_cases.INVERSE[N](re, im)

    re_e, im_e = ifft_complex(re[0::2], im[0::2], cache, unrolled)
    re_o, im_o = ifft_complex(re[1::2], im[1::2], cache, unrolled)

    cosines, sines = cache.get(N >> 1)
    return _merge(re_e, im_e, re_o, im_o, cosines, sines)


def ifft_real_output(re: np.ndarray, im: np.ndarray,
                     cache: TwiddleCache, unrolled: bool = True) -> np.ndarray:
    """
    Real component of the unnormalized inverse transform.

    Out[k] only reads Re(Evens[k]) and all of Odds[k]:

        Re(Out[k]) = Re(E_k) + Re(O_k) cos - Im(O_k) sin

    so the even half may drop its imaginary output but the odd half
    must not. Recursing the odd half through this function would feed
    zeros where Im(O_k) is required.
    """
    N = len(re)
    if N <= _base_limit(unrolled):
        return base_cases.INVERSE_REAL[N](re, im)

    # Imaginary part of the evens is never read: real-only recursion
    re_e = ifft_real_output(re[0::2], im[0::2], cache, unrolled)
    # Imaginary part of the odds feeds the rotation below: full recursion
    re_o, im_o = ifft_complex(re[1::2], im[1::2], cache, unrolled)

    cosines, sines = cache.get(N >> 1)
    re_q = re_o * cosines - im_o * sines
    return np.concatenate((re_e + re_q, re_e - re_q))
