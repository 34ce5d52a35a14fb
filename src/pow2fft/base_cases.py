"""
Unrolled Base Cases (N = 1, 2, 4, 8)

Closed-form expansions of the radix-2 recursion for the smallest sizes.
They produce the same values as the generic path without recursive calls
or twiddle lookups. The 45-degree rotations at N = 8 use the exact
double nearest to sqrt(2)/2.

Four families, one per recursion variant:
    FORWARD       complex in  -> complex out   e^{-i...}
    FORWARD_REAL  real in     -> complex out   e^{-i...}
    INVERSE       complex in  -> complex out   e^{+i...}
    INVERSE_REAL  complex in  -> real out      e^{+i...}
"""

from typing import Callable, Dict, Tuple

import numpy as np


SQRT_HALF = 0.7071067811865475  # sqrt(2) / 2

Pair = Tuple[np.ndarray, np.ndarray]


def _f64(*values) -> np.ndarray:
    return np.array(values, dtype=np.float64)


# =============================================================================
# FORWARD: complex input
# =============================================================================

def fft1(re: np.ndarray, im: np.ndarray) -> Pair:
    return _f64(re[0]), _f64(im[0])


def fft2(re: np.ndarray, im: np.ndarray) -> Pair:
    r0, r1 = re
    i0, i1 = im
    return _f64(r0 + r1, r0 - r1), _f64(i0 + i1, i0 - i1)


def fft4(re: np.ndarray, im: np.ndarray) -> Pair:
    r0, r1, r2, r3 = re
    i0, i1, i2, i3 = im
    return (
        _f64(r0 + r1 + r2 + r3,
             r0 + i1 - r2 - i3,
             r0 - r1 + r2 - r3,
             r0 - i1 - r2 + i3),
        _f64(i0 + i1 + i2 + i3,
             i0 - r1 - i2 + r3,
             i0 - i1 + i2 - i3,
             i0 + r1 - i2 - r3),
    )


def fft8(re: np.ndarray, im: np.ndarray) -> Pair:
    r0, r1, r2, r3, r4, r5, r6, r7 = re
    i0, i1, i2, i3, i4, i5, i6, i7 = im
    out_re = np.empty(8, dtype=np.float64)
    out_im = np.empty(8, dtype=np.float64)

    # k = 0
    re_e = r0 + r2 + r4 + r6
    im_e = i0 + i2 + i4 + i6
    re_o = r1 + r3 + r5 + r7
    im_o = i1 + i3 + i5 + i7
    out_re[0] = re_e + re_o
    out_im[0] = im_e + im_o
    out_re[4] = re_e - re_o
    out_im[4] = im_e - im_o

    # k = 1: rotate odds by e^{-i pi/4}
    re_e = r0 + i2 - r4 - i6
    im_e = i0 - r2 - i4 + r6
    re_o = r1 + i3 - r5 - i7
    im_o = i1 - r3 - i5 + r7
    re_q = (re_o + im_o) * SQRT_HALF
    im_q = (re_o - im_o) * SQRT_HALF
    out_re[1] = re_e + re_q
    out_im[1] = im_e - im_q
    out_re[5] = re_e - re_q
    out_im[5] = im_e + im_q

    # k = 2: rotate odds by -i
    re_e = r0 - r2 + r4 - r6
    im_e = i0 - i2 + i4 - i6
    re_o = r1 - r3 + r5 - r7
    im_o = i1 - i3 + i5 - i7
    out_re[2] = re_e + im_o
    out_im[2] = im_e - re_o
    out_re[6] = re_e - im_o
    out_im[6] = im_e + re_o

    # k = 3: rotate odds by e^{-3i pi/4}
    re_e = r0 - i2 - r4 + i6
    im_e = i0 + r2 - i4 - r6
    re_o = r1 - i3 - r5 + i7
    im_o = i1 + r3 - i5 - r7
    re_q = (re_o - im_o) * SQRT_HALF
    im_q = (re_o + im_o) * SQRT_HALF
    out_re[3] = re_e - re_q
    out_im[3] = im_e - im_q
    out_re[7] = re_e + re_q
    out_im[7] = im_e + im_q

    return out_re, out_im


# =============================================================================
# FORWARD: real input (imaginary input is identically zero)
# =============================================================================

def fft_real1(re: np.ndarray) -> Pair:
    return _f64(re[0]), np.zeros(1)


def fft_real2(re: np.ndarray) -> Pair:
    r0, r1 = re
    return _f64(r0 + r1, r0 - r1), np.zeros(2)


def fft_real4(re: np.ndarray) -> Pair:
    r0, r1, r2, r3 = re
    return (
        _f64(r0 + r1 + r2 + r3, r0 - r2, r0 - r1 + r2 - r3, r0 - r2),
        _f64(0.0, r3 - r1, 0.0, r1 - r3),
    )


def fft_real8(re: np.ndarray) -> Pair:
    r0, r1, r2, r3, r4, r5, r6, r7 = re
    out_re = np.empty(8, dtype=np.float64)
    out_im = np.zeros(8, dtype=np.float64)

    re_e = r0 + r2 + r4 + r6
    re_o = r1 + r3 + r5 + r7
    out_re[0] = re_e + re_o
    out_re[4] = re_e - re_o

    re_e = r0 - r4
    im_e = r6 - r2
    re_o = r1 - r5
    im_o = r7 - r3
    re_q = (re_o + im_o) * SQRT_HALF
    im_q = (re_o - im_o) * SQRT_HALF
    out_re[1] = re_e + re_q
    out_im[1] = im_e - im_q
    out_re[5] = re_e - re_q
    out_im[5] = im_e + im_q

    re_e = r0 - r2 + r4 - r6
    re_o = r1 - r3 + r5 - r7
    out_re[2] = re_e
    out_im[2] = -re_o
    out_re[6] = re_e
    out_im[6] = re_o

    re_e = r0 - r4
    im_e = r2 - r6
    re_o = r1 - r5
    im_o = r3 - r7
    re_q = (re_o - im_o) * SQRT_HALF
    im_q = (re_o + im_o) * SQRT_HALF
    out_re[3] = re_e - re_q
    out_im[3] = im_e - im_q
    out_re[7] = re_e + re_q
    out_im[7] = im_e + im_q

    return out_re, out_im


# =============================================================================
# INVERSE: complex output (conjugate rotations)
# =============================================================================

def ifft1(re: np.ndarray, im: np.ndarray) -> Pair:
    return _f64(re[0]), _f64(im[0])


def ifft2(re: np.ndarray, im: np.ndarray) -> Pair:
    r0, r1 = re
    i0, i1 = im
    return _f64(r0 + r1, r0 - r1), _f64(i0 + i1, i0 - i1)


def ifft4(re: np.ndarray, im: np.ndarray) -> Pair:
    r0, r1, r2, r3 = re
    i0, i1, i2, i3 = im
    return (
        _f64(r0 + r1 + r2 + r3,
             r0 - i1 - r2 + i3,
             r0 - r1 + r2 - r3,
             r0 + i1 - r2 - i3),
        _f64(i0 + i1 + i2 + i3,
             i0 + r1 - i2 - r3,
             i0 - i1 + i2 - i3,
             i0 - r1 - i2 + r3),
    )


def ifft8(re: np.ndarray, im: np.ndarray) -> Pair:
    r0, r1, r2, r3, r4, r5, r6, r7 = re
    i0, i1, i2, i3, i4, i5, i6, i7 = im
    out_re = np.empty(8, dtype=np.float64)
    out_im = np.empty(8, dtype=np.float64)

    re_e = r0 + r2 + r4 + r6
    im_e = i0 + i2 + i4 + i6
    re_o = r1 + r3 + r5 + r7
    im_o = i1 + i3 + i5 + i7
    out_re[0] = re_e + re_o
    out_im[0] = im_e + im_o
    out_re[4] = re_e - re_o
    out_im[4] = im_e - im_o

    # k = 1: rotate odds by e^{+i pi/4}
    re_e = r0 - i2 - r4 + i6
    im_e = i0 + r2 - i4 - r6
    re_o = r1 - i3 - r5 + i7
    im_o = i1 + r3 - i5 - r7
    re_q = (re_o - im_o) * SQRT_HALF
    im_q = (re_o + im_o) * SQRT_HALF
    out_re[1] = re_e + re_q
    out_im[1] = im_e + im_q
    out_re[5] = re_e - re_q
    out_im[5] = im_e - im_q

    # k = 2: rotate odds by +i
    re_e = r0 - r2 + r4 - r6
    im_e = i0 - i2 + i4 - i6
    re_o = r1 - r3 + r5 - r7
    im_o = i1 - i3 + i5 - i7
    out_re[2] = re_e - im_o
    out_im[2] = im_e + re_o
    out_re[6] = re_e + im_o
    out_im[6] = im_e - re_o

    # k = 3: rotate odds by e^{+3i pi/4}
    re_e = r0 + i2 - r4 - i6
    im_e = i0 - r2 - i4 + r6
    re_o = r1 + i3 - r5 - i7
    im_o = i1 - r3 - i5 + r7
    re_q = (re_o + im_o) * SQRT_HALF
    im_q = (re_o - im_o) * SQRT_HALF
    out_re[3] = re_e - re_q
    out_im[3] = im_e + im_q
    out_re[7] = re_e + re_q
    out_im[7] = im_e - im_q

    return out_re, out_im


# =============================================================================
# INVERSE: real output only
# =============================================================================

def ifft_real1(re: np.ndarray, im: np.ndarray) -> np.ndarray:
    return _f64(re[0])


def ifft_real2(re: np.ndarray, im: np.ndarray) -> np.ndarray:
    r0, r1 = re
    return _f64(r0 + r1, r0 - r1)


def ifft_real4(re: np.ndarray, im: np.ndarray) -> np.ndarray:
    r0, r1, r2, r3 = re
    _, i1, _, i3 = im
    return _f64(r0 + r1 + r2 + r3,
                r0 - i1 - r2 + i3,
                r0 - r1 + r2 - r3,
                r0 + i1 - r2 - i3)


def ifft_real8(re: np.ndarray, im: np.ndarray) -> np.ndarray:
    r0, r1, r2, r3, r4, r5, r6, r7 = re
    _, i1, i2, i3, _, i5, i6, i7 = im
    out = np.empty(8, dtype=np.float64)

    re_e = r0 + r2 + r4 + r6
    re_o = r1 + r3 + r5 + r7
    out[0] = re_e + re_o
    out[4] = re_e - re_o

    re_e = r0 - i2 - r4 + i6
    re_o = r1 - i3 - r5 + i7
    im_o = i1 + r3 - i5 - r7
    re_q = (re_o - im_o) * SQRT_HALF
    out[1] = re_e + re_q
    out[5] = re_e - re_q

    re_e = r0 - r2 + r4 - r6
    im_o = i1 - i3 + i5 - i7
    out[2] = re_e - im_o
    out[6] = re_e + im_o

    re_e = r0 + i2 - r4 - i6
    re_o = r1 + i3 - r5 - i7
    im_o = i1 - r3 - i5 + r7
    re_q = (re_o + im_o) * SQRT_HALF
    out[3] = re_e - re_q
    out[7] = re_e + re_q

    return out


# =============================================================================
# DISPATCH TABLES (keyed by N)
# =============================================================================

FORWARD: Dict[int, Callable] = {1: fft1, 2: fft2, 4: fft4, 8: fft8}
FORWARD_REAL: Dict[int, Callable] = {1: fft_real1, 2: fft_real2, 4: fft_real4, 8: fft_real8}
INVERSE: Dict[int, Callable] = {1: ifft1, 2: ifft2, 4: ifft4, 8: ifft8}
INVERSE_REAL: Dict[int, Callable] = {1: ifft_real1, 2: ifft_real2, 4: ifft_real4, 8: ifft_real8}
