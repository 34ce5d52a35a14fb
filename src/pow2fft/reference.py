"""
Naive DFT Oracle

Direct O(N^2) sums, valid for any N >= 1. Slow but obviously correct:
the radix-2 engine is checked against these.
"""

from typing import Optional, Sequence, Tuple

import numpy as np


def _dft(real, imag, sign: float) -> Tuple[np.ndarray, np.ndarray]:
    re = np.asarray(real, dtype=np.float64)
    im = np.zeros_like(re) if imag is None else np.asarray(imag, dtype=np.float64)
    N = len(re)
    k = np.arange(N)
    theta = sign * 2.0 * np.pi * np.outer(k, k) / N
    c, s = np.cos(theta), np.sin(theta)
    return c @ re - s @ im, c @ im + s @ re


def naive_dft(real: Sequence[float],
              imag: Optional[Sequence[float]] = None) -> Tuple[np.ndarray, np.ndarray]:
    """Out[k] = sum_j In[j] e^{-2 pi i j k / N}"""
    return _dft(real, imag, -1.0)


def naive_idft(real: Sequence[float],
               imag: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    """Out[k] = sum_j In[j] e^{+2 pi i j k / N}, unnormalized"""
    return _dft(real, imag, 1.0)
