"""
Transform Engine

Public entry points: validate, dispatch, return fresh buffers.

Usage:
    from pow2fft import fft, ifft, ifft_real

    re, im = fft(signal)              # real input
    re, im = fft(signal_re, signal_im)
    x_re, x_im = ifft(re, im)         # scaled by N
    x = ifft_real(re, im) / len(re)

All transforms are unnormalized: ifft(fft(x)) == N * x.
"""

from typing import Optional, Sequence, Tuple

import numpy as np

from . import core
from .config import EngineConfig
from .lengths import check_length, check_pair
from .twiddle import TwiddleCache, default_cache

Pair = Tuple[np.ndarray, np.ndarray]


def _as_buffer(values: Sequence[float], name: str) -> np.ndarray:
    # Complex input would be cast to its real part; real and imaginary
    # parts travel as separate buffers
    if np.iscomplexobj(values):
        raise ValueError(
            f"{name} must be real-valued; pass real and imaginary parts separately"
        )
    buf = np.asarray(values, dtype=np.float64)
    if buf.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {buf.shape}")
    return buf


class FFTEngine:
    """
    Radix-2 transform engine bound to one twiddle cache.

    Example:
        engine = FFTEngine(EngineConfig(unrolled_base_cases=False, verbose=True))
        re, im = engine.fft([1.0, 0.0, 0.0, 0.0])
        engine.reset_cache()

    Engines that share a cache share its tables. Without an explicit
    cache a private one is created with the configured strategy and
    verbosity. A cache passed in keeps its own strategy and verbosity;
    config.twiddle_strategy and config.verbose do not apply to its
    table builds.
    """

    def __init__(self,
                 config: Optional[EngineConfig] = None,
                 cache: Optional[TwiddleCache] = None):
        self.config = config or EngineConfig()
        if cache is None:
            cache = TwiddleCache(self.config.strategy, verbose=self.config.verbose)
        self.cache = cache
        if self.cache.strategy is not self.config.strategy:
            self._log(f"cache strategy {self.cache.strategy.value} overrides "
                      f"configured {self.config.twiddle_strategy}")

    def _log(self, msg: str):
        if self.config.verbose:
            print(f"[pow2fft] {msg}")

    @property
    def unrolled(self) -> bool:
        return self.config.unrolled_base_cases

    def fft(self, real: Sequence[float], imag: Optional[Sequence[float]] = None) -> Pair:
        """
        Unnormalized forward discrete Fourier transform.

        Args:
            real: Real components of the signal
            imag: Imaginary components (all zeros assumed if omitted)

        Returns:
            (real coefficients, imaginary coefficients)

        Raises:
            InvalidLength: len(real) is not a power of two
            LengthMismatch: imag given with a different length
        """
        re = _as_buffer(real, "real")
        if imag is None:
            N = check_length(len(re))
            self._log(f"fft N={N} (real input)")
            return core.fft_real_input(re, self.cache, self.unrolled)

        im = _as_buffer(imag, "imag")
        N = check_pair(re, im)
        self._log(f"fft N={N}")
        return core.fft_complex(re, im, self.cache, self.unrolled)

    def ifft(self, real: Sequence[float], imag: Sequence[float]) -> Pair:
        """
        Unnormalized inverse discrete Fourier transform.

        Args:
            real: Real coefficients of a forward transform
            imag: Imaginary coefficients of a forward transform

        Returns:
            (real signal, imaginary signal), scaled by N
        """
        re = _as_buffer(real, "real")
        im = _as_buffer(imag, "imag")
        N = check_pair(re, im)
        self._log(f"ifft N={N}")
        return core.ifft_complex(re, im, self.cache, self.unrolled)

    def ifft_real(self, real: Sequence[float], imag: Sequence[float]) -> np.ndarray:
        """
        Real part of the unnormalized inverse transform.

        Skips the imaginary output entirely; use it when the signal is
        known to be real. The result equals ifft(real, imag)[0] for any
        input, Hermitian or not.
        """
        re = _as_buffer(real, "real")
        im = _as_buffer(imag, "imag")
        N = check_pair(re, im)
        self._log(f"ifft_real N={N}")
        return core.ifft_real_output(re, im, self.cache, self.unrolled)

    def reset_cache(self):
        """Clear this engine's twiddle tables."""
        self.cache.reset()


# =============================================================================
# MODULE-LEVEL API (process-wide cache)
# =============================================================================

_DEFAULT_ENGINE = FFTEngine(cache=default_cache())


def default_engine() -> FFTEngine:
    """The engine behind fft / ifft / ifft_real."""
    return _DEFAULT_ENGINE


def fft(real: Sequence[float], imag: Optional[Sequence[float]] = None) -> Pair:
    """Unnormalized forward DFT. See FFTEngine.fft."""
    return _DEFAULT_ENGINE.fft(real, imag)


def ifft(real: Sequence[float], imag: Sequence[float]) -> Pair:
    """Unnormalized inverse DFT. See FFTEngine.ifft."""
    return _DEFAULT_ENGINE.ifft(real, imag)


def ifft_real(real: Sequence[float], imag: Sequence[float]) -> np.ndarray:
    """Real part of the unnormalized inverse DFT. See FFTEngine.ifft_real."""
    return _DEFAULT_ENGINE.ifft_real(real, imag)
