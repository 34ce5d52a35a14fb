"""
Twiddle Cache

Precomputed rotation tables for the butterfly merge stage.

For half-length M the table holds
    cosines[k] = cos(pi * k / M)
    sines[k]   = sin(pi * k / M)        k = 0..M-1
which is the twiddle W_{2M}^k = e^{-2 pi i k / 2M} used when two
length-M transforms are merged into one of length 2M. The forward
transform uses (cos, -sin), the inverse (cos, +sin).

Tables are built lazily, frozen, and reused for the life of the cache.
"""

import math
import threading
from enum import Enum
from typing import Dict, List, NamedTuple

import numpy as np

from .errors import InvalidLength
from .lengths import is_pow2


class TwiddleStrategy(Enum):
    """How a missing table is constructed."""
    DIRECT = "direct"      # cos/sin evaluated for every entry
    HALVING = "halving"    # reuse table M/2, evaluate sin once per odd pair


class TwiddleTable(NamedTuple):
    """Read-only cosine/sine rows for one half-length M."""
    cosines: np.ndarray
    sines: np.ndarray

    @property
    def size(self) -> int:
        return len(self.cosines)


def _freeze(cosines: np.ndarray, sines: np.ndarray) -> TwiddleTable:
    cosines.flags.writeable = False
    sines.flags.writeable = False
    return TwiddleTable(cosines, sines)


def build_direct(M: int) -> TwiddleTable:
    """Evaluate every entry with cos/sin."""
    angles = np.arange(M, dtype=np.float64) * (math.pi / M)
    return _freeze(np.cos(angles), np.sin(angles))


def build_halving(M: int, half: TwiddleTable) -> TwiddleTable:
    """
    Derive table M from table M/2.

    Even entries k = 2i are the half table's entry i. Odd entries come
    in symmetric pairs: for odd k < M/2

        sin(k) = sin(M - k) = cos(M/2 - k) = -cos(M/2 + k)

    (angles in units of pi/M), so one sin() call fills four slots.
    """
    L = M >> 1
    cosines = np.empty(M, dtype=np.float64)
    sines = np.empty(M, dtype=np.float64)
    cosines[0::2] = half.cosines
    sines[0::2] = half.sines

    odd = np.arange(1, L, 2)
    s = np.sin(odd * (math.pi / M))
    sines[odd] = s
    sines[M - odd] = s
    cosines[L - odd] = s
    cosines[L + odd] = -s
    return _freeze(cosines, sines)


# Seeds for the halving recursion; M = 2 has no odd entry below M/2.
_SEEDS = {
    1: ((1.0,), (0.0,)),
    2: ((1.0, 0.0), (0.0, 1.0)),
}


def _seed(M: int) -> TwiddleTable:
    cosines, sines = _SEEDS[M]
    return _freeze(np.array(cosines, dtype=np.float64),
                   np.array(sines, dtype=np.float64))


class TwiddleCache:
    """
    Memoized twiddle tables keyed by half-length M.

    The cache is a pure performance layer: a transform returns the same
    values whether its tables were just built or looked up.

    Example:
        cache = TwiddleCache()
        cosines, sines = cache.get(8)
        cache.reset()
    """

    def __init__(self,
                 strategy: TwiddleStrategy = TwiddleStrategy.HALVING,
                 verbose: bool = False):
        self.strategy = TwiddleStrategy(strategy)
        self.verbose = verbose
        self._tables: Dict[int, TwiddleTable] = {}
        self._lock = threading.Lock()

    def _log(self, msg: str):
        if self.verbose:
            print(f"[twiddle] {msg}")

    def get(self, M: int) -> TwiddleTable:
        """Table for half-length M, building it on first use."""
        table = self._tables.get(M)
        if table is not None:
            return table
        if not is_pow2(M):
            raise InvalidLength(M)
        with self._lock:
            return self._build(M)

    def _build(self, M: int) -> TwiddleTable:
        # Caller holds the lock
        table = self._tables.get(M)
        if table is not None:
            return table

        if M in _SEEDS:
            table = _seed(M)
        elif self.strategy is TwiddleStrategy.DIRECT:
            table = build_direct(M)
        else:
            table = build_halving(M, self._build(M >> 1))

        self._log(f"built M={M} ({self.strategy.value})")
        self._tables[M] = table
        return table

    def reset(self):
        """Drop every table. Later calls rebuild on demand."""
        with self._lock:
            self._tables.clear()
        self._log("reset")

    def sizes(self) -> List[int]:
        return sorted(self._tables)

    def __contains__(self, M: int) -> bool:
        return M in self._tables

    def __len__(self) -> int:
        return len(self._tables)


# =============================================================================
# PROCESS-WIDE CACHE
# =============================================================================

_DEFAULT_CACHE = TwiddleCache()


def default_cache() -> TwiddleCache:
    """The cache shared by the module-level transform functions."""
    return _DEFAULT_CACHE


def get_twiddles(M: int) -> TwiddleTable:
    """(cosines, sines) for half-length M from the shared cache."""
    return _DEFAULT_CACHE.get(M)


def reset_twiddle_cache():
    """Clear the shared cache. Affects latency only, never results."""
    _DEFAULT_CACHE.reset()
