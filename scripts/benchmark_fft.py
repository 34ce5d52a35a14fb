#!/usr/bin/env python3
"""
Benchmark: Radix-2 Transforms with and without a Warm Twiddle Cache

Measures per-call latency of:
1. Forward (complex input)
2. Inverse (complex output)
3. Forward, imaginary part omitted (real-input path)
4. Inverse, real output only

Suites:
- Empty 1024:            fixed N = 1024, cache warmed beforehand
- Empty 1024 (no cache): fixed N = 1024, cache reset before every call
- Random power of two:   N drawn from 2^11..2^14, cache warmed beforehand

Also reports the max error against scipy.fft for each operation.
"""

import sys
import time
from pathlib import Path
from typing import Callable, Dict, List

import numpy as np
import scipy.fft

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pow2fft import FFTEngine, EngineConfig


OPERATIONS = ["Forward", "Inverse", "Forward no imaginary", "Inverse real result"]


# =============================================================================
# Workloads
# =============================================================================

def make_calls(engine: FFTEngine) -> Dict[str, Callable]:
    return {
        "Forward": lambda re, im: engine.fft(re, im),
        "Inverse": lambda re, im: engine.ifft(re, im),
        "Forward no imaginary": lambda re, im: engine.fft(re),
        "Inverse real result": lambda re, im: engine.ifft_real(re, im),
    }


def random_data(rng: np.random.Generator, N: int):
    return rng.uniform(-1, 1, N), rng.uniform(-1, 1, N)


def time_calls(call: Callable, inputs: List, before: Callable = None) -> float:
    """Mean milliseconds per call."""
    total = 0.0
    for re, im in inputs:
        if before is not None:
            before()
        start = time.perf_counter()
        call(re, im)
        total += time.perf_counter() - start
    return 1000.0 * total / len(inputs)


def max_error(engine: FFTEngine, rng: np.random.Generator, N: int) -> Dict[str, float]:
    re, im = random_data(rng, N)
    x = re + 1j * im
    forward = scipy.fft.fft(x)
    forward_real = scipy.fft.fft(re)
    inverse = scipy.fft.ifft(x) * N

    out = {}
    got = engine.fft(re, im)
    out["Forward"] = np.abs(got[0] + 1j * got[1] - forward).max()
    got = engine.ifft(re, im)
    out["Inverse"] = np.abs(got[0] + 1j * got[1] - inverse).max()
    got = engine.fft(re)
    out["Forward no imaginary"] = np.abs(got[0] + 1j * got[1] - forward_real).max()
    out["Inverse real result"] = np.abs(engine.ifft_real(re, im) - inverse.real).max()
    return out


# =============================================================================
# Suites
# =============================================================================

def run_benchmarks(config: EngineConfig, repeats: int = 200, seed: int = 42) -> Dict:
    rng = np.random.default_rng(seed)
    engine = FFTEngine(config)
    calls = make_calls(engine)
    results = {}

    print("=" * 72)
    print(f"Engine: strategy={config.twiddle_strategy} "
          f"unrolled={config.unrolled_base_cases}  repeats={repeats}")
    print("=" * 72)

    # Empty 1024, warm cache
    zeros = [(np.zeros(1024), np.zeros(1024))] * repeats
    for call in calls.values():
        call(*zeros[0])
    results["Empty 1024"] = {
        name: time_calls(call, zeros) for name, call in calls.items()
    }

    # Empty 1024, cold cache on every call
    results["Empty 1024 (no cache)"] = {
        name: time_calls(call, zeros, before=engine.reset_cache)
        for name, call in calls.items()
    }

    # Random sizes, warm cache
    for n in range(1, 16):
        engine.fft(np.zeros(1 << n), np.zeros(1 << n))
    sizes = 1 << rng.integers(11, 15, size=repeats)
    inputs = [random_data(rng, int(N)) for N in sizes]
    results["Random power of two"] = {
        name: time_calls(call, inputs) for name, call in calls.items()
    }

    results["max error (N=4096)"] = max_error(engine, rng, 4096)
    return results


def print_summary(results: Dict):
    header = f"{'suite':<24}" + "".join(f"{op:>12}" for op in ["fwd", "inv", "fwd-real", "inv-real"])
    print(header)
    print("-" * len(header))
    for suite, row in results.items():
        if suite.startswith("max error"):
            cells = "".join(f"{row[op]:>12.2e}" for op in OPERATIONS)
        else:
            cells = "".join(f"{row[op]:>10.3f}ms" for op in OPERATIONS)
        print(f"{suite:<24}{cells}")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Radix-2 FFT benchmark")
    parser.add_argument('--repeats', type=int, default=200, help='Calls per measurement')
    parser.add_argument('--seed', type=int, default=42, help='Random seed')
    parser.add_argument('--strategy', type=str, default='halving', choices=['halving', 'direct'],
                        help='Twiddle table construction')
    parser.add_argument('--no-unrolled', action='store_true', help='Disable N <= 8 closed forms')
    parser.add_argument('--config', type=str, default=None, help='Load EngineConfig from JSON')
    args = parser.parse_args()

    if args.config:
        config = EngineConfig.load(args.config)
    else:
        config = EngineConfig(twiddle_strategy=args.strategy,
                              unrolled_base_cases=not args.no_unrolled)

    results = run_benchmarks(config, repeats=args.repeats, seed=args.seed)
    print_summary(results)
