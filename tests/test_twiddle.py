"""
Twiddle Cache Tests

Verifies:
1. Tables hold cos(pi k / M) and sin(pi k / M)
2. Direct and halving construction agree
3. Tables are frozen and reused
4. Reset only drops tables, never changes transform results
"""

import math
from concurrent.futures import ThreadPoolExecutor

import pytest
import numpy as np

from pow2fft import (
    TwiddleCache,
    TwiddleStrategy,
    FFTEngine,
    InvalidLength,
    fft,
    ifft,
    ifft_real,
    get_twiddles,
    reset_twiddle_cache,
    default_cache,
)


def expected_table(M):
    angles = np.pi * np.arange(M) / M
    return np.cos(angles), np.sin(angles)


class TestTableValues:
    """Entries match the closed form for both strategies."""

    @pytest.mark.parametrize("strategy", list(TwiddleStrategy))
    @pytest.mark.parametrize("M", [1, 2, 4, 8, 16, 256, 4096])
    def test_matches_trig(self, strategy, M):
        cache = TwiddleCache(strategy)
        cosines, sines = cache.get(M)
        want_cos, want_sin = expected_table(M)

        assert len(cosines) == M
        assert len(sines) == M
        np.testing.assert_allclose(cosines, want_cos, rtol=0, atol=1e-14)
        np.testing.assert_allclose(sines, want_sin, rtol=0, atol=1e-14)

    def test_strategies_agree(self):
        direct = TwiddleCache(TwiddleStrategy.DIRECT)
        halving = TwiddleCache(TwiddleStrategy.HALVING)
        for M in [2**i for i in range(14)]:
            d, h = direct.get(M), halving.get(M)
            np.testing.assert_allclose(d.cosines, h.cosines, rtol=0, atol=1e-14)
            np.testing.assert_allclose(d.sines, h.sines, rtol=0, atol=1e-14)

    def test_quarter_turn_entries(self):
        """k = M/2 is the 90-degree rotation."""
        cosines, sines = TwiddleCache().get(8)
        assert sines[4] == 1.0
        assert abs(cosines[4]) < 1e-15
        assert cosines[0] == 1.0
        assert sines[0] == 0.0

    def test_45_degree_entry(self):
        cosines, sines = TwiddleCache().get(4)
        assert cosines[1] == pytest.approx(math.sqrt(0.5), abs=1e-15)
        assert sines[1] == pytest.approx(math.sqrt(0.5), abs=1e-15)


class TestCacheBehaviour:
    """Memoization, immutability, reset."""

    def test_reuses_table_object(self):
        cache = TwiddleCache()
        assert cache.get(64) is cache.get(64)

    def test_tables_are_read_only(self):
        cosines, sines = TwiddleCache().get(16)
        with pytest.raises(ValueError):
            cosines[1] = 2.0
        with pytest.raises(ValueError):
            sines[1] = 2.0

    def test_halving_builds_smaller_tables(self):
        cache = TwiddleCache(TwiddleStrategy.HALVING)
        cache.get(32)
        # Recursion stops at the M = 2 seed
        assert cache.sizes() == [2, 4, 8, 16, 32]

    @pytest.mark.parametrize("strategy", list(TwiddleStrategy))
    def test_smallest_table_on_request(self, strategy):
        cache = TwiddleCache(strategy)
        cosines, sines = cache.get(1)
        np.testing.assert_array_equal(cosines, [1.0])
        np.testing.assert_array_equal(sines, [0.0])
        assert cache.sizes() == [1]

    def test_direct_builds_only_requested(self):
        cache = TwiddleCache(TwiddleStrategy.DIRECT)
        cache.get(32)
        assert cache.sizes() == [32]
        assert 32 in cache
        assert 16 not in cache

    def test_reset_clears(self):
        cache = TwiddleCache()
        cache.get(128)
        assert len(cache) > 0
        cache.reset()
        assert len(cache) == 0
        assert cache.sizes() == []

    def test_rebuilt_table_is_equal(self):
        cache = TwiddleCache()
        first = cache.get(512)
        cache.reset()
        second = cache.get(512)
        assert first is not second
        np.testing.assert_array_equal(first.cosines, second.cosines)
        np.testing.assert_array_equal(first.sines, second.sines)

    @pytest.mark.parametrize("M", [0, 3, 6, -4])
    def test_rejects_bad_half_length(self, M):
        with pytest.raises(InvalidLength):
            TwiddleCache().get(M)

    def test_strategy_from_string(self):
        assert TwiddleCache("direct").strategy is TwiddleStrategy.DIRECT

    def test_verbose_reports_builds(self, capsys):
        cache = TwiddleCache(TwiddleStrategy.DIRECT, verbose=True)
        cache.get(8)
        cache.get(8)
        out = capsys.readouterr().out
        assert out.count("built M=8") == 1

    def test_concurrent_builds_share_one_table(self):
        cache = TwiddleCache()
        with ThreadPoolExecutor(max_workers=8) as pool:
            tables = list(pool.map(lambda _: cache.get(1024), range(32)))
        assert all(t is tables[0] for t in tables)


class TestSharedCache:
    """The module-level cache behind fft / ifft / ifft_real."""

    def test_get_twiddles_uses_shared_cache(self):
        reset_twiddle_cache()
        table = get_twiddles(16)
        assert 16 in default_cache()
        assert default_cache().get(16) is table

    def test_transforms_populate_shared_cache(self):
        reset_twiddle_cache()
        fft(np.ones(64))
        assert 32 in default_cache()

    def test_reset_never_changes_results(self):
        """Same inputs, same outputs, before and after a reset."""
        results = []
        for _ in range(3):
            reset_twiddle_cache()
            for N in [16, 128]:
                local = np.random.default_rng(N)
                re, im = local.standard_normal(N), local.standard_normal(N)
                results.append((N, fft(re, im), fft(re), ifft(re, im), ifft_real(re, im)))

        by_size = {}
        for N, *outputs in results:
            by_size.setdefault(N, []).append(outputs)

        for runs in by_size.values():
            first = runs[0]
            for run in runs[1:]:
                for a, b in zip(first[:3], run[:3]):
                    np.testing.assert_array_equal(a[0], b[0])
                    np.testing.assert_array_equal(a[1], b[1])
                np.testing.assert_array_equal(first[3], run[3])

    def test_engines_with_separate_caches_agree(self, rng):
        re, im = rng.standard_normal(256), rng.standard_normal(256)
        a = FFTEngine(cache=TwiddleCache(TwiddleStrategy.DIRECT)).fft(re, im)
        b = FFTEngine(cache=TwiddleCache(TwiddleStrategy.HALVING)).fft(re, im)
        np.testing.assert_allclose(a[0], b[0], atol=1e-10)
        np.testing.assert_allclose(a[1], b[1], atol=1e-10)
