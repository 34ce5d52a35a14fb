"""
Pytest configuration for pow2fft tests.

Ensures proper import paths are set before test collection.
"""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture
def rng():
    """Seeded generator so every run sees the same random signals."""
    import numpy as np
    return np.random.default_rng(42)
