"""
Engine Configuration

Settings for an FFTEngine. They select how the work is done, never
what is computed: every combination yields the same transform values
within floating-point rounding.
"""

import json
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from .twiddle import TwiddleStrategy


@dataclass
class EngineConfig:
    """Configuration for an FFTEngine"""

    # Twiddle table construction for engine-owned caches ("direct" | "halving")
    twiddle_strategy: str = TwiddleStrategy.HALVING.value

    # Closed-form arms for N <= 8; off means recursing down to N = 1
    unrolled_base_cases: bool = True

    # Print dispatch and table-build diagnostics
    verbose: bool = False

    def __post_init__(self):
        if isinstance(self.twiddle_strategy, TwiddleStrategy):
            self.twiddle_strategy = self.twiddle_strategy.value
        valid = [s.value for s in TwiddleStrategy]
        if self.twiddle_strategy not in valid:
            raise ValueError(
                f"Unknown twiddle strategy '{self.twiddle_strategy}'. Available: {valid}"
            )

    @property
    def strategy(self) -> TwiddleStrategy:
        return TwiddleStrategy(self.twiddle_strategy)

    def save(self, path: Path):
        """Save configuration to file"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(asdict(self), f, indent=2)

    @classmethod
    def load(cls, path: Path) -> "EngineConfig":
        """Load configuration from file"""
        with open(path) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {path}")
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys {unknown}. Available: {sorted(known)}")
        return cls(**data)
