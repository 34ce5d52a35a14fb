"""
PyTorch Adapter

FourierTile runs the radix-2 engine along the last dimension of a
tensor, so spectra can be taken inside an nn.Module pipeline.

    tile = FourierTile(window_size=64)
    re, im = tile(x)                  # x: (..., 64)
    psd = tile.power_spectrum(x)

The arithmetic runs on CPU in float64; results are moved back to the
input's device. No gradients flow through the transform.
"""

from typing import List, Optional, Tuple

import numpy as np
import torch
import torch.nn as nn

from .engine import FFTEngine, default_engine
from .lengths import check_length


class FourierTile(nn.Module):
    """
    Fixed-size spectral tile.

    Args:
        window_size: Transform length N (power of two)
        engine: Engine to run on (default: the shared module-level engine)
    """

    def __init__(self, window_size: int, engine: Optional[FFTEngine] = None):
        super().__init__()
        self.window_size = check_length(window_size)
        self.engine = engine or default_engine()

    def _rows(self, x: torch.Tensor) -> np.ndarray:
        if x.is_complex():
            raise ValueError("FourierTile expects real-valued tensors")
        if x.shape[-1] != self.window_size:
            raise ValueError(
                f"Expected last dimension {self.window_size}, got {x.shape[-1]}"
            )
        return x.detach().to("cpu", torch.float64).reshape(-1, self.window_size).numpy()

    def _tensor(self, rows: List[np.ndarray], like: torch.Tensor) -> torch.Tensor:
        if rows:
            stacked = np.stack(rows)
        else:
            stacked = np.empty((0, self.window_size))
        return torch.from_numpy(stacked).reshape(like.shape).to(like.device)

    def forward(self, x: torch.Tensor) -> Tuple[torch.Tensor, torch.Tensor]:
        """
        Forward transform of a real signal.

        Returns:
            (real_part, imag_part), float64, same shape as x
        """
        out_re, out_im = [], []
        for row in self._rows(x):
            re, im = self.engine.fft(row)
            out_re.append(re)
            out_im.append(im)
        return self._tensor(out_re, x), self._tensor(out_im, x)

    def inverse(self, re: torch.Tensor, im: torch.Tensor) -> Tuple[torch.Tensor, torch.Tensor]:
        """Unnormalized inverse transform (scaled by window_size)."""
        out_re, out_im = [], []
        for row_re, row_im in zip(self._rows(re), self._rows(im)):
            x_re, x_im = self.engine.ifft(row_re, row_im)
            out_re.append(x_re)
            out_im.append(x_im)
        return self._tensor(out_re, re), self._tensor(out_im, re)

    def inverse_real(self, re: torch.Tensor, im: torch.Tensor) -> torch.Tensor:
        """Real part of the unnormalized inverse transform."""
        out = [self.engine.ifft_real(row_re, row_im)
               for row_re, row_im in zip(self._rows(re), self._rows(im))]
        return self._tensor(out, re)

    def power_spectrum(self, x: torch.Tensor) -> torch.Tensor:
        """Energy spectrum |F(k)|^2."""
        re, im = self.forward(x)
        return re**2 + im**2
