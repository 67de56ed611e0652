"""
Spectrum analysis: one-sided DFT magnitude and phase.

    X_k = Σ_n x_n · exp(-2πi·k·n/N)

Only bins 0 .. floor(N/2) - 1 are kept; the upper half of a real signal's
transform mirrors the lower half. The bin index itself is the frequency
label (cycles per sample window). No windowing, no zero-padding.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Union

import numpy as np
from scipy.fft import fft

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpectrumBin:
    frequency_index: int
    magnitude: float
    phase: float


@dataclass(frozen=True)
class Spectrum:
    """
    One-sided spectrum as parallel arrays.

    Attributes:
        frequency: (K,) int bin indices 0..K-1
        magnitude: (K,) |X_k|
        phase: (K,) atan2(Im X_k, Re X_k)
    """
    frequency: np.ndarray
    magnitude: np.ndarray
    phase: np.ndarray

    def __len__(self) -> int:
        return len(self.frequency)

    def __iter__(self) -> Iterator[SpectrumBin]:
        for k, mag, ph in zip(self.frequency, self.magnitude, self.phase):
            yield SpectrumBin(int(k), float(mag), float(ph))

    def __getitem__(self, index: int) -> SpectrumBin:
        return SpectrumBin(
            int(self.frequency[index]),
            float(self.magnitude[index]),
            float(self.phase[index]),
        )

    def bins(self) -> List[SpectrumBin]:
        return list(self)


def analyze(signal: Union[Sequence[float], np.ndarray]) -> Spectrum:
    """
    Compute the one-sided spectrum of a real signal.

    Args:
        signal: (N,) real samples, any N >= 1.

    Returns:
        Spectrum with floor(N/2) bins. N == 1 is degenerate and yields an
        empty spectrum.
    """
    x = np.asarray(signal, dtype=np.float64)
    n = len(x)
    if n < 1:
        raise ValueError("Cannot analyze an empty signal")

    half = n // 2
    coeffs = fft(x)[:half]
    logger.debug("DFT of %d samples -> %d bins", n, half)

    return Spectrum(
        frequency=np.arange(half, dtype=np.int64),
        magnitude=np.hypot(coeffs.real, coeffs.imag),
        phase=np.arctan2(coeffs.imag, coeffs.real),
    )


def peak_bins(spectrum: Spectrum, count: int = 3) -> List[int]:
    """
    Bin indices of the strongest local maxima, largest magnitude first.

    A bin is a local maximum when it is strictly greater than its left
    neighbour and not less than its right one (edges compare one side).
    """
    mag = spectrum.magnitude
    if len(mag) == 0 or count <= 0:
        return []

    left = np.concatenate(([-np.inf], mag[:-1]))
    right = np.concatenate((mag[1:], [-np.inf]))
    candidates = np.flatnonzero((mag > left) & (mag >= right))

    order = candidates[np.argsort(-mag[candidates], kind='stable')]
    return [int(k) for k in order[:count]]
