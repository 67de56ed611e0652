"""
Wave Synthesis
==============

Time-domain samples from a set of sinusoidal components.

Each component contributes

    amplitude * sin(2π * frequency * t + phase),    t = i / sample_count

so one unit of time spans the whole sample window and an integer frequency
completes exactly that many cycles.

Components are given either as three parallel arrays (frequencies,
amplitudes, phases) or as an ordered tuple of WaveComponent. Parallel arrays
of different lengths are truncated to the shortest one; extra entries are
ignored, never an error.
"""

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from fourierland.config import CONFIG


DEFAULT_SAMPLE_COUNT = CONFIG['defaults']['sample_count']
DEFAULT_FREQUENCIES = tuple(CONFIG['defaults']['frequencies'])
DEFAULT_AMPLITUDES = tuple(CONFIG['defaults']['amplitudes'])
DEFAULT_PHASES = tuple(CONFIG['defaults']['phases'])


@dataclass(frozen=True)
class WaveComponent:
    """One sinusoidal component."""
    frequency: float   # Hz (cycles per sample window)
    amplitude: float
    phase: float       # radians


def component_count(
    frequencies: Sequence[float],
    amplitudes: Sequence[float],
    phases: Sequence[float],
) -> int:
    """Number of active components: the shortest of the three arrays."""
    return min(len(frequencies), len(amplitudes), len(phases))


def components_from_arrays(
    frequencies: Sequence[float],
    amplitudes: Sequence[float],
    phases: Sequence[float],
) -> Tuple[WaveComponent, ...]:
    """Ordered component set from parallel arrays, truncated to the shortest."""
    n = component_count(frequencies, amplitudes, phases)
    return tuple(
        WaveComponent(float(frequencies[j]), float(amplitudes[j]), float(phases[j]))
        for j in range(n)
    )


def _time_axis(sample_count: int) -> np.ndarray:
    if sample_count < 0:
        raise ValueError(f"sample_count must be non-negative, got {sample_count}")
    return np.arange(sample_count, dtype=np.float64) / max(sample_count, 1)


def synthesize_component(
    sample_count: int = DEFAULT_SAMPLE_COUNT,
    frequency: float = DEFAULT_FREQUENCIES[0],
    amplitude: float = DEFAULT_AMPLITUDES[0],
    phase: float = DEFAULT_PHASES[0],
) -> np.ndarray:
    """
    Samples of a single sinusoid.

    Args:
        sample_count: Number of samples N.
        frequency: Cycles per N samples.
        amplitude: Peak amplitude.
        phase: Phase shift in radians.

    Returns:
        (N,) float64 array.
    """
    t = _time_axis(sample_count)
    return amplitude * np.sin(2 * math.pi * frequency * t + phase)


def synthesize_composite(
    sample_count: int = DEFAULT_SAMPLE_COUNT,
    frequencies: Sequence[float] = DEFAULT_FREQUENCIES,
    amplitudes: Sequence[float] = DEFAULT_AMPLITUDES,
    phases: Sequence[float] = DEFAULT_PHASES,
) -> np.ndarray:
    """
    Sum of sinusoids, one per active component.

    Args:
        sample_count: Number of samples N.
        frequencies, amplitudes, phases: Parallel component arrays. Only the
            first min(len) components participate.

    Returns:
        (N,) float64 array. All zeros when no component is active.
    """
    t = _time_axis(sample_count)
    samples = np.zeros(sample_count, dtype=np.float64)

    for j in range(component_count(frequencies, amplitudes, phases)):
        samples += amplitudes[j] * np.sin(2 * math.pi * frequencies[j] * t + phases[j])

    return samples


def synthesize(sample_count: int, components: Sequence[WaveComponent]) -> np.ndarray:
    """Composite waveform from an ordered component set."""
    return synthesize_composite(
        sample_count,
        [c.frequency for c in components],
        [c.amplitude for c in components],
        [c.phase for c in components],
    )
