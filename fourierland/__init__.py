"""
fourierland: Composite Waves, Spectra and Scene Geometry
=======================================================

Numeric core of a 3D Fourier visualizer:

    fourierland.synthesize_composite(sample_count, frequencies, amplitudes, phases)
        → (N,) waveform, sum of sinusoids.

    fourierland.analyze(waveform)
        → Spectrum with N // 2 one-sided bins (magnitude, phase).

    fourierland.wave_points / component_wave_points / fourier_bars
        → (n, 3) point arrays for a renderer.

    fourierland.compute_snapshot(WaveParameters(...))
        → all of the above in one immutable Snapshot.

Usage:
    import fourierland

    wave = fourierland.synthesize_composite(8, [1], [1], [0])
    spec = fourierland.analyze(wave)
    # → 4 bins, peak at bin 1
"""

__version__ = '0.1.0'

from fourierland.normalize import normalize_values
from fourierland.synth import (
    WaveComponent,
    components_from_arrays,
    synthesize,
    synthesize_component,
    synthesize_composite,
)
from fourierland.spectrum import Spectrum, SpectrumBin, analyze, peak_bins
from fourierland.geometry import (
    bar_boxes,
    component_wave_points,
    fourier_bars,
    wave_points,
)
from fourierland.parameters import WaveParameters, validate_parameters
from fourierland.pipeline import Dimensions, Snapshot, compute_snapshot

__all__ = [
    '__version__',
    'normalize_values',
    'WaveComponent',
    'components_from_arrays',
    'synthesize',
    'synthesize_component',
    'synthesize_composite',
    'Spectrum',
    'SpectrumBin',
    'analyze',
    'peak_bins',
    'bar_boxes',
    'component_wave_points',
    'fourier_bars',
    'wave_points',
    'WaveParameters',
    'validate_parameters',
    'Dimensions',
    'Snapshot',
    'compute_snapshot',
]
