"""
Fourierland Pipeline
====================

One recomputation: wave parameters in, every numeric output a renderer
needs out.

    params → synthesize_composite → waveform ─┬→ analyze → spectrum → fourier_bars
                                              └→ wave_points
    params → component_wave_points

Each call builds a fresh Snapshot from its inputs. There is no cache; a
renderer that wants to debounce rapid parameter changes does so on its
own side.

Usage:
    from fourierland.pipeline import compute_snapshot
    from fourierland.parameters import WaveParameters

    snap = compute_snapshot(WaveParameters())
    snap.wave_points       # (1024, 3)
    snap.bar_vertices      # (8 * 512, 3)
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from fourierland.config import CONFIG
from fourierland.geometry import component_wave_points, fourier_bars, wave_points
from fourierland.parameters import WaveParameters
from fourierland.spectrum import Spectrum, analyze
from fourierland.synth import synthesize_composite

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dimensions:
    """Scene volume the geometry is mapped into."""
    width: float = CONFIG['dimensions']['width']
    height: float = CONFIG['dimensions']['height']
    depth: float = CONFIG['dimensions']['depth']

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> 'Dimensions':
        dims = config['dimensions']
        return cls(width=float(dims['width']), height=float(dims['height']),
                   depth=float(dims['depth']))


@dataclass(frozen=True)
class Snapshot:
    """Everything computed from one parameter set."""
    parameters: WaveParameters
    dimensions: Dimensions
    waveform: np.ndarray                 # (N,)
    spectrum: Spectrum                   # N // 2 bins
    wave_points: np.ndarray              # (N, 3)
    component_points: List[np.ndarray]   # C × (N, 3)
    bar_vertices: np.ndarray             # (8 * N//2, 3)
    wave_color: str
    bar_color: str
    component_colors: Tuple[str, ...]


def component_colors(count: int, palette: Optional[List[str]] = None) -> Tuple[str, ...]:
    """Color per component in component order, cycling the palette."""
    palette = palette or CONFIG['colors']['components']
    return tuple(palette[j % len(palette)] for j in range(count))


def compute_snapshot(
    params: Optional[WaveParameters] = None,
    dimensions: Optional[Dimensions] = None,
    config: Optional[Dict[str, Any]] = None,
) -> Snapshot:
    """
    Run the full pipeline for one parameter set.

    Args:
        params: Wave parameters. Defaults to WaveParameters().
        dimensions: Scene volume. Defaults to the config dimensions.
        config: Effective config (see config.load_config). Defaults to CONFIG.

    Returns:
        Snapshot.

    Raises:
        ValueError: sample_count < 2.
    """
    config = config or CONFIG
    params = params or WaveParameters()
    dimensions = dimensions or Dimensions.from_config(config)
    w, h, d = dimensions.width, dimensions.height, dimensions.depth

    if params.sample_count < 2:
        raise ValueError(f"sample_count must be at least 2, got {params.sample_count}")

    waveform = synthesize_composite(
        params.sample_count, params.frequencies, params.amplitudes, params.phases,
    )
    spectrum = analyze(waveform)

    components = component_wave_points(
        params.sample_count, params.frequencies, params.amplitudes, params.phases,
        width=w, height=h, depth=d,
    )

    logger.debug(
        "snapshot: %d samples, %d components, %d bins",
        params.sample_count, len(components), len(spectrum),
    )

    return Snapshot(
        parameters=params,
        dimensions=dimensions,
        waveform=waveform,
        spectrum=spectrum,
        wave_points=wave_points(waveform, w, h, d),
        component_points=components,
        bar_vertices=fourier_bars(spectrum, w, h, d, inset=config['bars']['inset']),
        wave_color=config['colors']['wave'],
        bar_color=config['colors']['bars'],
        component_colors=component_colors(len(components), config['colors']['components']),
    )
