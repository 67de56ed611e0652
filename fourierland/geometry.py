"""
Scene Geometry
==============

Maps numeric arrays to 3D point sets sized to a width × height × depth
volume centered on the origin.

Three outputs:

    wave_points(samples, ...)
        → (N, 3) line path. x spans [-w/2, w/2], y spans [-h/2, h/2], z = 0.

    component_wave_points(sample_count, frequencies, amplitudes, phases, ...)
        → list of (N, 3) paths, one per active component, spread along z.

    fourier_bars(spectrum, ...)
        → (8K, 3) vertices, 8 per bar: bottom quad then top quad, each quad
          ordered (-x-z, +x-z, +x+z, -x+z). Renderers rebuild boxes from
          these positions (see bar_boxes), so the order is fixed.
"""

from typing import List, Sequence, Tuple, Union

import numpy as np

from fourierland.config import CONFIG
from fourierland.normalize import normalize_values
from fourierland.spectrum import Spectrum
from fourierland.synth import (
    DEFAULT_AMPLITUDES,
    DEFAULT_FREQUENCIES,
    DEFAULT_PHASES,
    DEFAULT_SAMPLE_COUNT,
    component_count,
    synthesize_component,
)


DEFAULT_WIDTH = CONFIG['dimensions']['width']
DEFAULT_HEIGHT = CONFIG['dimensions']['height']
DEFAULT_DEPTH = CONFIG['dimensions']['depth']
BAR_INSET = CONFIG['bars']['inset']
# Fixed layout: bottom quad then top quad
VERTICES_PER_BAR = 8

# Corner order of each quad as (x sign, z sign)
_QUAD = np.array([(-1.0, -1.0), (1.0, -1.0), (1.0, 1.0), (-1.0, 1.0)])


def _x_positions(sample_count: int, width: float) -> np.ndarray:
    if sample_count < 2:
        raise ValueError(f"Need at least 2 samples to map onto a line, got {sample_count}")
    segment = width / (sample_count - 1)
    return -width / 2 + np.arange(sample_count) * segment


def _line(samples: np.ndarray, width: float, height: float, z: float) -> np.ndarray:
    x = _x_positions(len(samples), width)
    y = normalize_values(samples, -height / 2, height / 2)
    return np.column_stack([x, y, np.full(len(x), z, dtype=np.float64)])


def wave_points(
    samples: Union[Sequence[float], np.ndarray],
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
    depth: float = DEFAULT_DEPTH,
) -> np.ndarray:
    """
    Line path for a waveform.

    Args:
        samples: (N,) waveform, N >= 2.
        width, height: Extent of the path in x and y.
        depth: Scene depth. The composite path sits on z = 0.

    Returns:
        (N, 3) array of (x, y, z).
    """
    samples = np.asarray(samples, dtype=np.float64)
    return _line(samples, width, height, 0.0)


def component_z_offsets(count: int, depth: float = DEFAULT_DEPTH) -> np.ndarray:
    """z of each component path: evenly spaced inside (-d/2, d/2), never on the boundary."""
    return -depth / 2 + (np.arange(count) + 1) * (depth / (count + 1))


def component_wave_points(
    sample_count: int = DEFAULT_SAMPLE_COUNT,
    frequencies: Sequence[float] = DEFAULT_FREQUENCIES,
    amplitudes: Sequence[float] = DEFAULT_AMPLITUDES,
    phases: Sequence[float] = DEFAULT_PHASES,
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
    depth: float = DEFAULT_DEPTH,
) -> List[np.ndarray]:
    """
    One line path per active component, each normalized on its own.

    Component j of C sits at z = -d/2 + (j+1) * d/(C+1), in component order.

    Returns:
        List of C arrays, each (sample_count, 3).
    """
    if sample_count < 2:
        raise ValueError(f"Need at least 2 samples to map onto a line, got {sample_count}")

    count = component_count(frequencies, amplitudes, phases)
    offsets = component_z_offsets(count, depth)

    paths = []
    for j in range(count):
        samples = synthesize_component(sample_count, frequencies[j], amplitudes[j], phases[j])
        paths.append(_line(samples, width, height, float(offsets[j])))
    return paths


def fourier_bars(
    spectrum: Spectrum,
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
    depth: float = DEFAULT_DEPTH,
    inset: float = BAR_INSET,
) -> np.ndarray:
    """
    Box vertices for one bar per spectrum bin.

    Bar heights are magnitudes normalized into [0, height]. Each bar gets a
    slot of width w/K and fills `inset` of it, centered in the slot and
    on z = 0.

    Returns:
        (8K, 3) array. Rows 8i..8i+3 are bar i's bottom corners (y = 0),
        rows 8i+4..8i+7 its top corners (y = bar height).
    """
    n_bars = len(spectrum)
    if n_bars == 0:
        return np.empty((0, 3), dtype=np.float64)

    heights = normalize_values(spectrum.magnitude, 0.0, height)
    bar_width = width / n_bars
    half = bar_width * inset / 2

    centers = -width / 2 + (np.arange(n_bars) + 0.5) * bar_width

    vertices = np.empty((n_bars, VERTICES_PER_BAR, 3), dtype=np.float64)
    quad_x = centers[:, None] + _QUAD[:, 0] * half     # (K, 4)
    quad_z = np.broadcast_to(_QUAD[:, 1] * half, (n_bars, 4))

    vertices[:, :4, 0] = quad_x
    vertices[:, :4, 1] = 0.0
    vertices[:, :4, 2] = quad_z
    vertices[:, 4:, 0] = quad_x
    vertices[:, 4:, 1] = heights[:, None]
    vertices[:, 4:, 2] = quad_z

    return vertices.reshape(-1, 3)


def bar_blocks(vertices: np.ndarray) -> np.ndarray:
    """Reshape flat bar vertices into (K, 8, 3) blocks."""
    vertices = np.asarray(vertices, dtype=np.float64)
    if vertices.ndim != 2 or vertices.shape[1] != 3 or len(vertices) % VERTICES_PER_BAR:
        raise ValueError(
            f"Bar vertices must be (8K, 3), got shape {vertices.shape}"
        )
    return vertices.reshape(-1, VERTICES_PER_BAR, 3)


def bar_boxes(vertices: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Box size and center per bar, read from corner positions.

    size   = (v1.x - v0.x, v4.y - v0.y, v2.z - v1.z)
    center = midpoint of (v0, v1) in x, (v0, v4) in y, (v0, v2) in z

    Returns:
        (sizes, centers), each (K, 3).
    """
    blocks = bar_blocks(vertices)
    v0, v1, v2, v4 = blocks[:, 0], blocks[:, 1], blocks[:, 2], blocks[:, 4]

    sizes = np.column_stack([
        v1[:, 0] - v0[:, 0],
        v4[:, 1] - v0[:, 1],
        v2[:, 2] - v1[:, 2],
    ])
    centers = np.column_stack([
        (v0[:, 0] + v1[:, 0]) / 2,
        (v0[:, 1] + v4[:, 1]) / 2,
        (v0[:, 2] + v2[:, 2]) / 2,
    ])
    return sizes, centers
