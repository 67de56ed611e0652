"""
Per-frame motion for a rendered snapshot.

Everything here is a pure function of a computed snapshot plus a time value
the renderer owns. Nothing keeps a clock and nothing mutates its input.

    time = advance_time(time)
    frame_vertices = animate_bars(bar_vertices, spectrum, time)
    frame_path = rotate_y(points, wave_rotation(frame))

Constants come from config['animation'] (CONFIG unless an effective config
from load_config is passed). Explicit keyword arguments win over both.
"""

from typing import Any, Dict, Optional

import numpy as np

from fourierland.config import CONFIG
from fourierland.geometry import bar_blocks
from fourierland.spectrum import Spectrum


def _anim(key: str, value: Optional[float], config: Optional[Dict[str, Any]]) -> float:
    if value is not None:
        return value
    return (config or CONFIG)['animation'][key]


def advance_time(
    time: float,
    speed: Optional[float] = None,
    config: Optional[Dict[str, Any]] = None,
) -> float:
    """Time after one frame."""
    return time + _anim('time_step', speed, config)


def bar_offsets(
    spectrum: Spectrum,
    time: float,
    spatial: Optional[float] = None,
    temporal: Optional[float] = None,
    scale: Optional[float] = None,
    config: Optional[Dict[str, Any]] = None,
) -> np.ndarray:
    """
    Vertical offset of each bar at a given time.

        offset_k = sin(f_k * spatial + time * f_k * temporal + phase_k) * scale

    Returns:
        (K,) array, one offset per bin.
    """
    spatial = _anim('bar_spatial', spatial, config)
    temporal = _anim('bar_temporal', temporal, config)
    scale = _anim('bar_scale', scale, config)

    f = spectrum.frequency.astype(np.float64)
    return np.sin(f * spatial + time * f * temporal + spectrum.phase) * scale


def animate_bars(
    vertices: np.ndarray,
    spectrum: Spectrum,
    time: float,
    config: Optional[Dict[str, Any]] = None,
) -> np.ndarray:
    """Bar vertices with each 8-vertex block shifted in y by its bar offset."""
    blocks = bar_blocks(vertices)
    if len(blocks) != len(spectrum):
        raise ValueError(
            f"Got {len(blocks)} bars for a spectrum of {len(spectrum)} bins"
        )
    moved = blocks.copy()
    moved[:, :, 1] += bar_offsets(spectrum, time, config=config)[:, None]
    return moved.reshape(-1, 3)


def wave_rotation(
    frame: int,
    step: Optional[float] = None,
    config: Optional[Dict[str, Any]] = None,
) -> float:
    """y-axis rotation (radians) of the wave line after `frame` frames."""
    return frame * _anim('wave_rotation_step', step, config)


def rotate_y(points: np.ndarray, angle: float) -> np.ndarray:
    """Rotate (N, 3) points about the y axis."""
    points = np.asarray(points, dtype=np.float64)
    c, s = np.cos(angle), np.sin(angle)
    rot = np.array([
        [c, 0.0, s],
        [0.0, 1.0, 0.0],
        [-s, 0.0, c],
    ])
    return points @ rot.T
