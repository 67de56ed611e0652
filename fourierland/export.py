"""
Write a snapshot to disk as parquet tables plus a parameters.yaml.

Tables:
    waveform.parquet          sample_index, t, value
    spectrum.parquet          frequency_index, magnitude, phase
    wave_points.parquet       point_index, x, y, z
    component_points.parquet  component, point_index, x, y, z
    bars.parquet              bar, corner, x, y, z
"""

import logging
from pathlib import Path
from typing import Dict

import numpy as np
import polars as pl
import yaml

from fourierland.geometry import VERTICES_PER_BAR
from fourierland.pipeline import Snapshot
from fourierland.spectrum import Spectrum

logger = logging.getLogger(__name__)


def waveform_frame(waveform: np.ndarray) -> pl.DataFrame:
    n = len(waveform)
    index = np.arange(n, dtype=np.int64)
    return pl.DataFrame({
        "sample_index": index,
        "t": index / n if n else np.empty(0),
        "value": np.asarray(waveform, dtype=np.float64),
    })


def spectrum_frame(spectrum: Spectrum) -> pl.DataFrame:
    return pl.DataFrame({
        "frequency_index": spectrum.frequency.astype(np.int64),
        "magnitude": spectrum.magnitude,
        "phase": spectrum.phase,
    })


def points_frame(points: np.ndarray) -> pl.DataFrame:
    points = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    return pl.DataFrame({
        "point_index": np.arange(len(points), dtype=np.int64),
        "x": points[:, 0],
        "y": points[:, 1],
        "z": points[:, 2],
    })


def component_points_frame(snapshot: Snapshot) -> pl.DataFrame:
    frames = [
        points_frame(path).with_columns(pl.lit(j, dtype=pl.Int64).alias("component"))
        for j, path in enumerate(snapshot.component_points)
    ]
    if not frames:
        return pl.DataFrame(schema={
            "component": pl.Int64, "point_index": pl.Int64,
            "x": pl.Float64, "y": pl.Float64, "z": pl.Float64,
        })
    return pl.concat(frames).select(["component", "point_index", "x", "y", "z"])


def bars_frame(vertices: np.ndarray) -> pl.DataFrame:
    vertices = np.asarray(vertices, dtype=np.float64).reshape(-1, 3)
    index = np.arange(len(vertices), dtype=np.int64)
    return pl.DataFrame({
        "bar": index // VERTICES_PER_BAR,
        "corner": index % VERTICES_PER_BAR,
        "x": vertices[:, 0],
        "y": vertices[:, 1],
        "z": vertices[:, 2],
    })


def write_snapshot(snapshot: Snapshot, output_dir: Path) -> Dict[str, Path]:
    """
    Write every table of a snapshot into output_dir.

    Returns:
        {table name: written path}
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    tables = {
        "waveform": waveform_frame(snapshot.waveform),
        "spectrum": spectrum_frame(snapshot.spectrum),
        "wave_points": points_frame(snapshot.wave_points),
        "component_points": component_points_frame(snapshot),
        "bars": bars_frame(snapshot.bar_vertices),
    }

    written = {}
    for name, df in tables.items():
        path = output_dir / f"{name}.parquet"
        df.write_parquet(path)
        logger.debug("wrote %s (%d rows)", path, len(df))
        written[name] = path

    meta = {
        "parameters": snapshot.parameters.to_dict(),
        "dimensions": {
            "width": snapshot.dimensions.width,
            "height": snapshot.dimensions.height,
            "depth": snapshot.dimensions.depth,
        },
        "colors": {
            "wave": snapshot.wave_color,
            "bars": snapshot.bar_color,
            "components": list(snapshot.component_colors),
        },
    }
    meta_path = output_dir / "parameters.yaml"
    with open(meta_path, "w") as f:
        yaml.safe_dump(meta, f, sort_keys=False)
    written["parameters"] = meta_path

    return written
