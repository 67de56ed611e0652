"""
Fourierland Configuration
=========================
Scene dimensions, default wave parameters, control ranges and animation
constants. Single source of truth for the pipeline, the CLI and any renderer.

Usage:
    from fourierland.config import CONFIG, get
    width = CONFIG['dimensions']['width']
    inset = get('bars.inset')

    # YAML override, deep-merged into a copy of CONFIG
    cfg = load_config('scene.yaml')
"""

import copy
import math
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


CONFIG = {

    # =================================================================
    # Scene dimensions (world units)
    # =================================================================
    'dimensions': {
        'width': 10.0,
        'height': 2.0,
        'depth': 3.0,
    },

    # =================================================================
    # Default wave parameters
    # =================================================================
    'defaults': {
        'sample_count': 1024,
        'frequencies': [2.0, 5.0, 8.0],
        'amplitudes': [0.5, 0.3, 0.2],
        'phases': [0.0, math.pi / 4, math.pi / 2],
    },

    # =================================================================
    # Control ranges (advisory, checked by validate_parameters)
    # =================================================================
    'controls': {
        'max_components': 5,
        'frequency': {'min': 1.0, 'max': 20.0, 'step': 0.5},
        'amplitude': {'min': 0.0, 'max': 1.0, 'step': 0.05},
        'phase': {'min': 0.0, 'max': 2 * math.pi, 'step': math.pi / 12},
        'sample_count': {'min': 128, 'max': 2048, 'step': 128},
    },

    # =================================================================
    # Spectrum bars
    # =================================================================
    'bars': {
        'inset': 0.8,          # fraction of each slot occupied by its bar
    },

    # =================================================================
    # Per-frame motion (owned by the renderer, driven by external time)
    # =================================================================
    'animation': {
        'time_step': 0.05,
        'bar_spatial': 0.2,
        'bar_temporal': 0.5,
        'bar_scale': 0.2,
        'wave_rotation_step': 0.002,
    },

    # =================================================================
    # Colors
    # =================================================================
    'colors': {
        'wave': '#61dafb',
        'bars': '#8e44ad',
        'components': ['#ff6b6b', '#feca57', '#48dbfb', '#1dd1a1', '#ff9ff3'],
    },
}


def get(path: str, default=None, config: Optional[Dict[str, Any]] = None):
    """
    Get a config value by dot-separated path.

    Usage:
        get('dimensions.width')          → 10.0
        get('controls.frequency.max')    → 20.0
    """
    keys = path.split('.')
    val = CONFIG if config is None else config
    for key in keys:
        if isinstance(val, dict) and key in val:
            val = val[key]
        else:
            return default
    return val


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Effective configuration: CONFIG with an optional YAML override on top.

    Args:
        path: YAML file whose mapping is deep-merged over CONFIG. None returns
              a plain copy of CONFIG.

    Returns:
        New config dict. The module-level CONFIG is never mutated.
    """
    cfg = copy.deepcopy(CONFIG)
    if path is None:
        return cfg

    path = Path(path)
    with open(path) as f:
        override = yaml.safe_load(f) or {}
    if not isinstance(override, dict):
        raise ValueError(f"Config override must be a mapping, got {type(override).__name__}: {path}")

    return _deep_merge(cfg, override)
