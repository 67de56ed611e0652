"""
Wave parameters as an immutable value.

A parameter change never edits a WaveParameters in place; the with_* methods
return a new instance and the pipeline recomputes everything from it.

validate_parameters() checks values against the control ranges in
CONFIG['controls']. The checks are advisory: synthesis and analysis accept
any values.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Tuple

from fourierland.config import CONFIG
from fourierland.synth import (
    DEFAULT_AMPLITUDES,
    DEFAULT_FREQUENCIES,
    DEFAULT_PHASES,
    DEFAULT_SAMPLE_COUNT,
    WaveComponent,
    components_from_arrays,
)


@dataclass(frozen=True)
class WaveParameters:
    """Parallel component arrays plus sample count."""
    frequencies: Tuple[float, ...] = DEFAULT_FREQUENCIES
    amplitudes: Tuple[float, ...] = DEFAULT_AMPLITUDES
    phases: Tuple[float, ...] = DEFAULT_PHASES
    sample_count: int = DEFAULT_SAMPLE_COUNT

    def __post_init__(self):
        object.__setattr__(self, 'frequencies', tuple(float(v) for v in self.frequencies))
        object.__setattr__(self, 'amplitudes', tuple(float(v) for v in self.amplitudes))
        object.__setattr__(self, 'phases', tuple(float(v) for v in self.phases))
        object.__setattr__(self, 'sample_count', int(self.sample_count))

    @property
    def components(self) -> Tuple[WaveComponent, ...]:
        """Active components in order, truncated to the shortest array."""
        return components_from_arrays(self.frequencies, self.amplitudes, self.phases)

    def _with_value(self, name: str, index: int, value: float) -> 'WaveParameters':
        values = list(getattr(self, name))
        if not 0 <= index < len(values):
            raise IndexError(f"{name} index {index} out of range (have {len(values)})")
        values[index] = float(value)
        return replace(self, **{name: tuple(values)})

    def with_frequency(self, index: int, value: float) -> 'WaveParameters':
        return self._with_value('frequencies', index, value)

    def with_amplitude(self, index: int, value: float) -> 'WaveParameters':
        return self._with_value('amplitudes', index, value)

    def with_phase(self, index: int, value: float) -> 'WaveParameters':
        return self._with_value('phases', index, value)

    def with_sample_count(self, sample_count: int) -> 'WaveParameters':
        return replace(self, sample_count=sample_count)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'sample_count': self.sample_count,
            'frequencies': list(self.frequencies),
            'amplitudes': list(self.amplitudes),
            'phases': list(self.phases),
        }


def _check_range(issues: List[str], label: str, value: float, bounds: Dict[str, float]):
    if not bounds['min'] <= value <= bounds['max']:
        issues.append(f"{label}={value:g} outside [{bounds['min']:g}, {bounds['max']:g}]")


def validate_parameters(
    params: WaveParameters,
    config: Optional[Dict[str, Any]] = None,
) -> List[str]:
    """
    Check parameters against the control ranges.

    Returns:
        List of issue strings. Empty means every value is in range.
    """
    controls = (config or CONFIG)['controls']
    issues: List[str] = []

    lengths = {len(params.frequencies), len(params.amplitudes), len(params.phases)}
    if len(lengths) > 1:
        issues.append(
            f"component arrays differ in length "
            f"({len(params.frequencies)}/{len(params.amplitudes)}/{len(params.phases)}); "
            f"only the first {len(params.components)} are used"
        )

    if len(params.components) > controls['max_components']:
        issues.append(
            f"{len(params.components)} components exceeds maximum of {controls['max_components']}"
        )

    _check_range(issues, 'sample_count', params.sample_count, controls['sample_count'])

    for j, comp in enumerate(params.components):
        _check_range(issues, f'frequency[{j}]', comp.frequency, controls['frequency'])
        _check_range(issues, f'amplitude[{j}]', comp.amplitude, controls['amplitude'])
        _check_range(issues, f'phase[{j}]', comp.phase, controls['phase'])

    return issues
