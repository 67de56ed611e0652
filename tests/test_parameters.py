"""Tests for fourierland.parameters."""

import math

import pytest

from fourierland.config import load_config
from fourierland.parameters import WaveParameters, validate_parameters
from fourierland.synth import WaveComponent


class TestWaveParameters:

    def test_defaults(self):
        p = WaveParameters()
        assert p.sample_count == 1024
        assert p.frequencies == (2.0, 5.0, 8.0)
        assert p.amplitudes == (0.5, 0.3, 0.2)
        assert p.phases == pytest.approx((0.0, math.pi / 4, math.pi / 2))

    def test_lists_become_tuples(self):
        p = WaveParameters([1, 2], [0.5, 0.5], [0, 0], 256)
        assert p.frequencies == (1.0, 2.0)
        assert isinstance(p.amplitudes, tuple)

    def test_with_frequency_returns_new(self):
        p = WaveParameters()
        q = p.with_frequency(1, 12.5)
        assert q.frequencies == (2.0, 12.5, 8.0)
        assert p.frequencies == (2.0, 5.0, 8.0)

    def test_with_amplitude_and_phase(self):
        q = WaveParameters().with_amplitude(0, 1.0).with_phase(2, 0.0)
        assert q.amplitudes[0] == 1.0
        assert q.phases[2] == 0.0

    def test_with_sample_count(self):
        assert WaveParameters().with_sample_count(512).sample_count == 512

    def test_bad_index(self):
        with pytest.raises(IndexError):
            WaveParameters().with_frequency(3, 1.0)
        with pytest.raises(IndexError):
            WaveParameters().with_phase(-1, 1.0)

    def test_components_truncated(self):
        p = WaveParameters([1, 2, 3], [0.1, 0.2], [0, 0, 0])
        assert p.components == (WaveComponent(1.0, 0.1, 0.0), WaveComponent(2.0, 0.2, 0.0))

    def test_frozen(self):
        with pytest.raises(AttributeError):
            WaveParameters().sample_count = 5

    def test_to_dict(self):
        d = WaveParameters([1], [1], [0], 128).to_dict()
        assert d == {'sample_count': 128, 'frequencies': [1.0],
                     'amplitudes': [1.0], 'phases': [0.0]}


class TestValidateParameters:

    def test_defaults_valid(self):
        assert validate_parameters(WaveParameters()) == []

    def test_frequency_out_of_range(self):
        issues = validate_parameters(WaveParameters([25.0], [0.5], [0.0], 1024))
        assert len(issues) == 1
        assert 'frequency[0]' in issues[0]

    def test_amplitude_and_phase_out_of_range(self):
        issues = validate_parameters(WaveParameters([2.0], [1.5], [7.0], 1024))
        assert any('amplitude[0]' in i for i in issues)
        assert any('phase[0]' in i for i in issues)

    def test_sample_count_out_of_range(self):
        issues = validate_parameters(WaveParameters().with_sample_count(64))
        assert any('sample_count' in i for i in issues)

    def test_too_many_components(self):
        p = WaveParameters([1, 2, 3, 4, 5, 6], [0.1] * 6, [0.0] * 6, 1024)
        assert any('exceeds maximum' in i for i in validate_parameters(p))

    def test_mismatched_lengths_reported(self):
        p = WaveParameters([1, 2], [0.1], [0.0, 0.0], 1024)
        issues = validate_parameters(p)
        assert any('differ in length' in i for i in issues)

    def test_custom_config(self, tmp_path):
        path = tmp_path / 'override.yaml'
        path.write_text('controls:\n  frequency:\n    max: 50.0\n')
        cfg = load_config(path)
        p = WaveParameters([25.0], [0.5], [0.0], 1024)
        assert validate_parameters(p, cfg) == []
