"""Tests for fourierland.spectrum."""

import math

import numpy as np
import pytest

from fourierland.spectrum import Spectrum, SpectrumBin, analyze, peak_bins
from fourierland.synth import synthesize_composite


@pytest.fixture
def three_tone():
    """Default three-component wave, 1024 samples."""
    wave = synthesize_composite(
        1024, [2, 5, 8], [0.5, 0.3, 0.2], [0, math.pi / 4, math.pi / 2],
    )
    return analyze(wave)


class TestAnalyze:

    def test_bin_count_even(self):
        assert len(analyze(np.zeros(16))) == 8

    def test_bin_count_odd(self):
        assert len(analyze(np.ones(9))) == 4

    def test_single_sample_is_empty(self):
        spec = analyze([3.0])
        assert len(spec) == 0
        assert spec.bins() == []

    def test_empty_signal_rejected(self):
        with pytest.raises(ValueError):
            analyze([])

    def test_frequency_is_bin_index(self):
        spec = analyze(np.random.RandomState(1).randn(20))
        assert list(spec.frequency) == list(range(10))

    def test_pure_sinusoid_peak(self):
        n, f, a = 256, 10, 0.8
        wave = synthesize_composite(n, [f], [a], [0.0])
        spec = analyze(wave)
        assert int(np.argmax(spec.magnitude)) == f
        assert spec.magnitude[f] == pytest.approx(a * n / 2, rel=1e-9)
        others = np.delete(spec.magnitude, f)
        assert np.all(others < 1e-9 * n)

    def test_sine_phase(self):
        # a·sin(θ) has DFT coefficient -i·a·N/2 at its bin
        spec = analyze(synthesize_composite(64, [4], [1.0], [0.0]))
        assert spec.phase[4] == pytest.approx(-math.pi / 2, abs=1e-9)

    def test_dc_bin(self):
        spec = analyze(np.full(10, 2.0))
        assert spec.magnitude[0] == pytest.approx(20.0)
        assert np.all(spec.magnitude[1:] < 1e-12)

    def test_matches_direct_dft(self):
        x = np.random.RandomState(7).randn(12)
        n = len(x)
        k = np.arange(n // 2)[:, None]
        direct = (x * np.exp(-2j * np.pi * k * np.arange(n) / n)).sum(axis=1)
        spec = analyze(x)
        assert np.allclose(spec.magnitude, np.abs(direct))
        assert np.allclose(spec.phase, np.angle(direct))

    def test_magnitudes_nonnegative(self):
        spec = analyze(np.random.RandomState(3).randn(100))
        assert np.all(spec.magnitude >= 0)

    def test_eight_sample_scenario(self):
        spec = analyze(synthesize_composite(8, [1], [1], [0]))
        assert len(spec) == 4
        assert int(np.argmax(spec.magnitude)) == 1
        assert spec.magnitude[1] == pytest.approx(4.0)

    def test_three_tone_peaks(self, three_tone):
        mag = three_tone.magnitude
        assert len(three_tone) == 512
        assert mag[2] > mag[5] > mag[8]
        assert mag[2] == pytest.approx(0.5 * 512)
        assert mag[5] == pytest.approx(0.3 * 512)
        assert mag[8] == pytest.approx(0.2 * 512)
        rest = np.delete(mag, [2, 5, 8])
        assert np.all(rest < 1e-6)

    def test_idempotent(self):
        x = np.random.RandomState(11).randn(64)
        a, b = analyze(x), analyze(x)
        assert np.array_equal(a.magnitude, b.magnitude)
        assert np.array_equal(a.phase, b.phase)


class TestSpectrumRecords:

    def test_iteration_yields_bins(self):
        spec = analyze(synthesize_composite(8, [1], [1], [0]))
        bins = list(spec)
        assert len(bins) == 4
        assert all(isinstance(b, SpectrumBin) for b in bins)
        assert [b.frequency_index for b in bins] == [0, 1, 2, 3]

    def test_getitem(self):
        spec = Spectrum(
            frequency=np.array([0, 1]),
            magnitude=np.array([0.5, 2.0]),
            phase=np.array([0.0, 1.0]),
        )
        assert spec[1] == SpectrumBin(1, 2.0, 1.0)


class TestPeakBins:

    def test_three_tone_ordering(self, three_tone):
        assert peak_bins(three_tone, 3) == [2, 5, 8]

    def test_count_limits_output(self, three_tone):
        assert peak_bins(three_tone, 1) == [2]

    def test_empty_spectrum(self):
        assert peak_bins(analyze([1.0]), 3) == []

    def test_zero_count(self, three_tone):
        assert peak_bins(three_tone, 0) == []
