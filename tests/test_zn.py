"""Tests for the Z^2_n statistic."""

import numpy as np
import pytest

from pulsar_search.errors import InvalidInputError
from pulsar_search.search.zn import z_n, z_n_binned


def test_z_n_single_phase():
    """Test that a single phase gives zero."""
    assert z_n(np.array([0.5]), 2) == 0


def test_z_n_empty():
    """Test that no phases give zero."""
    assert z_n([], 2) == 0


def test_z_n_uniform_phases():
    """Test that evenly spaced phases give a vanishing statistic."""
    phases = np.arange(1, 11) / 10
    assert z_n(phases, 2) < 1e-10


def test_z_n_same_phase():
    """Test that photons all at the same phase give 2 * n * N."""
    assert z_n(np.ones(10), 2) == 40


def test_z_n_unwrapped_phases():
    """Test that integer phases are treated as the same phase."""
    assert z_n([10.0, 0.0, 0.0, 0.0, 0.0], 2) == pytest.approx(20.0)


def test_z_n_grows_with_harmonics():
    """Test that adding harmonics never decreases the statistic."""
    rng = np.random.default_rng(1)
    phases = rng.normal(0.5, 0.1, 500)

    values = [z_n(phases, n) for n in range(1, 6)]
    for previous, current in zip(values, values[1:]):
        assert current >= previous


def test_z_n_invalid_harmonics():
    """Test that fewer than one harmonic is rejected."""
    with pytest.raises(InvalidInputError):
        z_n([0.1, 0.2], 0)


def test_z_n_binned_empty_profile():
    """Test that a profile without events gives zero."""
    assert z_n_binned(np.zeros(10), 2) == 0


def test_z_n_binned_flat_profile():
    """Test that a flat profile gives a vanishing statistic."""
    assert z_n_binned(np.ones(10), 2) < 1e-10


def test_z_n_binned_single_bin():
    """Test that all counts in one bin match the same-phase case."""
    assert z_n_binned([10.0, 0.0, 0.0, 0.0, 0.0], 2) == 40


def test_z_n_binned_matches_events():
    """Test that a finely binned profile reproduces the event statistic."""
    rng = np.random.default_rng(2)
    phases = rng.normal(0.3, 0.05, 2000) % 1
    profile, _ = np.histogram(phases, bins=4096, range=(0.0, 1.0))

    expected = z_n(phases, 2)
    assert z_n_binned(profile, 2) == pytest.approx(expected, rel=1e-3)


def test_z_n_binned_negative_counts():
    """Test that negative counts are rejected."""
    with pytest.raises(InvalidInputError):
        z_n_binned([3.0, -1.0, 2.0], 2)


def test_z_n_binned_no_bins():
    """Test that an empty profile is rejected."""
    with pytest.raises(InvalidInputError):
        z_n_binned([], 2)


def test_z_n_binned_invalid_harmonics():
    """Test that fewer than one harmonic is rejected."""
    with pytest.raises(ValueError):
        z_n_binned([1.0, 2.0], 0)
