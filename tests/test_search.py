"""Tests for the Z^2_n frequency search."""

import numpy as np
import pytest

from pulsar_search.errors import InvalidInputError
from pulsar_search.search.periodogram import frequency_grid, z_n_search, z_n_search_hist

SIGNAL_FREQUENCY = 1.123


@pytest.fixture(scope="module")
def pulsed_times():
    """Event times of a pulsed signal with Gaussian phase jitter."""
    rng = np.random.default_rng(20210101)
    phases = rng.normal(0.5, 0.1, 10000)
    pulse_no = np.floor(rng.uniform(0, 1000, 10000))
    return np.sort((phases + pulse_no) / SIGNAL_FREQUENCY)


@pytest.fixture(scope="module")
def direct_search(pulsed_times):
    """Direct search around the signal frequency."""
    return z_n_search(pulsed_times, 2, 1.0, 1.5, oversample=4.0)


def test_frequency_grid_spacing():
    """Test that the grid step is 1 / (T * oversample)."""
    freqs = frequency_grid([0.0, 5.0, 10.0], 1.0, 2.0, oversample=2.0)

    assert len(freqs) == 21
    assert freqs[0] == 1.0
    assert freqs[-1] == pytest.approx(2.0)
    assert np.allclose(np.diff(freqs), 0.05)


def test_frequency_grid_excludes_past_fmax():
    """Test that no grid point exceeds fmax."""
    freqs = frequency_grid([0.0, 3.0], 1.0, 1.5, oversample=1.0)

    assert freqs[-1] <= 1.5
    assert len(freqs) == 2


def test_frequency_grid_uses_first_and_last_time():
    """Test that the span comes from the end points, not the extrema."""
    freqs = frequency_grid([0.0, 100.0, 10.0], 1.0, 2.0, oversample=1.0)

    assert np.allclose(np.diff(freqs), 0.1)


@pytest.mark.parametrize(
    "times, fmin, fmax, oversample",
    [
        ([], 1.0, 2.0, 2.0),
        ([0.0, 10.0], 2.0, 1.0, 2.0),
        ([0.0, 10.0], 1.0, 1.0, 2.0),
        ([0.0, 10.0], 1.0, 2.0, 0.0),
        ([5.0, 5.0], 1.0, 2.0, 2.0),
    ],
)
def test_frequency_grid_invalid(times, fmin, fmax, oversample):
    """Test that invalid search ranges fail fast."""
    with pytest.raises(InvalidInputError):
        frequency_grid(times, fmin, fmax, oversample)


def test_search_output_shape(direct_search):
    """Test that frequencies and statistics are paired and ordered."""
    freqs, stats = direct_search

    assert len(freqs) == len(stats)
    assert np.all(np.diff(freqs) > 0)
    assert np.all(stats >= 0)


def test_search_finds_signal(direct_search):
    """Test that the peak of the search is at the signal frequency."""
    freqs, stats = direct_search
    maxind = np.argmax(stats)

    assert abs(freqs[maxind] - SIGNAL_FREQUENCY) < 1e-3


def test_search_hist_matches_direct(pulsed_times, direct_search):
    """Test that the binned search agrees with the direct one at the peak."""
    freqs, stats = direct_search
    freqs_hist, stats_hist = z_n_search_hist(pulsed_times, 2, 1.0, 1.5, oversample=4.0, nbin=16)
    maxind = np.argmax(stats)

    assert np.array_equal(freqs, freqs_hist)
    assert stats_hist[maxind] == pytest.approx(stats[maxind], rel=0.1)


def test_search_hist_invalid_nbin():
    """Test that a profile without bins is rejected."""
    with pytest.raises(InvalidInputError):
        z_n_search_hist([0.0, 1.0, 2.0], 2, 1.0, 2.0, nbin=0)


def test_search_empty_times():
    """Test that an empty event list is rejected."""
    with pytest.raises(InvalidInputError):
        z_n_search([], 2, 1.0, 2.0)
