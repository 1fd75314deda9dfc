"""Tests for multiple-trials corrections."""

import numpy as np
import pytest

from pulsar_search.errors import InvalidInputError
from pulsar_search.stats.trials import (
    logp_multitrial_from_single_logp,
    logp_single_trial_from_logp_multitrial,
    p_multitrial_from_single_trial,
    p_single_trial_from_p_multitrial,
)

TRIAL_COUNTS = [1, 10, 100, 1000, 10000, 100000]


@pytest.mark.parametrize("ntrial", TRIAL_COUNTS)
def test_single_from_multi_round_trip(ntrial):
    """Test that the single-trial probability is recovered."""
    epsilon_1 = 0.00000001
    epsilon_n = p_multitrial_from_single_trial(epsilon_1, ntrial)
    epsilon_1_corr = p_single_trial_from_p_multitrial(epsilon_n, ntrial)

    assert epsilon_1_corr == pytest.approx(epsilon_1, rel=1e-2)


@pytest.mark.parametrize("epsilon_1", [1e-300, 1e-12, 1e-4, 0.05, 0.3])
def test_round_trip_across_range(epsilon_1):
    """Test the round trip for small and large probabilities."""
    epsilon_n = p_multitrial_from_single_trial(epsilon_1, 10)
    epsilon_1_corr = p_single_trial_from_p_multitrial(epsilon_n, 10)

    assert epsilon_1_corr == pytest.approx(epsilon_1, rel=1e-2)


def test_log_round_trip_beyond_float_range():
    """Test the log-domain round trip where p itself would underflow."""
    logp1 = -2000.0
    logpn = logp_multitrial_from_single_logp(logp1, 1000)

    assert logpn == pytest.approx(logp1 + np.log(1000))
    assert logp_single_trial_from_logp_multitrial(logpn, 1000) == pytest.approx(logp1)


def test_single_trial_is_identity():
    """Test that one trial leaves the probability unchanged."""
    assert p_multitrial_from_single_trial(0.2, 1) == pytest.approx(0.2)
    assert p_single_trial_from_p_multitrial(0.2, 1) == pytest.approx(0.2)


def test_multitrial_exact_binomial():
    """Test the exact formula away from the Bonferroni regime."""
    p1 = 0.01
    expected = 1 - (1 - p1) ** 50

    assert p_multitrial_from_single_trial(p1, 50) == pytest.approx(expected)


def test_multitrial_bonferroni():
    """Test the linear approximation for tiny probabilities."""
    assert p_multitrial_from_single_trial(1e-10, 100) == pytest.approx(1e-8)


def test_sidak_differs_from_bonferroni_at_large_p():
    """Test that the Sidak correction is used for large probabilities."""
    pn = 0.5
    p1 = p_single_trial_from_p_multitrial(pn, 10)

    assert p1 == pytest.approx(1 - (1 - pn) ** (1 / 10))
    assert p1 > pn / 10


def test_certain_probability():
    """Test that p = 1 stays 1."""
    assert p_multitrial_from_single_trial(1.0, 10) == pytest.approx(1.0)
    assert p_single_trial_from_p_multitrial(1.0, 10) == pytest.approx(1.0)


@pytest.mark.parametrize("p", [0.0, -0.1, 1.5])
def test_invalid_probability(p):
    """Test that probabilities outside (0, 1] are rejected."""
    with pytest.raises(InvalidInputError):
        p_multitrial_from_single_trial(p, 10)
    with pytest.raises(InvalidInputError):
        p_single_trial_from_p_multitrial(p, 10)


def test_invalid_ntrial():
    """Test that fewer than one trial is rejected."""
    with pytest.raises(InvalidInputError):
        logp_multitrial_from_single_logp(-3.0, 0)
    with pytest.raises(InvalidInputError):
        logp_single_trial_from_logp_multitrial(-3.0, 0)


def test_invalid_logp():
    """Test that positive log-probabilities are rejected."""
    with pytest.raises(InvalidInputError):
        logp_multitrial_from_single_logp(0.5, 10)
