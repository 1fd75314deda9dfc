"""Significance of Z^2_n values: noise probabilities, detection levels, sigmas."""

import numpy as np
from scipy.stats import chi2, norm

from pulsar_search.config import (
    ASYMPTOTIC_CHI2_RATIO,
    ASYMPTOTIC_LARGE_DOF,
    ASYMPTOTIC_LARGE_DOF_RATIO,
    DEFAULT_EPSILON,
    DEFAULT_N_HARMONICS,
    EXTENDED_SIGMA_LOGP_LIMIT,
)
from pulsar_search.errors import InvalidInputError
from pulsar_search.stats.asymptotic import (
    extended_equiv_gaussian_Nsigma,
    log_asymptotic_gamma,
    log_asymptotic_incomplete_gamma,
)
from pulsar_search.stats.trials import (
    logp_multitrial_from_single_logp,
    p_single_trial_from_p_multitrial,
)


def _check_zsq_args(n: int, n_summed_spectra: int) -> None:
    if n < 1:
        raise InvalidInputError(f"Number of harmonics must be >= 1, got {n}")
    if n_summed_spectra < 1:
        raise InvalidInputError(f"n_summed_spectra must be >= 1, got {n_summed_spectra}")


def chi2_logp(statistic: float, dof: int) -> float:
    """Log survival function of the chi-squared distribution.

    Args:
        statistic: Chi-squared value.
        dof: Degrees of freedom.

    Returns:
        Natural log of the probability of exceeding ``statistic`` by chance.

    Raises:
        ConvergenceError: In the asymptotic regime with odd ``dof``, where
            the incomplete gamma series does not terminate and can diverge
            (e.g. ``chi2_logp(40.0, 1)``). Z^2_n always has even ``dof``.
    """
    if dof <= 0:
        raise InvalidInputError(f"Degrees of freedom must be positive, got {dof}")

    # Eyeballed limits: above them the approximation is indistinguishable
    # from the exact value, while the exact evaluation starts to underflow.
    reduced = statistic / dof
    if reduced > ASYMPTOTIC_CHI2_RATIO or (
        dof > ASYMPTOTIC_LARGE_DOF and reduced > ASYMPTOTIC_LARGE_DOF_RATIO
    ):
        return log_asymptotic_incomplete_gamma(0.5 * dof, 0.5 * statistic) - log_asymptotic_gamma(
            0.5 * dof
        )

    return float(chi2.logsf(statistic, dof))


def z2_n_probability(
    statistic: float,
    n: int = DEFAULT_N_HARMONICS,
    ntrial: int = 1,
    n_summed_spectra: int = 1,
) -> float:
    """Calculate the probability of a certain folded profile, due to noise.

    Args:
        statistic: A Z^2_n statistic value.
        n: The n in Z^2_n (number of harmonics, including the fundamental).
        ntrial: Number of trials executed to find this profile.
        n_summed_spectra: Number of Z^2_n periodograms averaged to obtain
            ``statistic``.

    Returns:
        Probability that the Z^2_n value has been produced by noise.
    """
    _check_zsq_args(n, n_summed_spectra)
    epsilon_1 = chi2.sf(statistic * n_summed_spectra, 2 * n * n_summed_spectra)
    # The single-trial probability underflows to 0 for very large statistics
    with np.errstate(divide="ignore"):
        logp1 = np.log(epsilon_1)
    return float(np.exp(logp_multitrial_from_single_logp(logp1, ntrial)))


def z2_n_logprobability(
    statistic: float,
    n: int = DEFAULT_N_HARMONICS,
    ntrial: int = 1,
    n_summed_spectra: int = 1,
) -> float:
    """Natural log of the probability of a folded profile, due to noise.

    Unlike ``z2_n_probability`` this stays finite for statistics far beyond
    the range where the probability itself underflows.

    Args:
        statistic: A Z^2_n statistic value.
        n: The n in Z^2_n (number of harmonics, including the fundamental).
        ntrial: Number of trials executed to find this profile.
        n_summed_spectra: Number of Z^2_n periodograms averaged to obtain
            ``statistic``.

    Returns:
        Log of the probability that the Z^2_n value has been produced by noise.
    """
    _check_zsq_args(n, n_summed_spectra)
    epsilon_1 = chi2_logp(statistic * n_summed_spectra, 2 * n * n_summed_spectra)
    return logp_multitrial_from_single_logp(epsilon_1, ntrial)


def z2_n_detection_level(
    n: int = DEFAULT_N_HARMONICS,
    epsilon: float = DEFAULT_EPSILON,
    ntrial: int = 1,
    n_summed_spectra: int = 1,
) -> float:
    """Return the detection level for the Z^2_n statistics.

    See Buccheri et al. (1983), Bendat and Piersol (1971).

    Args:
        n: The n in Z^2_n (number of harmonics, including the fundamental).
        epsilon: Fractional probability that the signal has been produced
            by noise.
        ntrial: Number of trials executed to find this profile.
        n_summed_spectra: Number of Z^2_n periodograms being averaged.

    Returns:
        Statistic value corresponding to a probability ``epsilon`` that the
        signal has been produced by noise.
    """
    _check_zsq_args(n, n_summed_spectra)
    epsilon = p_single_trial_from_p_multitrial(epsilon, ntrial)
    return float(chi2.isf(epsilon, 2 * n_summed_spectra * n) / n_summed_spectra)


def equivalent_gaussian_Nsigma_from_logp(logp: float) -> float:
    """Number of Gaussian sigmas corresponding to a tail log-probability.

    Turns the one-tailed probability into the distance from the mean of a
    standard Gaussian, in standard deviations, with the same tail
    probability. This allows statements such as "detected at 4.1 sigma".

    Args:
        logp: Natural log of the tail probability.

    Returns:
        Equivalent number of sigmas.
    """
    if np.isnan(logp) or logp > 0:
        raise InvalidInputError(f"Log-probability must be <= 0, got {logp}")
    if logp < EXTENDED_SIGMA_LOGP_LIMIT:
        return extended_equiv_gaussian_Nsigma(logp)

    return float(norm.isf(np.exp(logp)))


def equivalent_gaussian_Nsigma(p: float) -> float:
    """Number of Gaussian sigmas corresponding to a tail probability."""
    if not 0 < p <= 1:
        raise InvalidInputError(f"Probability must be in (0, 1], got {p}")
    return equivalent_gaussian_Nsigma_from_logp(np.log(p))
