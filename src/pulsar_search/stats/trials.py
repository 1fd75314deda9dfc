"""Multiple-trials corrections between single-trial and global p-values."""

import numpy as np

from pulsar_search.config import BONFERRONI_LOGP_LIMIT
from pulsar_search.errors import InvalidInputError


def _check_ntrial(n: int) -> None:
    if n < 1:
        raise InvalidInputError(f"Number of trials must be >= 1, got {n}")


def _check_logp(logp: float) -> None:
    if np.isnan(logp) or logp > 0:
        raise InvalidInputError(f"Log-probability must be <= 0, got {logp}")


def _check_probability(p: float) -> None:
    if not 0 < p <= 1:
        raise InvalidInputError(f"Probability must be in (0, 1], got {p}")


def logp_multitrial_from_single_logp(logp1: float, n: int) -> float:
    """Calculate a multi-trial log p-value from the log of a single-trial one.

    Calling p the probability of a single success, the probability of at
    least one success in n independent trials is 1 - (1 - p)^n. When
    p * n is tiny the Bonferroni approximation p * n is used instead.

    Args:
        logp1: Natural log of the significance at which we reject the null
            hypothesis on each single trial.
        n: Number of trials.

    Returns:
        Log of the significance at which we reject the null hypothesis
        after multiple trials.
    """
    _check_logp(logp1)
    _check_ntrial(n)

    logn = np.log(n)
    if logp1 + logn < BONFERRONI_LOGP_LIMIT:
        return float(logp1 + logn)

    # log(1 - (1 - p1)^n); p1 == 1 gives log1p(-1) == -inf
    with np.errstate(divide="ignore"):
        return float(np.log(-np.expm1(n * np.log1p(-np.exp(logp1)))))


def logp_single_trial_from_logp_multitrial(logpn: float, n: int) -> float:
    """Calculate a single-trial log p-value from the log of a multi-trial one.

    Inverts ``logp_multitrial_from_single_logp``: p1 = 1 - (1 - pn)^(1/n)
    (Sidak correction), or pn / n (Bonferroni) when pn is tiny.

    Args:
        logpn: Natural log of the significance at which we want to reject
            the null hypothesis after multiple trials.
        n: Number of trials.

    Returns:
        Log of the significance at which we reject the null hypothesis on
        each single trial.
    """
    _check_logp(logpn)
    _check_ntrial(n)

    logn = np.log(n)
    if logpn < BONFERRONI_LOGP_LIMIT:
        return float(logpn - logn)

    # log(1 - (1 - pn)^(1/n))
    with np.errstate(divide="ignore"):
        return float(np.log(-np.expm1(np.log1p(-np.exp(logpn)) / n)))


def p_multitrial_from_single_trial(p1: float, n: int) -> float:
    """Calculate a multi-trial p-value from a single-trial one.

    Args:
        p1: Significance at which we reject the null hypothesis on each
            single trial.
        n: Number of trials.

    Returns:
        Significance at which we reject the null hypothesis after
        multiple trials.
    """
    _check_probability(p1)
    return float(np.exp(logp_multitrial_from_single_logp(np.log(p1), n)))


def p_single_trial_from_p_multitrial(pn: float, n: int) -> float:
    """Calculate the single-trial p-value from a total p-value.

    If we want a 1% probability of a false detection over a whole
    periodogram, each trial must be thresholded at a correspondingly
    smaller probability. Dividing by n (Bonferroni) is a good approximation
    only when pn is low; otherwise the binomial problem is inverted exactly
    (Sidak correction).

    Args:
        pn: Significance at which we want to reject the null hypothesis
            after multiple trials.
        n: Number of trials.

    Returns:
        Significance at which we reject the null hypothesis on each
        single trial.
    """
    _check_probability(pn)
    return float(np.exp(logp_single_trial_from_logp_multitrial(np.log(pn), n)))
