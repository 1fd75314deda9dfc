"""Asymptotic approximations used when exact evaluation underflows.

Adapted from Scott Ransom's PRESTO.
"""

import numpy as np

from pulsar_search.config import GAMMA_SERIES_MAX_ITER, GAMMA_SERIES_TOL
from pulsar_search.errors import ConvergenceError

# (1/2) * log(2 * pi)
HALF_LOG_TWOPI = 0.91893853320467267
ONE_TWELFTH = 8.3333333333333333333333e-2
ONE_OVER_360 = 2.7777777777777777777778e-3
ONE_OVER_1260 = 7.9365079365079365079365e-4
ONE_OVER_1680 = 5.9523809523809529e-4


def log_asymptotic_incomplete_gamma(
    a: float,
    z: float,
    tol: float = GAMMA_SERIES_TOL,
    max_iter: int = GAMMA_SERIES_MAX_ITER,
) -> float:
    """Natural log of the upper incomplete gamma function as z -> infinity.

    Abramowitz and Stegun eqn 6.5.32. The series terminates exactly when
    ``a`` is a positive integer; otherwise it is only asymptotic, and a
    ``ConvergenceError`` is raised if its terms never drop below ``tol``.

    Args:
        a: Shape parameter.
        z: Lower integration limit.
        tol: Magnitude below which a term ends the summation.
        max_iter: Maximum number of terms to sum.

    Returns:
        log(Gamma(a, z)).
    """
    x = 1.0
    term = 1.0
    for i in range(1, max_iter + 1):
        term *= (a - i) / z
        if not np.isfinite(term):
            raise ConvergenceError(
                f"Incomplete gamma series diverged for a={a}, z={z}", i, abs(term)
            )
        x += term
        if abs(term) < tol:
            break
    else:
        raise ConvergenceError(
            f"Incomplete gamma series did not converge for a={a}, z={z}", max_iter, abs(term)
        )

    return float((a - 1.0) * np.log(z) - z + np.log(x))


def log_asymptotic_gamma(z: float) -> float:
    """Natural log of the gamma function in its asymptotic limit (A&S 6.1.41)."""
    x = (z - 0.5) * np.log(z) - z + HALF_LOG_TWOPI
    y = 1.0 / (z * z)
    x += (((-ONE_OVER_1680 * y + ONE_OVER_1260) * y - ONE_OVER_360) * y + ONE_TWELFTH) / z
    return float(x)


def extended_equiv_gaussian_Nsigma(logp: float) -> float:
    """Equivalent gaussian sigma for a very small log-probability.

    Rational approximation from Abramowitz and Stegun eqn 26.2.23, precise
    to ~1e-4. The coefficients are a best fit with no physical meaning.
    Taking log(p) as input extends the range far below the smallest float.
    """
    t = np.sqrt(-2.0 * logp)
    num = 2.515517 + t * (0.802853 + t * 0.010328)
    denom = 1.0 + t * (1.432788 + t * (0.189269 + t * 0.001308))
    return float(t - num / denom)
