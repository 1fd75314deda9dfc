"""Z^2_n statistic on event phases and on binned pulse profiles."""

import numpy as np

from pulsar_search.errors import InvalidInputError


def _check_harmonics(n: int) -> None:
    if n < 1:
        raise InvalidInputError(f"Number of harmonics must be >= 1, got {n}")


def z_n(phases, n: int) -> float:
    """Z^2_n statistic, a la Buccheri+83, A&A, 128, 245, eq. 2.

    Args:
        phases: Phases of the events. Need not be wrapped to [0, 1).
        n: Number of harmonics, including the fundamental.

    Returns:
        The Z^2_n statistic. 0.0 when fewer than two phases are given.
    """
    _check_harmonics(n)
    phases = np.asarray(phases, dtype=np.float64)
    N = phases.size
    if N < 2:
        return 0.0

    twopiphase = 2 * np.pi * phases
    z = 0.0
    for k in range(1, n + 1):
        s = np.sum(np.sin(k * twopiphase))
        c = np.sum(np.cos(k * twopiphase))
        z += c**2 + s**2

    return float(z * 2 / N)


def z_n_binned(profile, n: int) -> float:
    """Z^2_n statistic for pulse profiles from binned events.

    See Bachetti+2021, arXiv:2012.11397. Each bin is placed at phase i/N.

    Args:
        profile: Folded pulse profile (number of photons in each pulse bin).
        n: Number of harmonics, including the fundamental.

    Returns:
        The Z^2_n statistic. 0.0 when the profile holds no events.
    """
    _check_harmonics(n)
    profile = np.asarray(profile, dtype=np.float64)
    N = profile.size
    if N < 1:
        raise InvalidInputError("Profile must contain at least one bin")
    if np.any(profile < 0):
        raise InvalidInputError("Profile counts must be non-negative")

    total = profile.sum()
    if total == 0:
        return 0.0

    phase = np.arange(N) * (2 * np.pi / N)
    z = 0.0
    for k in range(1, n + 1):
        s = np.sum(profile * np.sin(k * phase))
        c = np.sum(profile * np.cos(k * phase))
        z += c**2 + s**2

    return float(z * 2 / total)
