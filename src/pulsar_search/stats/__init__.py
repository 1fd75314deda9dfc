"""Significance calibration for Z^2_n statistics."""

from .asymptotic import (
    extended_equiv_gaussian_Nsigma,
    log_asymptotic_gamma,
    log_asymptotic_incomplete_gamma,
)
from .significance import (
    chi2_logp,
    equivalent_gaussian_Nsigma,
    equivalent_gaussian_Nsigma_from_logp,
    z2_n_detection_level,
    z2_n_logprobability,
    z2_n_probability,
)
from .trials import (
    logp_multitrial_from_single_logp,
    logp_single_trial_from_logp_multitrial,
    p_multitrial_from_single_trial,
    p_single_trial_from_p_multitrial,
)

__all__ = [
    "chi2_logp",
    "z2_n_probability",
    "z2_n_logprobability",
    "z2_n_detection_level",
    "equivalent_gaussian_Nsigma",
    "equivalent_gaussian_Nsigma_from_logp",
    "extended_equiv_gaussian_Nsigma",
    "log_asymptotic_gamma",
    "log_asymptotic_incomplete_gamma",
    "logp_multitrial_from_single_logp",
    "logp_single_trial_from_logp_multitrial",
    "p_multitrial_from_single_trial",
    "p_single_trial_from_p_multitrial",
]
