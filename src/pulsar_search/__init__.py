"""Z^2_n pulsar searches and detection significance."""

from .search import frequency_grid, z_n, z_n_binned, z_n_search, z_n_search_hist
from .stats import (
    chi2_logp,
    equivalent_gaussian_Nsigma,
    equivalent_gaussian_Nsigma_from_logp,
    logp_multitrial_from_single_logp,
    logp_single_trial_from_logp_multitrial,
    p_multitrial_from_single_trial,
    p_single_trial_from_p_multitrial,
    z2_n_detection_level,
    z2_n_logprobability,
    z2_n_probability,
)

__version__ = "0.1.0"

__all__ = [
    "z_n",
    "z_n_binned",
    "frequency_grid",
    "z_n_search",
    "z_n_search_hist",
    "chi2_logp",
    "z2_n_probability",
    "z2_n_logprobability",
    "z2_n_detection_level",
    "equivalent_gaussian_Nsigma",
    "equivalent_gaussian_Nsigma_from_logp",
    "logp_multitrial_from_single_logp",
    "logp_single_trial_from_logp_multitrial",
    "p_multitrial_from_single_trial",
    "p_single_trial_from_p_multitrial",
]
