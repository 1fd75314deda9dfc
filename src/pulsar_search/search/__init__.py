"""Z^2_n statistic engine for pulsar-search."""

from .periodogram import frequency_grid, z_n_search, z_n_search_hist
from .zn import z_n, z_n_binned

__all__ = [
    "z_n",
    "z_n_binned",
    "frequency_grid",
    "z_n_search",
    "z_n_search_hist",
]
