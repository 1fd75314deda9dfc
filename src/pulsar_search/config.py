"""Configuration constants for pulsar-search."""

# Search defaults
DEFAULT_N_HARMONICS = 2
DEFAULT_OVERSAMPLE = 2.0
DEFAULT_NBIN = 16

# Grid points closer than this fraction of a step to fmax are kept
GRID_ROUNDING_TOL = 1e-9

# Detection level defaults (Z^2_2 at 1%)
DEFAULT_EPSILON = 0.01

# Multi-trial correction
BONFERRONI_LOGP_LIMIT = -7.0

# chi^2 survival: switch to asymptotic series above these reduced chi^2 values
ASYMPTOTIC_CHI2_RATIO = 15.0
ASYMPTOTIC_LARGE_DOF = 150
ASYMPTOTIC_LARGE_DOF_RATIO = 6.0

# Asymptotic incomplete gamma series
GAMMA_SERIES_TOL = 1e-15
GAMMA_SERIES_MAX_ITER = 200

# Gaussian sigma: below this log(p) the normal quantile underflows
EXTENDED_SIGMA_LOGP_LIMIT = -300.0

# Logging
LOG_LEVEL = "INFO"
