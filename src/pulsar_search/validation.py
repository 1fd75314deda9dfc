"""Reference-value sanity checks for pulsar-search."""

from dataclasses import dataclass

import numpy as np
from scipy.stats import chi2

from pulsar_search.search import z_n, z_n_binned
from pulsar_search.stats import (
    chi2_logp,
    equivalent_gaussian_Nsigma,
    p_multitrial_from_single_trial,
    p_single_trial_from_p_multitrial,
    z2_n_detection_level,
    z2_n_probability,
)

# Z^2_2 at 1% false alarm probability, single trial
REFERENCE_DETECTION_LEVEL = 13.276704135987625

# Tail probabilities obtained by integrating the Gaussian PDF with mpmath
REFERENCE_SIGMAS = {
    1: 0.15865525393145707,
    3: 0.0013498980316301035,
    6: 9.865877e-10,
    8: 6.22096e-16,
    25: 3.0567e-138,
}

TRIAL_COUNTS = [1, 10, 100, 1000, 10000, 100000]


@dataclass
class CheckResult:
    """Result of a validation check.

    Attributes:
        name: Unique identifier for the check.
        status: One of "pass", "fail", "warn", "skip".
        message: Human-readable result message.
        details: Optional dict with additional data.
    """

    name: str
    status: str  # "pass", "fail", "warn", "skip"
    message: str
    details: dict | None = None

    @property
    def passed(self) -> bool:
        """True if status is pass or warn (not a failure)."""
        return self.status in ("pass", "warn", "skip")


def _status(ok: bool) -> str:
    return "pass" if ok else "fail"


def check_statistic_regressions() -> list[CheckResult]:
    """Check closed-form Z^2_n values."""
    cases = [
        ("zn_single_phase", z_n([0.5], 2), 0.0),
        ("zn_same_phase", z_n(np.ones(10), 2), 40.0),
        ("zn_binned_empty", z_n_binned(np.zeros(10), 2), 0.0),
        ("zn_binned_single_bin", z_n_binned([10.0, 0.0, 0.0, 0.0, 0.0], 2), 40.0),
    ]
    results = []
    for name, value, expected in cases:
        results.append(CheckResult(
            name=name,
            status=_status(abs(value - expected) < 1e-10),
            message=f"{name} = {value:.6g} (expected {expected:g})",
        ))

    uniform = z_n(np.arange(1, 11) / 10, 2)
    results.append(CheckResult(
        name="zn_uniform_phases",
        status=_status(uniform < 1e-10),
        message=f"zn_uniform_phases = {uniform:.3e} (expected < 1e-10)",
    ))
    return results


def check_detection_level() -> list[CheckResult]:
    """Check the Z^2_2 detection level and its inverse."""
    results = []

    detlev = z2_n_detection_level(2)
    results.append(CheckResult(
        name="detlev_reference",
        status=_status(np.isclose(detlev, REFERENCE_DETECTION_LEVEL)),
        message=f"Z^2_2 detection level at 1% = {detlev:.10f} (expected {REFERENCE_DETECTION_LEVEL:.10f})",
    ))

    worst = 0.0
    for ntrial in TRIAL_COUNTS:
        level = z2_n_detection_level(2, 0.1, ntrial=ntrial)
        worst = max(worst, abs(z2_n_probability(level, 2, ntrial=ntrial) - 0.1))
    results.append(CheckResult(
        name="detlev_inverse",
        status=_status(worst < 1e-6),
        message=f"Detection level / probability inverse: max deviation {worst:.3e}",
        details={"trials": TRIAL_COUNTS},
    ))
    return results


def check_trial_round_trip(epsilon_1: float = 1e-8) -> list[CheckResult]:
    """Check single-trial -> multi-trial -> single-trial conversions."""
    results = []
    for ntrial in TRIAL_COUNTS:
        epsilon_n = p_multitrial_from_single_trial(epsilon_1, ntrial)
        corrected = p_single_trial_from_p_multitrial(epsilon_n, ntrial)
        rel = abs(corrected - epsilon_1) / epsilon_1
        results.append(CheckResult(
            name=f"trials_round_trip_{ntrial}",
            status=_status(rel < 1e-2),
            message=f"ntrial={ntrial}: {epsilon_1:g} -> {epsilon_n:.6g} -> {corrected:.6g}",
            details={"relative_error": rel},
        ))
    return results


def check_gaussian_sigmas() -> list[CheckResult]:
    """Check tail probabilities against tabulated Gaussian sigmas."""
    results = []
    for sigma, p in REFERENCE_SIGMAS.items():
        value = equivalent_gaussian_Nsigma(p)
        results.append(CheckResult(
            name=f"sigma_{sigma}",
            status=_status(abs(value - sigma) < 0.1),
            message=f"p={p:.6g} -> {value:.4f} sigma (expected {sigma})",
        ))
    return results


def check_chi2_regimes() -> list[CheckResult]:
    """Compare chi2_logp with scipy on both sides of the asymptotic switch."""
    # (statistic, dof): direct, direct, asymptotic, asymptotic, large-dof asymptotic
    cases = [(5.0, 2), (20.0, 4), (31.0, 2), (100.0, 4), (1300.0, 200)]
    results = []
    for statistic, dof in cases:
        value = chi2_logp(statistic, dof)
        exact = float(chi2.logsf(statistic, dof))
        results.append(CheckResult(
            name=f"chi2_logp_{statistic:g}_{dof}",
            status=_status(abs(value - exact) < 0.1),
            message=f"chi2_logp({statistic:g}, {dof}) = {value:.4f}, scipy = {exact:.4f}",
        ))
    return results


def run_all_checks() -> list[CheckResult]:
    """Run all validation checks."""
    results = []
    results.extend(check_statistic_regressions())
    results.extend(check_detection_level())
    results.extend(check_trial_round_trip())
    results.extend(check_gaussian_sigmas())
    results.extend(check_chi2_regimes())
    return results


def format_results(results: list[CheckResult]) -> str:
    """Format check results for display."""
    lines = []
    lines.append("=" * 60)
    lines.append("PULSAR SEARCH VALIDATION")
    lines.append("=" * 60)

    passed = sum(1 for r in results if r.status == "pass")
    failed = sum(1 for r in results if r.status == "fail")

    # Group by category
    categories = {}
    for r in results:
        category = r.name.split("_")[0]
        categories.setdefault(category, []).append(r)

    for category, checks in categories.items():
        lines.append("")
        lines.append(f"[{category.upper()}]")
        for r in checks:
            lines.append(f"  [{r.status.upper()}] {r.message}")

    lines.append("")
    lines.append("=" * 60)
    lines.append(f"SUMMARY: {passed} passed, {failed} failed")
    lines.append("=" * 60)

    return "\n".join(lines)
