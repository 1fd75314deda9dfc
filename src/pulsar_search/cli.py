"""CLI for pulsar-search."""

import argparse
import logging
import sys

from pulsar_search.config import (
    DEFAULT_EPSILON,
    DEFAULT_N_HARMONICS,
    DEFAULT_OVERSAMPLE,
    LOG_LEVEL,
)
from pulsar_search.errors import PulsarSearchError

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("pulsar_search")


def load_times(path: str):
    """Load event arrival times from a CSV file, sorted.

    Uses the ``time`` column when present, otherwise the first column.
    """
    import pandas as pd

    df = pd.read_csv(path, comment="#")
    column = "time" if "time" in df.columns else df.columns[0]
    return df[column].dropna().sort_values().to_numpy(dtype=float)


def cmd_search(args: argparse.Namespace) -> int:
    """Run a Z^2_n search on an event file."""
    import numpy as np
    import pandas as pd

    from pulsar_search.search import z_n_search, z_n_search_hist
    from pulsar_search.stats import equivalent_gaussian_Nsigma_from_logp, z2_n_logprobability

    times = load_times(args.times_file)
    logger.info(f"Loaded {len(times)} events from {args.times_file}")

    if args.nbin is not None:
        freqs, stats = z_n_search_hist(
            times, args.nharm, args.fmin, args.fmax, oversample=args.oversample, nbin=args.nbin
        )
    else:
        freqs, stats = z_n_search(times, args.nharm, args.fmin, args.fmax, oversample=args.oversample)

    ntrial = len(freqs)
    best = int(np.argmax(stats))
    logp = z2_n_logprobability(stats[best], args.nharm, ntrial=ntrial)
    sigma = equivalent_gaussian_Nsigma_from_logp(logp)

    logger.info(f"Searched {ntrial} frequencies in [{args.fmin}, {args.fmax}]")
    logger.info(
        f"Best candidate: f={freqs[best]:.9f}, Z^2_{args.nharm}={stats[best]:.3f}, "
        f"log(p)={logp:.3f} ({sigma:.2f} sigma after {ntrial} trials)"
    )

    if args.output:
        pd.DataFrame({"frequency": freqs, "zsq": stats}).to_csv(args.output, index=False)
        logger.info(f"Periodogram written to: {args.output}")

    return 0


def cmd_detlev(args: argparse.Namespace) -> int:
    """Print the Z^2_n detection level."""
    from pulsar_search.stats import z2_n_detection_level

    detlev = z2_n_detection_level(
        args.nharm, args.epsilon, ntrial=args.ntrial, n_summed_spectra=args.nsummed
    )
    print(f"{detlev:.6f}")
    return 0


def cmd_prob(args: argparse.Namespace) -> int:
    """Print the noise probability of a Z^2_n value."""
    import numpy as np

    from pulsar_search.stats import equivalent_gaussian_Nsigma_from_logp, z2_n_logprobability

    logp = z2_n_logprobability(
        args.statistic, args.nharm, ntrial=args.ntrial, n_summed_spectra=args.nsummed
    )
    print(f"log(p) = {logp:.6f}")
    print(f"p      = {np.exp(logp):.6e}")
    print(f"sigma  = {equivalent_gaussian_Nsigma_from_logp(logp):.3f}")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Run reference-value validation checks."""
    from pulsar_search.validation import format_results, run_all_checks

    print("Running validation checks...")
    print()

    results = run_all_checks()
    print(format_results(results))

    # Return exit code based on failures
    failed = sum(1 for r in results if not r.passed)
    return 1 if failed > 0 else 0


def _add_trial_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--nharm",
        type=int,
        default=DEFAULT_N_HARMONICS,
        help=f"Number of harmonics (default: {DEFAULT_N_HARMONICS})",
    )
    parser.add_argument(
        "--ntrial",
        type=int,
        default=1,
        help="Number of trials (default: 1)",
    )
    parser.add_argument(
        "--nsummed",
        type=int,
        default=1,
        help="Number of summed periodograms (default: 1)",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="pulsar-search",
        description="Z^2_n pulsar searches and detection significance",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # search
    search_parser = subparsers.add_parser("search", help="Run a Z^2_n search on event times")
    search_parser.add_argument("times_file", help="CSV file with event arrival times")
    search_parser.add_argument("--fmin", type=float, required=True, help="Minimum frequency")
    search_parser.add_argument("--fmax", type=float, required=True, help="Maximum frequency")
    search_parser.add_argument(
        "--nharm",
        type=int,
        default=DEFAULT_N_HARMONICS,
        help=f"Number of harmonics (default: {DEFAULT_N_HARMONICS})",
    )
    search_parser.add_argument(
        "--oversample",
        type=float,
        default=DEFAULT_OVERSAMPLE,
        help=f"Oversampling factor (default: {DEFAULT_OVERSAMPLE})",
    )
    search_parser.add_argument(
        "--nbin",
        type=int,
        help="Pre-bin each trial into NBIN phase bins",
    )
    search_parser.add_argument("--output", type=str, help="Write the periodogram to this CSV")
    search_parser.set_defaults(func=cmd_search)

    # detlev
    detlev_parser = subparsers.add_parser("detlev", help="Print the detection level")
    _add_trial_arguments(detlev_parser)
    detlev_parser.add_argument(
        "--epsilon",
        type=float,
        default=DEFAULT_EPSILON,
        help=f"False alarm probability (default: {DEFAULT_EPSILON})",
    )
    detlev_parser.set_defaults(func=cmd_detlev)

    # prob
    prob_parser = subparsers.add_parser("prob", help="Print the noise probability of a Z^2_n value")
    prob_parser.add_argument("statistic", type=float, help="Z^2_n value")
    _add_trial_arguments(prob_parser)
    prob_parser.set_defaults(func=cmd_prob)

    # validate
    validate_parser = subparsers.add_parser("validate", help="Run validation checks")
    validate_parser.set_defaults(func=cmd_validate)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except PulsarSearchError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
