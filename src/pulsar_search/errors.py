"""Error taxonomy for pulsar-search.

Degenerate statistic inputs (fewer than two phases, an empty profile) are
not errors: the statistic functions return 0 for them.
"""


class PulsarSearchError(Exception):
    """Base class for all pulsar-search errors."""


class InvalidInputError(PulsarSearchError, ValueError):
    """Raised when an argument is outside the domain of the computation."""


class ConvergenceError(PulsarSearchError, ArithmeticError):
    """Raised when an asymptotic series does not converge.

    Attributes:
        iterations: Number of terms summed before giving up.
        last_term: Magnitude of the last term added.
    """

    def __init__(self, message: str, iterations: int, last_term: float) -> None:
        self.iterations = iterations
        self.last_term = last_term
        super().__init__(f"{message} (iterations={iterations}, last_term={last_term:.3e})")
