"""MCMC-style estimator of pairwise causal scores.

Given an (n, m) observation matrix, the estimator runs a fixed-length
sampling chain.  Every iteration draws one standard-normal variate per
ordered variable pair (i, j), i != j, discards the first ``burnin``
iterations and averages the rest into an (m, m) causal matrix.

Only the column count of the observations is used: the draws are
independent of the data, so the scores are means of pure noise.  The
diagonal is never sampled and stays exactly zero.

Two interfaces:

1. Plain function (returns the matrix)::

    from bayesci import causal_score_estimate
    C = causal_score_estimate(X, iterations=1000, burnin=200)

2. Estimator object (returns a result with metadata)::

    from bayesci import CausalScoreEstimator
    result = CausalScoreEstimator(1000, 200).estimate(X)
    print(result.summary())
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from bayesci.config import DEFAULT_BURNIN, DEFAULT_ITERATIONS, DTYPE, SEED


class ConfigurationError(ValueError):
    """Raised in strict mode when iterations/burnin cannot give a finite mean."""


# -- Helpers --


def _as_observations(data) -> np.ndarray:
    """View *data* as a 2-D array without copying or converting values."""
    X = np.asarray(data)
    if X.ndim != 2:
        raise ValueError(
            f"observation matrix must be 2-D (rows x variables), got shape {X.shape}"
        )
    return X


def _offdiag_indices(m: int) -> Tuple[np.ndarray, np.ndarray]:
    """Row and column indices of the off-diagonal cells, in row-major order."""
    # np.nonzero walks the mask in C order: i outer, j inner.
    return np.nonzero(~np.eye(m, dtype=bool))


def _is_int(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def validate_chain(iterations, burnin) -> None:
    """Check that the chain keeps at least one sample after burn-in.

    Raises
    ------
    ConfigurationError
        If either value is not an integer, ``burnin < 0`` or
        ``burnin >= iterations``.
    """
    if not _is_int(iterations) or not _is_int(burnin):
        raise ConfigurationError(
            f"iterations and burnin must be integers, got "
            f"{type(iterations).__name__} and {type(burnin).__name__}"
        )
    if burnin < 0:
        raise ConfigurationError(f"burnin must be >= 0, got {burnin}")
    if burnin >= iterations:
        raise ConfigurationError(
            f"burnin ({burnin}) must be smaller than iterations ({iterations}); "
            f"no samples would be retained"
        )


# -- Core function --


def causal_score_estimate(
    data,
    iterations: int,
    burnin: int,
    *,
    seed: Optional[int] = SEED,
    rng=None,
    strict: bool = False,
) -> np.ndarray:
    """Average post-burn-in normal draws into an (m, m) causal matrix.

    Parameters
    ----------
    data : (n, m) array-like
        Observation matrix.  Only its column count m is used.
    iterations : int
        Chain length, burn-in included.
    burnin : int
        Number of leading iterations whose draws are discarded.
    seed : int or None
        Seed for a fresh ``numpy.random.default_rng``.  None draws OS entropy.
    rng : object, optional
        Generator to use instead of building one from *seed*.  Anything with a
        ``standard_normal(size)`` method works.
    strict : bool
        Validate ``0 <= burnin < iterations`` and raise ConfigurationError
        instead of returning non-finite values.

    Returns
    -------
    (m, m) float64 array.  The diagonal is zero.  With ``iterations == burnin``
    every entry is NaN; with ``burnin > iterations`` every entry is -0.0.
    """
    X = _as_observations(data)
    m = X.shape[1]
    if strict:
        validate_chain(iterations, burnin)
    if rng is None:
        rng = np.random.default_rng(seed)

    causal_matrix = np.zeros((m, m), dtype=DTYPE)
    rows, cols = _offdiag_indices(m)
    n_draws = rows.size

    for it in range(iterations):
        # Fresh scratch matrix per iteration; draws land in row-major order.
        current = np.zeros((m, m), dtype=DTYPE)
        if n_draws:
            current[rows, cols] = rng.standard_normal(n_draws)
        if it >= burnin:
            causal_matrix += current

    # 0/0 gives NaN and 0/negative gives -0.0; both are part of the contract.
    with np.errstate(divide="ignore", invalid="ignore"):
        causal_matrix /= iterations - burnin
    return causal_matrix


# -- Result dataclass --


@dataclass
class CausalScoreResult:
    """Causal matrix plus the chain settings that produced it."""

    causal_matrix: np.ndarray
    iterations: int
    burnin: int
    seed: Optional[int]
    variable_names: List[str] = field(default_factory=list)

    @property
    def n_variables(self) -> int:
        return int(self.causal_matrix.shape[0])

    @property
    def n_retained(self) -> int:
        """Number of accumulated samples (the normalizing denominator)."""
        return int(self.iterations - self.burnin)

    def summary(self) -> str:
        """Return a readable table of the causal matrix."""
        names = self.variable_names or [f"x{i}" for i in range(self.n_variables)]
        width = max([9] + [len(str(n)) for n in names])
        lines = [
            f"Causal score estimate  (m={self.n_variables}, "
            f"iterations={self.iterations}, burnin={self.burnin}, "
            f"retained={self.n_retained}, seed={self.seed})",
        ]
        if self.n_retained <= 0:
            lines.append(
                "  warning: no samples retained after burn-in; scores are not finite means"
            )
        lines.append("")
        lines.append(" " * width + "".join(f"  {str(n):>{width}s}" for n in names))
        lines.append("-" * (width + (width + 2) * len(names)))
        for i, name in enumerate(names):
            cells = "".join(
                f"  {self.causal_matrix[i, j]:+{width}.4f}" for j in range(len(names))
            )
            lines.append(f"{str(name):>{width}s}{cells}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """JSON-serializable view.  Non-finite scores become None."""
        matrix = [
            [float(v) if np.isfinite(v) else None for v in row]
            for row in self.causal_matrix
        ]
        return {
            "config": {
                "iterations": int(self.iterations),
                "burnin": int(self.burnin),
                "seed": self.seed,
                "n_retained": self.n_retained,
            },
            "variable_names": [str(n) for n in self.variable_names],
            "causal_matrix": matrix,
        }


class CausalScoreEstimator:
    """Reusable chain configuration.

    Each call to :meth:`estimate` builds its own generator from ``seed``, so
    one estimator can be shared across threads and repeated calls return the
    same matrix.
    """

    def __init__(
        self,
        iterations: int = DEFAULT_ITERATIONS,
        burnin: int = DEFAULT_BURNIN,
        *,
        seed: Optional[int] = SEED,
        strict: bool = False,
    ):
        if strict:
            validate_chain(iterations, burnin)
        self.iterations = iterations
        self.burnin = burnin
        self.seed = seed
        self.strict = strict

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(iterations={self.iterations}, "
            f"burnin={self.burnin}, seed={self.seed}, strict={self.strict})"
        )

    def estimate(self, data, *, rng=None) -> CausalScoreResult:
        """Run the chain on *data* and wrap the matrix in a CausalScoreResult."""
        names = [str(c) for c in getattr(data, "columns", [])]
        C = causal_score_estimate(
            data,
            self.iterations,
            self.burnin,
            seed=self.seed,
            rng=rng,
            strict=self.strict,
        )
        return CausalScoreResult(
            causal_matrix=C,
            iterations=self.iterations,
            burnin=self.burnin,
            seed=self.seed,
            variable_names=names,
        )


# -- CLI --


def _parse_seed(text: str) -> Optional[int]:
    if text.strip().lower() == "none":
        return None
    try:
        return int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"seed must be an integer or 'none', got {text!r}")


def main(argv: Optional[List[str]] = None) -> None:
    from bayesci.loaders import load_observations
    from bayesci.reporting import plot_causal_matrix, save_artifacts

    parser = argparse.ArgumentParser(
        description="MCMC-style pairwise causal score estimation."
    )
    parser.add_argument(
        "--data",
        required=True,
        help="Path to observation matrix (.npy or .csv)",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=DEFAULT_ITERATIONS,
        help=f"Chain length including burn-in (default: {DEFAULT_ITERATIONS})",
    )
    parser.add_argument(
        "--burnin",
        type=int,
        default=DEFAULT_BURNIN,
        help=f"Discarded leading iterations (default: {DEFAULT_BURNIN})",
    )
    parser.add_argument(
        "--seed", type=_parse_seed, default=SEED, help=f"Random seed or 'none' (default: {SEED})"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject burnin < 0 or burnin >= iterations instead of returning NaN/-0.0",
    )
    parser.add_argument("--out", default=None, help="Write a JSON artifact to this path")
    parser.add_argument("--plot", default=None, help="Write a heatmap figure to this path")
    args = parser.parse_args(argv)

    try:
        X = load_observations(args.data)
        estimator = CausalScoreEstimator(
            args.iterations, args.burnin, seed=args.seed, strict=args.strict
        )
        result = estimator.estimate(X)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)

    print(result.summary())

    if args.out:
        save_artifacts(result, args.out)
    if args.plot:
        plot_causal_matrix(result, args.plot)


if __name__ == "__main__":
    main()
