"""
bayesci -- MCMC-style pairwise causal scores.

The "bayesci" package estimates an (m x m) matrix of causal strength scores
for the m variables of an observation matrix.  A fixed-length sampling chain
draws one standard-normal variate per ordered variable pair and iteration,
discards a burn-in phase and averages the remaining draws.  The draws do not
depend on the observations, so the scores are a noise baseline rather than
an inference of causal structure.

Key exports
-----------
causal_score_estimate : function
    Core procedure.  Returns the (m, m) causal matrix as a float64 array;
    the diagonal is always zero.
CausalScoreEstimator : class
    Holds iterations / burn-in / seed and returns a CausalScoreResult.
CausalScoreResult : dataclass
    Causal matrix plus chain settings, with ``summary()`` and ``to_dict()``.
ConfigurationError : exception
    Raised in strict mode when burn-in would leave no samples.
"""

from importlib.metadata import PackageNotFoundError, version

from bayesci.estimator import (
    causal_score_estimate,
    validate_chain,
    CausalScoreEstimator,
    CausalScoreResult,
    ConfigurationError,
)

try:
    __version__ = version("bayesci")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "causal_score_estimate",
    "validate_chain",
    "CausalScoreEstimator",
    "CausalScoreResult",
    "ConfigurationError",
]
