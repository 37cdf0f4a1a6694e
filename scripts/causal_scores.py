"""Causal score estimator -- thin wrapper around bayesci.estimator.

This top-level convenience module re-exports the public API from
``bayesci.estimator`` so that ``python scripts/causal_scores.py`` works from
the repository root without installing the package's console script.

CLI usage::

    python scripts/causal_scores.py --data data.csv --iterations 1000 --burnin 200

For library usage::

    from bayesci import causal_score_estimate, CausalScoreEstimator
"""

import os
import sys

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, REPO_ROOT)

from bayesci.estimator import (  # noqa: E402,F401
    causal_score_estimate,
    CausalScoreEstimator,
    CausalScoreResult,
    ConfigurationError,
    main,
)

if __name__ == "__main__":
    main()
