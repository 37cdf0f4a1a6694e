"""Package-wide constants for the causal score estimator.

This module centralizes every tuneable default -- seed, chain length,
burn-in, figure settings -- so that the estimator, the CLI and the example
scripts import a single source of truth.  Every constant can be overridden
per call through keyword arguments; nothing here is read from the
environment.
"""

from pathlib import Path

# Force the non-interactive Agg backend so figure rendering works in
# headless environments (CI, remote servers) without an X display.
import matplotlib
matplotlib.use("Agg")

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Default random seed.  Every call builds its own generator from this value,
# so two calls with the same arguments return identical matrices.  Pass
# seed=None to draw fresh entropy from the operating system instead.
SEED = 42

# Default number of sampling iterations (chain length), including burn-in.
DEFAULT_ITERATIONS = 1000

# Default number of leading iterations whose samples are discarded before
# accumulation starts.  Retained samples = iterations - burnin.
DEFAULT_BURNIN = 200

# Floating-point type of the returned causal matrix.
DTYPE = "float64"

# --- Figure and artifact output -------------------------------------------

# Directory where heatmaps are written when no explicit path is given.
FIG_DIR = Path("figures")

# Image format for saved figures (e.g. "png", "pdf", "svg").
FIG_FORMAT = "png"

# Diverging colormap for the causal matrix heatmap.  Scores are centred on
# zero, so a symmetric colour scale is used.
HEATMAP_CMAP = "RdBu_r"

# Default file name for the JSON artifact written by save_artifacts().
ARTIFACT_PATH = Path("causal_scores.json")
