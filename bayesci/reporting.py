"""Artifact saving and heatmap figures.

Provides two utilities:
- save_artifacts: writes the chain configuration and the causal matrix to a
  JSON file (non-finite scores are stored as null).
- plot_causal_matrix: renders the causal matrix as a diverging heatmap
  centred on zero and saves it to disk.
"""

import json
from pathlib import Path
from typing import Optional, Union

import numpy as np
import matplotlib.pyplot as plt

from bayesci.config import ARTIFACT_PATH, FIG_DIR, FIG_FORMAT, HEATMAP_CMAP


def save_artifacts(result, out_path: Union[str, Path] = ARTIFACT_PATH) -> Path:
    """Write ``result.to_dict()`` as indented JSON and return the path."""
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w") as f:
        json.dump(result.to_dict(), f, indent=2)
    print(f"Wrote {out_path}")
    return out_path


def plot_causal_matrix(
    result,
    out_path: Optional[Union[str, Path]] = None,
    *,
    annotate: bool = True,
) -> Path:
    """Save a heatmap of the causal matrix.

    The colour scale is symmetric around zero and spans the largest finite
    |score|.  NaN cells are left blank.  Cell values are printed when
    *annotate* is True and the matrix is small enough to stay legible.

    Parameters
    ----------
    result : CausalScoreResult
        Output of ``CausalScoreEstimator.estimate``.
    out_path : str or Path, optional
        Destination file.  Defaults to FIG_DIR/causal_matrix.<FIG_FORMAT>.
    annotate : bool
        Print values in cells (only for m <= 12).
    """
    if out_path is None:
        out_path = FIG_DIR / f"causal_matrix.{FIG_FORMAT}"
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    C = np.asarray(result.causal_matrix, dtype=np.float64)
    m = C.shape[0]
    names = result.variable_names or [f"x{i}" for i in range(m)]

    finite = np.abs(C[np.isfinite(C)])
    vmax = float(finite.max()) if finite.size else 1.0
    if vmax == 0.0:
        vmax = 1.0

    size = max(4.0, 0.6 * m + 2.0)
    fig, ax = plt.subplots(figsize=(size + 1.0, size))
    im = ax.imshow(C, cmap=HEATMAP_CMAP, vmin=-vmax, vmax=vmax)
    fig.colorbar(im, ax=ax, label="causal score")

    ax.set_xticks(np.arange(m))
    ax.set_yticks(np.arange(m))
    ax.set_xticklabels(names, rotation=45, ha="right")
    ax.set_yticklabels(names)
    ax.set_xlabel("effect (j)")
    ax.set_ylabel("cause (i)")
    ax.set_title(
        f"Causal scores (iterations={result.iterations}, burnin={result.burnin})"
    )

    if annotate and m <= 12:
        for i in range(m):
            for j in range(m):
                if np.isfinite(C[i, j]):
                    ax.text(j, i, f"{C[i, j]:+.3f}", ha="center", va="center", fontsize=8)

    fig.tight_layout()
    fig.savefig(out_path, bbox_inches="tight")
    plt.close(fig)
    print(f"Wrote {out_path}")
    return out_path
