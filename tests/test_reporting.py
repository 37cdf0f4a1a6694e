from __future__ import annotations

import json

import numpy as np

from bayesci import CausalScoreEstimator
from bayesci.config import ARTIFACT_PATH, FIG_DIR, FIG_FORMAT
from bayesci.reporting import plot_causal_matrix, save_artifacts


class TestSaveArtifacts:
    def test_writes_config_and_matrix(self, tmp_path, observations, capsys) -> None:
        result = CausalScoreEstimator(50, 10).estimate(observations)
        path = save_artifacts(result, tmp_path / "out" / "scores.json")

        payload = json.loads(path.read_text())
        assert payload["config"]["n_retained"] == 40
        np.testing.assert_allclose(payload["causal_matrix"], result.causal_matrix)
        assert "Wrote" in capsys.readouterr().out

    def test_default_path_is_relative_to_cwd(self, observations) -> None:
        result = CausalScoreEstimator(5, 5).estimate(observations)
        path = save_artifacts(result)

        assert path == ARTIFACT_PATH
        assert json.loads(path.read_text())["causal_matrix"] == [[None, None], [None, None]]


class TestPlotCausalMatrix:
    def test_writes_figure(self, tmp_path, observations) -> None:
        result = CausalScoreEstimator(50, 10).estimate(observations)
        path = plot_causal_matrix(result, tmp_path / "heat.png")

        assert path.exists()
        assert path.stat().st_size > 0

    def test_default_path_and_all_nan_matrix(self, observations) -> None:
        result = CausalScoreEstimator(5, 5).estimate(observations)
        path = plot_causal_matrix(result)

        assert path == FIG_DIR / f"causal_matrix.{FIG_FORMAT}"
        assert path.exists()

    def test_large_matrix_without_annotations(self, tmp_path) -> None:
        result = CausalScoreEstimator(5, 1).estimate(np.ones((2, 20)))

        assert plot_causal_matrix(result, tmp_path / "big.png").exists()
