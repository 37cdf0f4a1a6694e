from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from bayesci.loaders import load_csv, load_npy, load_observations


class TestLoaders:
    def test_npy_round_trips(self, tmp_path, observations) -> None:
        path = tmp_path / "obs.npy"
        np.save(path, observations)

        np.testing.assert_array_equal(load_observations(path), observations)

    def test_one_dimensional_npy_becomes_a_column(self, tmp_path) -> None:
        path = tmp_path / "vec.npy"
        np.save(path, np.arange(4.0))

        assert load_npy(path).shape == (4, 1)

    def test_three_dimensional_npy_is_rejected(self, tmp_path) -> None:
        path = tmp_path / "cube.npy"
        np.save(path, np.zeros((2, 2, 2)))

        with pytest.raises(ValueError, match="2-D"):
            load_npy(path)

    def test_csv_keeps_numeric_columns_only(self, tmp_path) -> None:
        path = tmp_path / "obs.csv"
        pd.DataFrame(
            {"id": ["a", "b", "c"], "x": [1.0, 0.0, 1.0], "y": [1, 0, 1]}
        ).to_csv(path, index=False)

        df = load_csv(path)

        assert list(df.columns) == ["x", "y"]
        assert df.shape == (3, 2)

    def test_csv_without_numeric_columns_is_rejected(self, tmp_path) -> None:
        path = tmp_path / "labels.csv"
        pd.DataFrame({"label": ["a", "b"]}).to_csv(path, index=False)

        with pytest.raises(ValueError, match="no numeric columns"):
            load_observations(path)

    def test_unsupported_extension(self, tmp_path) -> None:
        path = tmp_path / "obs.txt"
        path.write_text("1 2\n3 4\n")

        with pytest.raises(ValueError, match="Unsupported file format"):
            load_observations(path)

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ValueError, match="not found"):
            load_observations(tmp_path / "missing.npy")
