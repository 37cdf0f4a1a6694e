from __future__ import annotations

from collections.abc import Iterator

import numpy as np
import pytest


class SequenceGenerator:
    """Stand-in generator returning 1, 2, 3, ... in draw order."""

    def __init__(self, start: float = 1.0) -> None:
        self.next_value = start
        self.calls: list[int] = []

    def standard_normal(self, size: int) -> np.ndarray:
        self.calls.append(int(size))
        out = self.next_value + np.arange(size, dtype=np.float64)
        self.next_value += size
        return out


@pytest.fixture
def sequence_rng() -> SequenceGenerator:
    return SequenceGenerator()


@pytest.fixture
def observations() -> np.ndarray:
    # 3 observations of 2 variables, filled column by column.
    return np.array([1, 0, 1, 1, 0, 1], dtype=np.float64).reshape((3, 2), order="F")


@pytest.fixture(autouse=True)
def _in_tmp_cwd(tmp_path, monkeypatch) -> Iterator[None]:
    # Default artifact/figure paths are relative; keep them out of the repo.
    monkeypatch.chdir(tmp_path)
    yield
