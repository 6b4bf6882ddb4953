"""
Тесты фабрики алгоритмов и параметров запуска.
"""

from pathlib import Path

import numpy as np
import pytest

from clustering.core import FastKMeans, KMeans, RandomSwap, StochasticRelaxation
from clustering.experiments.config import (
    AlgorithmId,
    RunConfig,
    default_output_path,
    make_algorithm,
)


class TestMakeAlgorithm:
    """Тесты make_algorithm."""

    @pytest.mark.parametrize(
        "algorithm_id, expected",
        [
            ("km", KMeans),
            ("fkm", FastKMeans),
            ("rs", RandomSwap),
            ("sr", StochasticRelaxation),
            (AlgorithmId.RANDOM_SWAP, RandomSwap),
        ],
    )
    def test_known_ids(self, algorithm_id, expected):
        algorithm = make_algorithm(algorithm_id)
        assert type(algorithm) is expected
        assert algorithm.name == AlgorithmId(algorithm_id).value

    def test_unknown_id(self):
        with pytest.raises(ValueError):
            make_algorithm("kmedoids")

    def test_temperature_alpha_passed_to_relaxation(self):
        algorithm = make_algorithm("sr", temperature_alpha=0.5)
        assert algorithm.temperature_alpha == 0.5

    def test_temperature_alpha_ignored_by_others(self):
        algorithm = make_algorithm("km", temperature_alpha=0.5)
        assert isinstance(algorithm, KMeans)

    def test_rng_passed(self):
        rng = np.random.default_rng(0)
        assert make_algorithm("rs", rng=rng).rng is rng


class TestOutputPath:
    def test_default_output_path(self):
        assert default_output_path("data/s2.txt") == Path("s2-centroids.txt")

    def test_explicit_output_path(self, tmp_path):
        config = RunConfig(
            input_path=Path("data/s2.txt"),
            n_clusters=15,
            output_path=tmp_path / "out.txt",
        )
        assert config.resolved_output_path() == tmp_path / "out.txt"

    def test_defaults(self):
        config = RunConfig(input_path=Path("a.txt"), n_clusters=3)
        assert config.algorithm is AlgorithmId.FAST_KMEANS
        assert config.repeats == 1
        assert config.resolved_output_path() == Path("a-centroids.txt")
