"""
Тесты Stochastic Relaxation.
"""

import numpy as np
import pytest

from clustering.core.errors import ValidationError
from clustering.core.kmeans import KMeans
from clustering.core.stochastic_relaxation import StochasticRelaxation
from clustering.data.dataset import Dataset


class TestStochasticRelaxation:
    """Тесты алгоритма стохастической релаксации."""

    @pytest.mark.parametrize("alpha", [0.0, 1.0, -0.5, 1.5])
    def test_invalid_alpha(self, alpha):
        with pytest.raises(ValidationError):
            StochasticRelaxation(alpha)

    def test_default_alpha(self):
        assert StochasticRelaxation().temperature_alpha == 0.975

    def test_temperature_decays(self):
        model = StochasticRelaxation(0.5)
        assert model.temperature(1) == 0.5
        assert model.temperature(3) == 0.125

    def test_ends_in_kmeans_fixed_point(self, blob_dataset):
        blob_dataset.initialize_random_centroids()
        StochasticRelaxation(0.9).cluster(blob_dataset)
        centroids = blob_dataset.centroids.copy()

        model = KMeans()
        model.cluster(blob_dataset)
        assert model.n_iters_actual == 1
        np.testing.assert_array_equal(blob_dataset.centroids, centroids)

    def test_iteration_cap(self, blob_dataset):
        blob_dataset.initialize_random_centroids()
        model = StochasticRelaxation()
        model.cluster(blob_dataset, 5)
        assert model.n_iters_actual <= 5

    def test_empty_cluster_relocated(self):
        dataset = Dataset([[0.0], [1.0], [2.0], [3.0]], 2, rng=np.random.default_rng(1))
        dataset.centroids = [[1.5], [100.0]]
        dataset.partition()

        model = StochasticRelaxation()
        model.cluster(dataset, 1)
        assert model.relocations == 1

    def test_zero_distortion_converges_immediately(self):
        dataset = Dataset([[0.0, 0.0], [5.0, 5.0]], 2)
        dataset.centroids = [[0.0, 0.0], [5.0, 5.0]]
        model = StochasticRelaxation()
        model.cluster(dataset)
        assert model.converged
        assert model.n_iters_actual == 1
        np.testing.assert_array_equal(dataset.centroids, [[0.0, 0.0], [5.0, 5.0]])

    def test_injected_rng_is_reproducible(self, blob_dataset):
        blob_dataset.initialize_random_centroids()
        a = blob_dataset.copy()
        b = blob_dataset.copy()
        StochasticRelaxation(0.9, rng=np.random.default_rng(4)).cluster(a, 50)
        StochasticRelaxation(0.9, rng=np.random.default_rng(4)).cluster(b, 50)
        np.testing.assert_array_equal(a.centroids, b.centroids)
