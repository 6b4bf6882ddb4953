"""
Unit-тесты стандартного K-means.
"""

import numpy as np
import pytest

from clustering.core.errors import StateError, ValidationError
from clustering.core.kmeans import KMeans
from clustering.data.dataset import Dataset


class TestKMeans:
    """Тесты базовой функциональности K-means."""

    def test_simple_convergence(self, simple_2d_dataset):
        X, initial_centroids = simple_2d_dataset
        dataset = Dataset(X, 2)
        dataset.centroids = initial_centroids

        model = KMeans()
        model.cluster(dataset)

        np.testing.assert_allclose(dataset.centroids, [[1.0, 1.0], [11.0, 11.0]])
        np.testing.assert_array_equal(dataset.partitions, [0, 0, 0, 1, 1, 1])
        assert model.converged
        assert model.n_iters_actual == 2

    def test_idempotent_after_convergence(self, blob_dataset):
        blob_dataset.initialize_random_centroids()
        KMeans().cluster(blob_dataset)
        converged = blob_dataset.centroids.copy()

        model = KMeans()
        model.cluster(blob_dataset)
        np.testing.assert_array_equal(blob_dataset.centroids, converged)
        assert model.n_iters_actual == 1
        assert model.converged

    def test_iteration_cap(self, blob_dataset):
        blob_dataset.initialize_random_centroids()
        model = KMeans()
        model.cluster(blob_dataset, 1)
        assert model.n_iters_actual == 1

    def test_zero_iterations_changes_nothing(self, blob_dataset):
        blob_dataset.initialize_random_centroids()
        centroids = blob_dataset.centroids.copy()
        KMeans().cluster(blob_dataset, 0)
        np.testing.assert_array_equal(blob_dataset.centroids, centroids)

    def test_mse_does_not_increase(self, blob_dataset):
        blob_dataset.initialize_random_centroids()
        prev = blob_dataset.mse()
        model = KMeans()
        for _ in range(10):
            model.cluster(blob_dataset, 1)
            blob_dataset.partition()
            mse = blob_dataset.mse()
            assert mse <= prev * (1 + 1e-12)
            prev = mse

    def test_negative_iterations(self, blob_dataset):
        blob_dataset.initialize_random_centroids()
        with pytest.raises(ValidationError):
            KMeans().cluster(blob_dataset, -1)

    def test_requires_centroids(self, blobs):
        with pytest.raises(StateError):
            KMeans().cluster(Dataset(blobs.data, 8))

    def test_timing_collected(self, blob_dataset):
        blob_dataset.initialize_random_centroids()
        model = KMeans()
        model.cluster(blob_dataset)
        assert model.t_iter_total > 0
