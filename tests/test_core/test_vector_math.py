"""
Тесты квадратов расстояний и поиска ближайшего центроида.
"""

import numpy as np
import pytest

from clustering.core.errors import DimensionMismatchError
from clustering.core.vector_math import (
    dist_sq,
    moved_centroids,
    nearest_index,
    nearest_indices,
    sq_distances,
)


class TestDistSq:
    """Тесты dist_sq."""

    def test_basic(self):
        assert dist_sq([0.0, 0.0], [3.0, 4.0]) == 25.0
        assert dist_sq([1.0], [-1.0]) == 4.0

    def test_symmetric_and_zero(self, rng):
        for _ in range(20):
            a = rng.normal(size=5)
            b = rng.normal(size=5)
            assert dist_sq(a, b) == dist_sq(b, a)
            assert dist_sq(a, a) == 0.0

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            dist_sq([1.0, 2.0], [1.0, 2.0, 3.0])

    def test_matches_matrix_form(self, rng):
        """sq_distances даёт те же значения, что и dist_sq."""
        points = rng.normal(size=(6, 3))
        centroids = rng.normal(size=(4, 3))
        matrix = sq_distances(points, centroids)
        for i in range(6):
            for j in range(4):
                assert matrix[i, j] == pytest.approx(dist_sq(points[i], centroids[j]))


class TestNearestIndex:
    """Тесты nearest_index."""

    def test_basic(self):
        centroids = np.array([[0.0, 0.0], [10.0, 10.0], [5.0, 5.0]])
        assert nearest_index([9.0, 9.0], centroids) == 1
        assert nearest_index([4.0, 6.0], centroids) == 2

    def test_tie_picks_lowest_index(self):
        centroids = np.array([[1.0, 0.0], [-1.0, 0.0], [1.0, 0.0]])
        assert nearest_index([0.0, 0.0], centroids) == 0
        assert nearest_index([1.0, 0.0], centroids) == 0

    def test_reorder_invariance(self, rng):
        """Выбранная точка не зависит от порядка центроидов."""
        centroids = rng.normal(size=(10, 3))
        for _ in range(20):
            point = rng.normal(size=3)
            order = rng.permutation(10)
            chosen = centroids[nearest_index(point, centroids)]
            chosen_reordered = centroids[order][nearest_index(point, centroids[order])]
            np.testing.assert_array_equal(chosen, chosen_reordered)

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            nearest_index([1.0, 2.0], np.array([[1.0, 2.0, 3.0]]))

    def test_nan_centroid_is_skipped(self):
        """Центроид пустого кластера (NaN) никогда не выбирается."""
        centroids = np.array([[np.nan, np.nan], [5.0, 5.0]])
        assert nearest_index([0.0, 0.0], centroids) == 1

    def test_nearest_indices_returns_distances(self):
        points = np.array([[0.0, 0.0], [9.0, 9.0]])
        centroids = np.array([[1.0, 0.0], [10.0, 10.0]])
        labels, distances = nearest_indices(points, centroids)
        np.testing.assert_array_equal(labels, [0, 1])
        np.testing.assert_allclose(distances, [1.0, 2.0])


class TestMovedCentroids:
    """Тесты маски сдвинувшихся центроидов."""

    def test_exact_comparison(self):
        prev = np.array([[0.0, 0.0], [1.0, 1.0]])
        curr = np.array([[0.0, 0.0], [1.0, 1.0 + 1e-15]])
        np.testing.assert_array_equal(moved_centroids(prev, curr), [False, True])

    def test_nan_equals_nan(self):
        prev = np.array([[np.nan, np.nan], [1.0, 1.0]])
        curr = np.array([[np.nan, np.nan], [1.0, 1.0]])
        assert not moved_centroids(prev, curr).any()
