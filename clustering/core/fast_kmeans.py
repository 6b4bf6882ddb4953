# core/fast_kmeans.py
from __future__ import annotations

from typing import Any

import numpy as np

from .base import ClusteringAlgorithm
from .vector_math import assigned_sq_distances, moved_centroids, sq_distances


class FastKMeans(ClusteringAlgorithm):
    """
    Fast K-means: K-means с множеством активных центроидов.

    Активные центроиды — те, что сдвинулись на предыдущей итерации. Если
    точка не отдалилась от своего центроида (текущее расстояние не больше
    запомненного), неподвижные центроиды не могли стать к ней ближе, и
    достаточно проверить только активные. Иначе выполняется полный поиск.

    Результат побитово совпадает с KMeans, запущенным из того же состояния;
    шаг update_centroids() используется без изменений.
    """

    name = "fkm"

    def __init__(self, logger: Any | None = None, rng: np.random.Generator | None = None) -> None:
        super().__init__(logger=logger, rng=rng)
        self._active: np.ndarray = np.empty(0, dtype=np.intp)
        self._prev_distances: np.ndarray = np.empty(0, dtype=np.float64)
        # Количество вычисленных расстояний точка–центроид за вызов cluster()
        self.distance_evaluations: int = 0

    def _prepare(self, dataset: Any) -> None:
        if dataset.partitions is None:
            dataset.partition()
        self._active = np.arange(dataset.n_clusters)
        self._prev_distances = assigned_sq_distances(
            dataset.data, dataset.centroids, dataset.partitions
        )
        self.distance_evaluations = dataset.n_points

    def _iterate(self, dataset: Any, iteration: int) -> bool:
        prev_centroids = dataset.centroids.copy()

        self.partition(dataset)
        dataset.update_centroids()

        self._active = np.flatnonzero(moved_centroids(prev_centroids, dataset.centroids))
        return self._active.size == 0

    def partition(self, dataset: Any) -> None:
        """Разбиение с учётом активных центроидов (частичный/полный поиск)."""
        X = dataset.data
        centroids = dataset.centroids
        labels = dataset.partitions

        current = assigned_sq_distances(X, centroids, labels)
        current = np.where(np.isnan(current), np.inf, current)
        partial = current <= self._prev_distances
        self.distance_evaluations += X.shape[0]

        new_labels = labels.copy()
        new_distances = current.copy()

        if self._active.size:
            idx = np.flatnonzero(partial)
            self._search(X, centroids, idx, self._active, current, new_labels, new_distances)

        idx = np.flatnonzero(~partial)
        self._search(
            X, centroids, idx, np.arange(len(centroids)), current, new_labels, new_distances
        )

        dataset.partitions[:] = new_labels
        self._prev_distances = new_distances

    def _search(
        self,
        X: np.ndarray,
        centroids: np.ndarray,
        idx: np.ndarray,
        candidates: np.ndarray,
        current: np.ndarray,
        new_labels: np.ndarray,
        new_distances: np.ndarray,
    ) -> None:
        """
        Ищет для точек idx центроид среди candidates, более близкий, чем
        текущий. При равных расстояниях побеждает меньший индекс, как у argmin
        в KMeans: candidates отсортированы, argmin даёт младший из равных.
        """
        if idx.size == 0:
            return

        distances = sq_distances(X[idx], centroids[candidates])
        distances = np.where(np.isnan(distances), np.inf, distances)
        self.distance_evaluations += distances.size

        best = np.argmin(distances, axis=1)
        best_dist = distances[np.arange(idx.size), best]
        current_labels = new_labels[idx]
        better = (best_dist < current[idx]) | (
            (best_dist == current[idx]) & (candidates[best] < current_labels)
        )

        new_labels[idx[better]] = candidates[best[better]]
        new_distances[idx[better]] = best_dist[better]
