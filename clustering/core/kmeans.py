# core/kmeans.py
from __future__ import annotations

from typing import Any

from .base import ClusteringAlgorithm
from .vector_math import moved_centroids


class KMeans(ClusteringAlgorithm):
    """
    Стандартный K-means.

    Итерация: снимок центроидов → partition() → update_centroids().
    Останавливается, когда ни один центроид не изменился.
    """

    name = "km"

    def _iterate(self, dataset: Any, iteration: int) -> bool:
        # Собственная копия: центроиды датасета заменяются целиком
        prev_centroids = dataset.centroids.copy()
        dataset.partition()
        dataset.update_centroids()
        return not moved_centroids(prev_centroids, dataset.centroids).any()
