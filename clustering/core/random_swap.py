# core/random_swap.py
from __future__ import annotations

from typing import Any

import numpy as np

from .base import ClusteringAlgorithm


class RandomSwap(ClusteringAlgorithm):
    """
    Random Swap: случайная перестановка центроида с проверкой улучшения.

    Итерация: снимок центроидов → случайный центроид переносится в
    случайную точку данных → два шага K-means (без проверки сходимости) →
    если MSE стала хуже лучшей известной, центроиды откатываются к снимку.
    После цикла разбиение перестраивается: откат восстанавливает центроиды,
    но не разбиение.
    """

    name = "rs"
    default_max_iterations = 1000

    # Количество шагов K-means после каждой перестановки
    refinement_steps = 2

    def __init__(
        self, logger: Any | None = None, rng: np.random.Generator | None = None
    ) -> None:
        super().__init__(logger=logger, rng=rng)
        self.best_mse: float = float("inf")
        self.accepted_swaps: int = 0

    def _prepare(self, dataset: Any) -> None:
        if dataset.partitions is None:
            dataset.partition()
        self.best_mse = dataset.mse()
        self.accepted_swaps = 0

    def _iterate(self, dataset: Any, iteration: int) -> bool:
        rng = self._rng_for(dataset)
        prev_centroids = dataset.centroids.copy()

        swapped = dataset.centroids.copy()
        swapped[rng.integers(dataset.n_clusters)] = dataset.data[rng.integers(dataset.n_points)]
        dataset.centroids = swapped

        for _ in range(self.refinement_steps):
            dataset.partition()
            dataset.update_centroids()

        new_mse = dataset.partition() / dataset.n_points
        if self.best_mse < new_mse:
            # стало хуже, откат
            dataset.centroids = prev_centroids
        else:
            self.best_mse = new_mse
            self.accepted_swaps += 1
        return False

    def _finish(self, dataset: Any) -> None:
        dataset.partition()
        if self.logger:
            self.logger.debug(
                f"  Random swap finished: accepted={self.accepted_swaps}/"
                f"{self.n_iters_actual}, MSE={self.best_mse:.6g}"
            )
