# core/stochastic_relaxation.py
from __future__ import annotations

import math
from typing import Any

import numpy as np

from .base import ClusteringAlgorithm
from .errors import ValidationError
from .kmeans import KMeans


class StochasticRelaxation(ClusteringAlgorithm):
    """
    Stochastic Relaxation: K-means со случайными возмущениями центроидов.

    На итерации t после обновления центроидов к каждой координате d
    добавляется шум ``(U(0, 1) - 0.5) * sqrt(12 * var_d * T)``, где
    ``T = alpha ** t`` — температура. Дисперсия шума равна дисперсии данных
    по координате, умноженной на температуру, и убывает геометрически.
    Пустые кластеры переносятся в случайную точку данных.

    Цикл завершается, когда искажение перестаёт уменьшаться более чем на
    EXIT_EPSILON (относительно); затем K-means доводит разбиение до
    устойчивого состояния.
    """

    name = "sr"

    #: Порог относительного улучшения искажения между итерациями
    EXIT_EPSILON = 1e-6
    #: Значение alpha по умолчанию (статья предлагает 0.95)
    DEFAULT_TEMPERATURE_ALPHA = 0.975

    def __init__(
        self,
        temperature_alpha: float = DEFAULT_TEMPERATURE_ALPHA,
        logger: Any | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        """
        Args:
            temperature_alpha: Основание температурной функции, (0, 1).
                Меньшее значение быстрее гасит возмущения (быстрее, но хуже).

        Raises:
            ValidationError: Если temperature_alpha вне интервала (0, 1)
        """
        if not 0.0 < temperature_alpha < 1.0:
            raise ValidationError(
                f"temperature_alpha is not within acceptable range ]0, 1[: {temperature_alpha}"
            )
        super().__init__(logger=logger, rng=rng)
        self.temperature_alpha = float(temperature_alpha)

        self._variances: np.ndarray | None = None
        self._last_distortion: float = math.inf
        self.relocations: int = 0

    def temperature(self, iteration: int) -> float:
        return self.temperature_alpha**iteration

    def _prepare(self, dataset: Any) -> None:
        self._variances = dataset.variances()
        self._last_distortion = math.inf
        self.relocations = 0

    def _iterate(self, dataset: Any, iteration: int) -> bool:
        distortion = dataset.partition()
        last = self._last_distortion
        if distortion <= last and (
            distortion == 0.0 or (last - distortion) / distortion < self.EXIT_EPSILON
        ):
            return True
        self._last_distortion = distortion

        self._update_centroids(dataset)
        self._perturb(dataset, iteration)
        return False

    def _update_centroids(self, dataset: Any) -> None:
        """Средние кластеров; пустой кластер переносится в случайную точку."""
        rng = self._rng_for(dataset)
        sums, counts = dataset.cluster_sums()
        centroids = np.empty_like(sums)

        for c in range(dataset.n_clusters):
            if counts[c] == 0:
                centroids[c] = dataset.data[rng.integers(dataset.n_points)]
                self.relocations += 1
            else:
                centroids[c] = sums[c] / counts[c]

        dataset.centroids = centroids

    def _perturb(self, dataset: Any, iteration: int) -> None:
        rng = self._rng_for(dataset)
        scale = np.sqrt(12.0 * self._variances * self.temperature(iteration))
        noise = (rng.random(dataset.centroids.shape) - 0.5) * scale
        dataset.centroids = dataset.centroids + noise

    def _finish(self, dataset: Any) -> None:
        # Доводим кластеры до устойчивого состояния
        KMeans(logger=self.logger).cluster(dataset)
        if self.logger:
            self.logger.debug(
                f"  Stochastic relaxation finished after {self.n_iters_actual} "
                f"iterations (relocations={self.relocations})"
            )
