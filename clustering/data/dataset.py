"""
Датасет для кластеризации: данные, текущее разбиение и центроиды.

Класс Dataset владеет матрицей данных (N, D), текущим разбиением
(метка центроида для каждой точки), текущими центроидами (K, D) и,
опционально, эталонными центроидами для оценки качества (Centroid Index).
Стратегии кластеризации изменяют разбиение и центроиды на месте.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

import numpy as np

from clustering.core.centroid_index import centroid_index as _centroid_index
from clustering.core.errors import StateError, ValidationError
from clustering.core.vector_math import assigned_sq_distances, nearest_indices
from clustering.data.validation import (
    as_matrix,
    validate_centroids,
    validate_n_clusters,
)

logger = logging.getLogger(__name__)


def _read_only(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


class Dataset:
    """
    Датасет с текущим состоянием кластеризации.

    Атрибуты:
    - data: матрица данных (N, D), только для чтения;
    - partitions: метки центроидов (N,) или None до первого partition();
    - centroids: центроиды (K, D) или None до инициализации;
    - real_centroids: эталонные центроиды (K, D) или None;
    - rng: генератор случайных чисел для инициализации и reduce_size().
    """

    def __init__(
        self,
        data: Any,
        n_clusters: int,
        rng: np.random.Generator | None = None,
    ) -> None:
        """
        Args:
            data: Матрица данных (строки — точки одинаковой размерности)
            n_clusters: Количество кластеров K
            rng: Источник случайности; по умолчанию np.random.default_rng()

        Raises:
            ValidationError: Если K <= 0, K > N или строки разной длины
        """
        matrix = as_matrix(data)
        validate_n_clusters(n_clusters, len(matrix))

        self._data = _read_only(matrix)
        self._n_clusters = int(n_clusters)
        self.rng = rng if rng is not None else np.random.default_rng()

        self.partitions: np.ndarray | None = None
        self._centroids: np.ndarray | None = None
        self._real_centroids: np.ndarray | None = None

        logger.debug(f"Dataset created: data.shape={self._data.shape}, K={n_clusters}")

    # --- Свойства ---

    @property
    def data(self) -> np.ndarray:
        return self._data

    @property
    def n_clusters(self) -> int:
        return self._n_clusters

    @property
    def n_points(self) -> int:
        return self._data.shape[0]

    @property
    def dimension(self) -> int:
        return self._data.shape[1]

    @property
    def centroids(self) -> np.ndarray | None:
        return self._centroids

    @centroids.setter
    def centroids(self, value: Any) -> None:
        """Задаёт центроиды извне (копия, форма проверяется)."""
        if value is None:
            self._centroids = None
            return
        matrix = as_matrix(value, name="centroids")
        validate_centroids(matrix, self._n_clusters, self.dimension)
        self._centroids = matrix

    @property
    def real_centroids(self) -> np.ndarray | None:
        return self._real_centroids

    # --- Жизненный цикл ---

    def copy(self) -> Dataset:
        """
        Независимая копия датасета.

        Разбиение, центроиды и эталонные центроиды копируются полностью;
        матрица данных (только для чтения) и генератор случайных чисел
        разделяются с оригиналом.
        """
        clone = copy.copy(self)
        if self.partitions is not None:
            clone.partitions = self.partitions.copy()
        if self._centroids is not None:
            clone._centroids = self._centroids.copy()
        if self._real_centroids is not None:
            clone._real_centroids = _read_only(self._real_centroids.copy())
        return clone

    def load_real_centroids(self, centroids: Any) -> None:
        """
        Загружает эталонные центроиды (K, D).

        Raises:
            ValidationError: Если количество центроидов не равно K или
                размерность не совпадает с данными
            StateError: Если эталонные центроиды уже загружены
        """
        if self._real_centroids is not None:
            raise StateError("load_real_centroids(): real centroids are already loaded")
        matrix = as_matrix(centroids, name="real centroids")
        validate_centroids(matrix, self._n_clusters, self.dimension, name="real centroids")
        self._real_centroids = _read_only(matrix)

    def initialize_random_centroids(self) -> None:
        """
        Выбирает K различных точек данных (без возвращения) в качестве
        начальных центроидов и перестраивает разбиение.

        Raises:
            ValidationError: Если точек данных меньше, чем K
        """
        if self.n_points < self._n_clusters:
            raise ValidationError(
                f"Cannot pick {self._n_clusters} centroids from {self.n_points} data vectors"
            )
        indices = self.rng.choice(self.n_points, size=self._n_clusters, replace=False)
        self._centroids = self._data[indices].copy()
        self.partition()

    def reduce_size(self, new_size: int) -> None:
        """
        Оставляет new_size случайных точек данных (без повторов).

        Матрица данных и разбиение заменяются целиком; центроиды не меняются.

        Raises:
            ValidationError: Если new_size < 0 или больше текущего размера
        """
        if new_size > self.n_points:
            raise ValidationError(
                f"reduce_size(): new_size ({new_size}) is larger than dataset size "
                f"({self.n_points})"
            )
        if new_size < 0:
            raise ValidationError("reduce_size(): new_size cannot be negative")

        kept = self.rng.choice(self.n_points, size=new_size, replace=False)
        self._data = _read_only(self._data[kept])
        if self.partitions is not None:
            self.partitions = self.partitions[kept]

    # --- Разбиение и центроиды ---

    def _require_centroids(self, operation: str) -> np.ndarray:
        if self._centroids is None:
            raise StateError(f"{operation}: centroids are not initialized")
        return self._centroids

    def _require_partitions(self, operation: str) -> np.ndarray:
        if self.partitions is None:
            raise StateError(f"{operation}: partitions is None, call partition() first")
        return self.partitions

    def partition(self) -> float:
        """
        Назначает каждую точку ближайшему центроиду.

        Returns:
            TSE полученного разбиения

        Raises:
            StateError: Если центроиды не инициализированы
        """
        centroids = self._require_centroids("partition()")
        labels, distances = nearest_indices(self._data, centroids)
        if self.partitions is None or self.partitions.shape != labels.shape:
            self.partitions = labels
        else:
            self.partitions[:] = labels
        return float(np.sum(distances))

    def cluster_sums(self) -> tuple[np.ndarray, np.ndarray]:
        """
        Суммы координат и размеры кластеров по текущему разбиению.

        Returns:
            Кортеж (sums[K, D], counts[K])

        Raises:
            StateError: Если разбиение ещё не построено
        """
        partitions = self._require_partitions("cluster_sums()")
        sums = np.zeros((self._n_clusters, self.dimension), dtype=np.float64)
        counts = np.bincount(partitions, minlength=self._n_clusters)
        np.add.at(sums, partitions, self._data)

        return sums, counts

    def update_centroids(self) -> None:
        """
        Перемещает каждый центроид в среднее точек его кластера.

        Для пустого кластера среднее не определено (0/0) и центроид
        становится NaN; стратегии, которым нужна другая политика
        (Stochastic Relaxation), обрабатывают пустые кластеры сами.

        Raises:
            StateError: Если разбиение ещё не построено
        """
        self._require_partitions("update_centroids()")
        sums, counts = self.cluster_sums()
        with np.errstate(divide="ignore", invalid="ignore"):
            self._centroids = sums / counts[:, None]

    # --- Качество ---

    def tse(self) -> float:
        """
        Суммарная квадратичная ошибка по текущим центроидам и текущему
        разбиению (без повторного разбиения).
        """
        centroids = self._require_centroids("tse()")
        partitions = self._require_partitions("tse()")
        return float(np.sum(assigned_sq_distances(self._data, centroids, partitions)))

    def mse(self) -> float:
        """
        Raises:
            ZeroDivisionError: Если датасет пуст
        """
        if self.n_points == 0:
            raise ZeroDivisionError("MSE of an empty dataset is undefined")
        return self.tse() / self.n_points

    def nmse(self) -> float:
        """MSE, нормированная на размерность."""
        if self.dimension == 0:
            raise ZeroDivisionError("Dimension cannot be zero")
        return self.mse() / self.dimension

    def mean(self) -> np.ndarray:
        """Покоординатное среднее данных."""
        return self._data.mean(axis=0)

    def variances(self) -> np.ndarray:
        """Покоординатная дисперсия данных (делитель N)."""
        return self._data.var(axis=0)

    def centroid_index(self) -> int:
        """
        Centroid Index текущих центроидов относительно эталонных.

        Raises:
            StateError: Если эталонные центроиды не загружены
        """
        if self._real_centroids is None:
            raise StateError("centroid_index(): real centroids not loaded")
        centroids = self._require_centroids("centroid_index()")
        return _centroid_index(centroids, self._real_centroids)

    def __repr__(self) -> str:
        return (
            f"Dataset(N={self.n_points}, D={self.dimension}, K={self._n_clusters}, "
            f"initialized={self._centroids is not None})"
        )
