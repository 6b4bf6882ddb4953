"""
Валидация входных матриц и состояния датасета.

Модуль предоставляет функции, которые приводят входные данные к матрицам
NumPy и проверяют их соответствие друг другу (размерность, число кластеров).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from clustering.core.errors import DimensionMismatchError, ValidationError

if TYPE_CHECKING:
    from clustering.data.dataset import Dataset


def as_matrix(rows: Any, name: str = "data") -> np.ndarray:
    """
    Приводит последовательность строк к матрице float64 (N, D).

    Args:
        rows: Двумерный массив или последовательность строк одинаковой длины
        name: Имя матрицы для сообщений об ошибках

    Returns:
        Новая матрица (копия входных данных)

    Raises:
        DimensionMismatchError: Если строки имеют разную длину
        ValidationError: Если данные не числовые или не двумерные
    """
    if isinstance(rows, np.ndarray):
        if rows.ndim != 2:
            raise ValidationError(f"{name} must be 2D, got shape {rows.shape}")
    else:
        rows = list(rows)
        lengths = {len(row) for row in rows}
        if len(lengths) > 1:
            raise DimensionMismatchError(f"{name}: row dimensions don't match")
        if not rows:
            return np.empty((0, 0), dtype=np.float64)

    try:
        matrix = np.array(rows, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{name} contains non-numerical values") from exc
    return matrix


def validate_n_clusters(n_clusters: int, n_points: int) -> None:
    """
    Проверяет число кластеров: 0 < K <= N.

    Raises:
        ValidationError: Если K вне допустимого диапазона
    """
    if n_clusters <= 0:
        raise ValidationError(f"Number of clusters cannot be <= 0, got {n_clusters}")
    if n_clusters > n_points:
        raise ValidationError(
            f"The number of clusters ({n_clusters}) is greater than "
            f"the number of data vectors ({n_points})"
        )


def validate_centroids(
    centroids: np.ndarray, n_clusters: int, dimension: int, name: str = "centroids"
) -> None:
    """
    Проверяет, что матрица центроидов имеет форму (K, D).

    Raises:
        ValidationError: Если количество центроидов не равно K
        DimensionMismatchError: Если размерность центроидов не равна D
    """
    if len(centroids) != n_clusters:
        raise ValidationError(
            f"Number of clusters specified does not match the number of {name}: "
            f"{n_clusters} vs {len(centroids)}"
        )
    if centroids.ndim != 2 or centroids.shape[1] != dimension:
        raise DimensionMismatchError(
            f"{name} dimensions don't match with data: "
            f"expected {dimension}, got shape {centroids.shape}"
        )


def validate_dataset(dataset: Dataset) -> None:
    """
    Проверяет согласованность состояния датасета.

    - все центроиды (текущие и эталонные) имеют форму (K, D);
    - разбиение имеет длину N и ссылается на существующие центроиды.

    Raises:
        ValidationError: Если состояние несогласованно
    """
    K, D = dataset.n_clusters, dataset.dimension

    if dataset.centroids is not None:
        validate_centroids(dataset.centroids, K, D)
    if dataset.real_centroids is not None:
        validate_centroids(dataset.real_centroids, K, D, name="real centroids")

    partitions = dataset.partitions
    if partitions is not None:
        if partitions.shape != (dataset.n_points,):
            raise ValidationError(
                f"Expected {dataset.n_points} partition labels, got {partitions.shape}"
            )
        if partitions.size and (partitions.min() < 0 or partitions.max() >= K):
            raise ValidationError("Partition labels must be in [0, K)")
