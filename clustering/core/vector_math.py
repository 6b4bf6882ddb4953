"""
Евклидова геометрия для кластеризации: квадраты расстояний и поиск
ближайшего центроида.

Все функции, которые считают расстояния, используют одно и то же выражение
``np.sum(diff * diff, axis=-1)``. Благодаря этому K-means и Fast K-means
получают побитово одинаковые расстояния и сходятся к одной и той же точке.
"""

from __future__ import annotations

import numpy as np

from .errors import DimensionMismatchError


def dist_sq(a: np.ndarray, b: np.ndarray) -> float:
    """
    Квадрат евклидова расстояния между двумя точками.

    Raises:
        DimensionMismatchError: Если размерности точек различаются
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.shape != b.shape:
        raise DimensionMismatchError(
            f"dist_sq(): point dimensions don't match: {a.shape} vs {b.shape}"
        )
    diff = a - b
    return float(np.sum(diff * diff, axis=-1))


def sq_distances(points: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """
    Матрица квадратов расстояний (n, k) между точками и центроидами.

    Raises:
        DimensionMismatchError: Если размерность центроидов не совпадает
            с размерностью точек
    """
    if points.shape[-1] != centroids.shape[-1]:
        raise DimensionMismatchError(
            f"Point dimension {points.shape[-1]} does not match "
            f"centroid dimension {centroids.shape[-1]}"
        )
    # (n, k, D) → (n, k)
    diff = points[:, None, :] - centroids[None, :, :]
    return np.sum(diff * diff, axis=2)


def assigned_sq_distances(
    points: np.ndarray, centroids: np.ndarray, labels: np.ndarray
) -> np.ndarray:
    """Квадраты расстояний (n,) от каждой точки до назначенного ей центроида."""
    diff = points[:, None, :] - centroids[labels][:, None, :]
    return np.sum(diff * diff, axis=2)[:, 0]


def nearest_indices(
    points: np.ndarray, centroids: np.ndarray
) -> tuple[np.ndarray, np.ndarray]:
    """
    Ближайший центроид для каждой точки.

    При равных расстояниях выбирается центроид с меньшим индексом.
    NaN-расстояния (центроиды пустых кластеров) никогда не выигрывают.

    Returns:
        Кортеж (indices, distances) формы (n,)
    """
    distances = sq_distances(points, centroids)
    distances = np.where(np.isnan(distances), np.inf, distances)
    indices = np.argmin(distances, axis=1)
    nearest = np.take_along_axis(distances, indices[:, None], axis=1)[:, 0]
    return indices, nearest


def nearest_index(point: np.ndarray, centroids: np.ndarray) -> int:
    """
    Индекс ближайшего к точке центроида (линейный просмотр).

    Raises:
        DimensionMismatchError: Если размерность любого центроида отличается
            от размерности точки
    """
    point = np.asarray(point, dtype=np.float64)
    centroids = np.asarray(centroids, dtype=np.float64)
    if centroids.ndim != 2 or centroids.shape[1] != point.shape[0]:
        raise DimensionMismatchError(
            "nearest_index(): point dimension does not match the centroid dimension"
        )
    indices, _ = nearest_indices(point[None, :], centroids)
    return int(indices[0])


def moved_centroids(previous: np.ndarray, current: np.ndarray) -> np.ndarray:
    """
    Маска центроидов, координаты которых изменились.

    Сравнение точное; NaN считается равным NaN, иначе пустой кластер
    «двигался» бы на каждой итерации и K-means никогда не сходился бы.
    """
    same = (previous == current) | (np.isnan(previous) & np.isnan(current))
    return ~np.all(same, axis=1)
