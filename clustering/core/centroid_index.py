"""
Centroid Index (CI) — метрика качества кластеризации.

Каждый найденный центроид должен иметь пару среди эталонных и наоборот.
Центроиды, на которые не указал ни один центроид другого набора, считаются
«сиротами»; CI = max(сироты в A, сироты в B). CI = 0 означает взаимно
однозначное соответствие.
"""

from __future__ import annotations

import numpy as np

from .errors import DimensionMismatchError, ValidationError
from .vector_math import nearest_indices


def _orphans(targets: np.ndarray, sources: np.ndarray) -> int:
    """Количество центроидов targets, не выбранных ни одним центроидом sources."""
    matched, _ = nearest_indices(sources, targets)
    return len(targets) - len(np.unique(matched))


def centroid_index(centroids_a: np.ndarray, centroids_b: np.ndarray) -> int:
    """
    Вычисляет Centroid Index между двумя наборами центроидов.

    Args:
        centroids_a: Матрица центроидов (k, D)
        centroids_b: Матрица центроидов (k, D)

    Returns:
        max(сироты в A, сироты в B)

    Raises:
        ValidationError: Если наборы содержат разное количество центроидов
        DimensionMismatchError: Если размерности наборов различаются
    """
    a = np.asarray(centroids_a, dtype=np.float64)
    b = np.asarray(centroids_b, dtype=np.float64)
    if len(a) != len(b):
        raise ValidationError(
            f"centroid_index(): centroid counts differ: {len(a)} vs {len(b)}"
        )
    if a.ndim != 2 or b.ndim != 2 or a.shape[1] != b.shape[1]:
        raise DimensionMismatchError(
            f"centroid_index(): centroid shapes don't match: {a.shape} vs {b.shape}"
        )
    if len(a) == 0:
        return 0

    return max(_orphans(a, b), _orphans(b, a))
