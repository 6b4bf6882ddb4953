"""
Генератор синтетических датасетов с известными центрами кластеров.

Используется в тестах и для подготовки файлов бенчмарков: данные и
центры сохраняются в текстовом формате clustering.data.io.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np
from sklearn.datasets import make_blobs

from clustering.data.io import write_matrix


@dataclass
class GeneratedDataset:
    """Контейнер для сгенерированных данных."""

    data: np.ndarray
    labels: np.ndarray
    centers: np.ndarray


def make_blob_dataset(
    n_points: int,
    dimension: int,
    n_clusters: int,
    cluster_std: float = 1.0,
    center_box: tuple[float, float] = (-10.0, 10.0),
    seed: int | None = None,
) -> GeneratedDataset:
    """
    Генерация гауссовых кластеров с помощью make_blobs.

    Args:
        n_points: Количество точек
        dimension: Размерность пространства
        n_clusters: Количество кластеров
        cluster_std: Стандартное отклонение кластеров
        center_box: Диапазон расположения центров кластеров
        seed: Seed для воспроизводимости

    Returns:
        GeneratedDataset с матрицами data (N, D), labels (N,), centers (K, D)
    """
    data, labels, centers = make_blobs(
        n_samples=n_points,
        n_features=dimension,
        centers=n_clusters,
        cluster_std=cluster_std,
        center_box=center_box,
        random_state=seed,
        return_centers=True,
    )
    return GeneratedDataset(
        data=np.asarray(data, dtype=np.float64),
        labels=np.asarray(labels),
        centers=np.asarray(centers, dtype=np.float64),
    )


def save_generated(
    generated: GeneratedDataset, data_path: str | Path, centers_path: str | Path
) -> None:
    """Сохраняет точки и центры в два текстовых файла."""
    write_matrix(data_path, generated.data)
    write_matrix(centers_path, generated.centers)
