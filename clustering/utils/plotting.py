"""
Визуализация результата кластеризации двумерного датасета.

Точки окрашиваются по разбиению, центроиды рисуются крупными маркерами,
эталонные центроиды (если загружены) — полупрозрачными красными кругами.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from clustering.core.errors import StateError, ValidationError  # noqa: E402


def plot_partition(
    dataset: Any,
    save_path: str | Path,
    show_centroids: bool = True,
    show_real_centroids: bool = True,
    figsize: tuple[float, float] = (12.8, 9.0),
    dpi: int = 100,
) -> Path:
    """
    Сохраняет изображение 2D датасета, окрашенного по кластерам.

    Args:
        dataset: Датасет с построенным разбиением
        save_path: Путь к файлу изображения (формат по расширению)
        show_centroids: Рисовать ли текущие центроиды
        show_real_centroids: Рисовать ли эталонные центроиды
        figsize: Размер рисунка в дюймах
        dpi: Разрешение

    Returns:
        Путь к сохранённому файлу

    Raises:
        ValidationError: Если датасет не двумерный
        StateError: Если разбиение не построено
    """
    if dataset.dimension != 2:
        raise ValidationError(
            f"plot_partition(): only 2D datasets are supported, got D={dataset.dimension}"
        )
    if dataset.partitions is None:
        raise StateError("plot_partition(): dataset is not partitioned")

    save_path = Path(save_path)
    data = dataset.data
    K = dataset.n_clusters
    cmap = plt.get_cmap("tab20")
    colors = cmap(np.arange(K) % cmap.N)

    fig, ax = plt.subplots(figsize=figsize)
    try:
        ax.scatter(
            data[:, 0],
            data[:, 1],
            c=colors[dataset.partitions],
            s=4,
            linewidths=0,
        )

        if show_centroids and dataset.centroids is not None:
            ax.scatter(
                dataset.centroids[:, 0],
                dataset.centroids[:, 1],
                c=colors,
                s=120,
                edgecolors="black",
                linewidths=1,
                label="centroids",
            )

        if show_real_centroids and dataset.real_centroids is not None:
            ax.scatter(
                dataset.real_centroids[:, 0],
                dataset.real_centroids[:, 1],
                c="red",
                s=200,
                alpha=0.3,
                label="real centroids",
            )

        ax.set_title(f"N={dataset.n_points}, K={K}")
        ax.set_xlabel("x")
        ax.set_ylabel("y")
        if ax.get_legend_handles_labels()[0]:
            ax.legend(loc="upper right")

        fig.tight_layout()
        fig.savefig(save_path, dpi=dpi)
    finally:
        plt.close(fig)

    return save_path
