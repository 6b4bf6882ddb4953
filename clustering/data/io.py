"""
Чтение и запись числовых матриц в текстовом формате.

Формат: одна строка — один вектор, значения разделены пробельными
символами. Пустые строки и строки-комментарии (``#``) пропускаются.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import numpy as np

from clustering.core.errors import DimensionMismatchError, ValidationError
from clustering.data.dataset import Dataset

logger = logging.getLogger(__name__)


def read_matrix(path: str | Path) -> np.ndarray:
    """
    Загружает матрицу из текстового файла.

    Args:
        path: Путь к файлу

    Returns:
        Матрица float64 (строки файла × значения в строке)

    Raises:
        FileNotFoundError: Если файл не существует
        ValidationError: Если в файле есть нечисловые значения
        DimensionMismatchError: Если строки имеют разное количество значений
    """
    path = Path(path)
    rows: list[list[float]] = []
    dimensions = -1

    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            # Пропускаем комментарии и пустые строки
            if not line or line.startswith("#"):
                continue

            try:
                values = [float(tok) for tok in line.split()]
            except ValueError as exc:
                raise ValidationError(
                    f"{path}:{line_no}: non-numerical value in line {line!r}"
                ) from exc

            if dimensions == -1:
                dimensions = len(values)
            if len(values) != dimensions:
                raise DimensionMismatchError(
                    f"{path}:{line_no}: expected {dimensions} values, got {len(values)}"
                )
            rows.append(values)

    if not rows:
        return np.empty((0, 0), dtype=np.float64)
    return np.array(rows, dtype=np.float64)


def write_matrix(path: str | Path, matrix: Any) -> None:
    """Сохраняет матрицу: одна строка на вектор, значения через пробел."""
    matrix = np.asarray(matrix, dtype=np.float64)
    with open(path, "w", encoding="utf-8") as f:
        for row in matrix:
            f.write(" ".join(repr(float(v)) for v in row))
            f.write("\n")


def load_dataset(
    path: str | Path,
    n_clusters: int,
    rng: np.random.Generator | None = None,
) -> Dataset:
    """
    Создаёт Dataset из текстового файла с точками данных.

    Raises:
        FileNotFoundError: Если файл не существует
        ValidationError: Если данные некорректны или K вне диапазона (0, N]
    """
    logger.info(f"Loading dataset from {path}")
    dataset = Dataset(read_matrix(path), n_clusters, rng=rng)
    logger.info(
        f"Dataset loaded: data.shape={dataset.data.shape}, K={dataset.n_clusters}"
    )
    return dataset


def load_real_centroids(dataset: Dataset, path: str | Path) -> None:
    """
    Загружает эталонные центроиды из текстового файла в датасет.

    Raises:
        FileNotFoundError: Если файл не существует
        ValidationError: Если количество центроидов не равно K или
            размерность не совпадает с данными
    """
    matrix = read_matrix(path)
    if matrix.size == 0:
        raise ValidationError(f"{path}: real centroid file is empty")
    dataset.load_real_centroids(matrix)
    logger.info(f"Real centroids loaded from {path}: shape={matrix.shape}")
