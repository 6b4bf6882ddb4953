from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Type

from clustering.core import (
    ClusteringAlgorithm,
    FastKMeans,
    KMeans,
    RandomSwap,
    StochasticRelaxation,
)


class AlgorithmId(str, Enum):
    KMEANS = "km"
    FAST_KMEANS = "fkm"
    RANDOM_SWAP = "rs"
    STOCHASTIC_RELAXATION = "sr"


ALGORITHM_DESCRIPTIONS: Dict[AlgorithmId, str] = {
    AlgorithmId.KMEANS: "Normal k-means",
    AlgorithmId.FAST_KMEANS: "Fast k-means",
    AlgorithmId.RANDOM_SWAP: "Random swap",
    AlgorithmId.STOCHASTIC_RELAXATION: "Stochastic relaxation",
}


@dataclass
class RunConfig:
    """Параметры одного запуска из командной строки."""

    input_path: Path
    n_clusters: int
    algorithm: AlgorithmId = AlgorithmId.FAST_KMEANS
    real_centroids_path: Path | None = None
    output_path: Path | None = None
    repeats: int = 1
    max_iterations: int | None = None
    temperature_alpha: float = StochasticRelaxation.DEFAULT_TEMPERATURE_ALPHA
    seed: int | None = None
    max_seconds: float | None = None
    plot_path: Path | None = None

    def resolved_output_path(self) -> Path:
        return self.output_path or default_output_path(self.input_path)


def default_output_path(input_path: str | Path) -> Path:
    """``<имя входного файла без расширения>-centroids.txt`` в текущей директории."""
    return Path(f"{Path(input_path).stem}-centroids.txt")


ALGORITHMS: Dict[AlgorithmId, Type[ClusteringAlgorithm]] = {
    AlgorithmId.KMEANS: KMeans,
    AlgorithmId.FAST_KMEANS: FastKMeans,
    AlgorithmId.RANDOM_SWAP: RandomSwap,
    AlgorithmId.STOCHASTIC_RELAXATION: StochasticRelaxation,
}


def make_algorithm(
    algorithm: AlgorithmId | str,
    *,
    temperature_alpha: float | None = None,
    **kwargs: Any,
) -> ClusteringAlgorithm:
    """
    Создаёт стратегию кластеризации по идентификатору.

    :param algorithm: идентификатор (``km``, ``fkm``, ``rs``, ``sr``)
    :param temperature_alpha: параметр Stochastic Relaxation (для остальных
        стратегий игнорируется)
    :param kwargs: logger, rng
    :raises ValueError: неизвестный идентификатор
    """
    algorithm_id = AlgorithmId(algorithm)
    if algorithm_id is AlgorithmId.STOCHASTIC_RELAXATION and temperature_alpha is not None:
        kwargs["temperature_alpha"] = temperature_alpha
    return ALGORITHMS[algorithm_id](**kwargs)
