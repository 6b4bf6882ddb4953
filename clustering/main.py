# main.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

import numpy as np

from clustering.core.errors import ClusteringError
from clustering.data.io import load_dataset, load_real_centroids, write_matrix
from clustering.experiments.config import (
    ALGORITHM_DESCRIPTIONS,
    AlgorithmId,
    RunConfig,
    make_algorithm,
)
from clustering.experiments.runner import ClusteringRunner
from clustering.utils.logging import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clustering",
        description="Кластеризация векторов из текстового файла "
        "(k-means, fast k-means, random swap, stochastic relaxation).",
    )
    parser.add_argument("input", type=Path, help="Файл с данными (строки чисел через пробел)")
    parser.add_argument("clusters", type=int, help="Количество кластеров K")
    parser.add_argument(
        "-c",
        "--real-centroids",
        type=Path,
        default=None,
        help="Файл с эталонными центроидами для расчёта Centroid Index.",
    )
    parser.add_argument(
        "-r",
        "--repeats",
        type=int,
        default=1,
        help="Количество повторов; сохраняется лучший результат по MSE.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Файл для центроидов (по умолчанию <input>-centroids.txt).",
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        type=str.lower,
        choices=[a.value for a in AlgorithmId],
        default=AlgorithmId.FAST_KMEANS.value,
        help="; ".join(f"{a.value} - {d}" for a, d in ALGORITHM_DESCRIPTIONS.items())
        + " (по умолчанию fkm).",
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=None,
        help="Ограничение итераций алгоритма (по умолчанию: до сходимости, "
        "для random swap — 1000).",
    )
    parser.add_argument(
        "--alpha",
        type=float,
        default=None,
        help="Параметр температуры stochastic relaxation, интервал (0, 1).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed генератора случайных чисел.")
    parser.add_argument(
        "--max-seconds",
        type=float,
        default=None,
        help="Лимит времени на все повторы; при прогнозе превышения делаем ранний выход.",
    )
    parser.add_argument(
        "--plot",
        type=Path,
        default=None,
        help="Сохранить изображение разбиения (только для 2D данных).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Подробный лог итераций.")
    return parser


def parse_config(argv: Sequence[str] | None = None) -> tuple[RunConfig, bool]:
    args = build_parser().parse_args(argv)
    config = RunConfig(
        input_path=args.input,
        n_clusters=args.clusters,
        algorithm=AlgorithmId(args.algorithm),
        real_centroids_path=args.real_centroids,
        output_path=args.output,
        repeats=args.repeats,
        max_iterations=args.max_iterations,
        seed=args.seed,
        max_seconds=args.max_seconds,
        plot_path=args.plot,
    )
    if args.alpha is not None:
        config.temperature_alpha = args.alpha
    return config, args.verbose


def run(config: RunConfig, logger: logging.Logger) -> dict:
    """Загружает данные, выполняет повторы и сохраняет лучшие центроиды."""
    rng = np.random.default_rng(config.seed)

    dataset = load_dataset(config.input_path, config.n_clusters, rng=rng)
    if config.real_centroids_path is not None:
        load_real_centroids(dataset, config.real_centroids_path)

    algorithm = make_algorithm(
        config.algorithm, temperature_alpha=config.temperature_alpha
    )
    logger.info(f"{ALGORITHM_DESCRIPTIONS[config.algorithm]} algorithm selected")

    runner = ClusteringRunner(
        dataset, algorithm, logger=logger, max_iterations=config.max_iterations
    )
    stats = runner.run(repeats=config.repeats, max_seconds=config.max_seconds)

    output_path = config.resolved_output_path()
    write_matrix(output_path, runner.best.centroids)
    logger.info(f"Centroids saved to {output_path}")

    if config.plot_path is not None:
        from clustering.utils.plotting import plot_partition

        plot_partition(runner.best, config.plot_path)
        logger.info(f"Plot saved to {config.plot_path}")

    return stats


def main(argv: Sequence[str] | None = None) -> int:
    config, verbose = parse_config(argv)
    logger = setup_logger(logging.DEBUG if verbose else logging.INFO)

    try:
        run(config, logger)
    except FileNotFoundError as e:
        logger.error(f"File does not exist: {e.filename}")
        return 1
    except (ClusteringError, OSError) as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
