"""
Генератор синтетических датасетов для бенчмаркинга алгоритмов кластеризации.

Создаёт пару текстовых файлов: точки данных (``<name>.txt``) и эталонные
центры кластеров (``<name>-cb.txt``). Оба файла читаются
clustering.data.io, так что результат сразу подходит для CLI:

    python -m scripts.generate_datasets --points 5000 --clusters 15 -o datasets
    clustering datasets/blobs.txt 15 -c datasets/blobs-cb.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from clustering.core.errors import ClusteringError
from clustering.data.synthetic import make_blob_dataset, save_generated
from clustering.utils.logging import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="generate_datasets",
        description="Генерация гауссовых кластеров с известными центрами.",
    )
    parser.add_argument("--points", type=int, default=5000, help="Количество точек N")
    parser.add_argument("--dimension", type=int, default=2, help="Размерность D")
    parser.add_argument("--clusters", type=int, default=15, help="Количество кластеров K")
    parser.add_argument("--std", type=float, default=1.0, help="Стандартное отклонение кластеров")
    parser.add_argument(
        "--box",
        type=float,
        nargs=2,
        default=(-10.0, 10.0),
        metavar=("LOW", "HIGH"),
        help="Диапазон расположения центров",
    )
    parser.add_argument("--seed", type=int, default=42, help="Seed для воспроизводимости")
    parser.add_argument(
        "-o", "--output-dir", type=Path, default=Path("datasets"), help="Каталог для файлов"
    )
    parser.add_argument("--name", default="blobs", help="Базовое имя файлов")
    return parser


def generate(args: argparse.Namespace, logger: logging.Logger) -> tuple[Path, Path]:
    """Генерирует датасет и сохраняет точки и центры."""
    if args.points <= 0 or args.dimension <= 0 or args.clusters <= 0:
        raise ClusteringError(
            f"N, D and K must be positive, got N={args.points} "
            f"D={args.dimension} K={args.clusters}"
        )

    generated = make_blob_dataset(
        n_points=args.points,
        dimension=args.dimension,
        n_clusters=args.clusters,
        cluster_std=args.std,
        center_box=tuple(args.box),
        seed=args.seed,
    )

    args.output_dir.mkdir(parents=True, exist_ok=True)
    data_path = args.output_dir / f"{args.name}.txt"
    centers_path = args.output_dir / f"{args.name}-cb.txt"
    save_generated(generated, data_path, centers_path)

    logger.info(
        f"Generated N={args.points} D={args.dimension} K={args.clusters}: "
        f"{data_path}, {centers_path}"
    )
    return data_path, centers_path


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logger()
    try:
        generate(args, logger)
    except (ClusteringError, OSError) as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
