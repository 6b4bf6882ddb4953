import logging
import time
from typing import Any, Dict, List, Optional

import numpy as np

from clustering.core.base import ClusteringAlgorithm
from clustering.core.errors import ValidationError
from clustering.data.dataset import Dataset
from clustering.metrics.timers import Timer
from clustering.utils.logging import PrefixedLogger, format_dataset_prefix


class ClusteringRunner:
    """
    Запускает стратегию кластеризации несколько раз на одном датасете.

    Каждый повтор работает на независимой копии датасета со своей случайной
    инициализацией. Копия с наименьшей MSE сохраняется в ``best``.
    """

    def __init__(
        self,
        dataset: Dataset,
        algorithm: ClusteringAlgorithm,
        logger: logging.Logger | None = None,
        max_iterations: int | None = None,
    ) -> None:
        self.dataset = dataset
        self.algorithm = algorithm
        self.logger = logger
        self.max_iterations = max_iterations

        self._prefix = format_dataset_prefix(dataset, algorithm.name)
        if logger is not None and algorithm.logger is None:
            # Сообщения вида "Iteration X" снабжаются префиксом датасета
            algorithm.logger = PrefixedLogger(logger, self._prefix)

        self.best: Dataset = dataset

    def run(self, repeats: int = 1, max_seconds: Optional[float] = None) -> Dict[str, Any]:
        """
        Выполняет repeats прогонов и собирает статистику.

        :param repeats: количество прогонов
        :param max_seconds: лимит стендового времени. Проверяется между
            прогонами: если прогноз превышает лимит, цикл прерывается, а в
            статистике выставляется ``estimated=True``.
        :return: словарь с агрегированной статистикой
        :raises ValidationError: repeats <= 0
        """
        if repeats <= 0:
            raise ValidationError(f"Invalid number of repeats: {repeats}")

        start = time.perf_counter()
        has_reference = self.dataset.real_centroids is not None

        self.best = self.dataset
        self.best.initialize_random_centroids()
        best_mse = self.best.mse()

        if self.logger:
            self.logger.info(f"{self._prefix} Repeat\tMSE\t\tCI\ttime (seconds)")

        timer = Timer()
        runs: List[Dict[str, Any]] = []
        ci_values: List[int] = []
        estimated = False

        for repeat in range(1, repeats + 1):
            candidate = self.dataset.copy()
            candidate.initialize_random_centroids()
            with timer:
                self.algorithm.cluster(candidate, self.max_iterations)

            tse = candidate.tse()
            mse = tse / candidate.n_points
            ci = candidate.centroid_index() if has_reference else None
            if ci is not None:
                ci_values.append(ci)

            runs.append(
                {
                    "repeat": repeat,
                    "TSE": tse,
                    "MSE": mse,
                    "nMSE": mse / candidate.dimension,
                    "CI": ci,
                    "n_iters_actual": int(self.algorithm.n_iters_actual),
                    "T_cluster": float(timer.elapsed),
                }
            )

            if mse < best_mse:
                best_mse = mse
                self.best = candidate
                if self.logger:
                    self.logger.info(
                        f"{self._prefix} {repeat:<6d}  {mse:<14.2f}  "
                        f"{ci if ci is not None else -1:<6d}  "
                        f"{time.perf_counter() - start:<6.2f}"
                    )

            if max_seconds is not None:
                spent = time.perf_counter() - start
                remaining = (repeats - repeat) * timer.mean
                if repeat < repeats and spent + remaining > max_seconds:
                    estimated = True
                    if self.logger:
                        self.logger.warning(
                            f"{self._prefix} Early exit on time limit: "
                            f"spent={spent:.2f}s, remaining_est={remaining:.2f}s, "
                            f"limit={max_seconds:.2f}s"
                        )
                    break

        mses = [r["MSE"] for r in runs]
        total = time.perf_counter() - start
        stats: Dict[str, Any] = {
            "algorithm": self.algorithm.name,
            "repeats_requested": repeats,
            "repeats_done": len(runs),
            "estimated": estimated,
            "mse_best": best_mse,
            "mse_avg": float(np.mean(mses)),
            "mse_std": float(np.std(mses)),
            "tse_avg": float(np.mean([r["TSE"] for r in runs])),
            "nmse_avg": float(np.mean([r["nMSE"] for r in runs])),
            "ci_avg": float(np.mean(ci_values)) if ci_values else None,
            "ci0_count": sum(1 for ci in ci_values if ci == 0),
            "T_cluster_avg": timer.mean,
            "T_total": total,
            "runs": runs,
        }

        if self.logger:
            self.logger.info(
                f"{self._prefix} Total time: {total:.3f} seconds, "
                f"best MSE={best_mse:.6g}, avg MSE={stats['mse_avg']:.6g}"
                + (f", CI=0 reached {stats['ci0_count']}/{len(runs)}" if has_reference else "")
            )

        return stats
