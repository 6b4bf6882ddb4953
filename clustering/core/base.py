import sys
from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from clustering.core.errors import StateError, ValidationError
from clustering.metrics.timers import Timer

# Практически неограниченное число итераций для cluster(dataset)
UNBOUNDED = sys.maxsize


class ClusteringAlgorithm(ABC):
    """
    Базовый класс стратегий кластеризации.

    Отвечает за общий цикл итераций ``cluster(dataset, max_iterations)``
    и сбор статистики одного вызова:
    - n_iters_actual: количество выполненных итераций;
    - t_iter_total: суммарное время итераций (секунды);
    - converged: остановился ли алгоритм по собственному критерию.

    Конкретная стратегия реализует шаг ``_iterate`` и, при необходимости,
    хуки ``_prepare`` (перед циклом) и ``_finish`` (после цикла).
    """

    #: Имя стратегии для логов и реестра алгоритмов
    name: str = "base"
    #: Ограничение итераций при вызове cluster(dataset) без max_iterations
    default_max_iterations: int = UNBOUNDED

    def __init__(
        self,
        logger: Any | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.logger = logger
        # Если генератор не задан, используется генератор датасета
        self.rng = rng

        self.n_iters_actual: int = 0
        self.t_iter_total: float = 0.0
        self.converged: bool = False

    def _rng_for(self, dataset: Any) -> np.random.Generator:
        return self.rng if self.rng is not None else dataset.rng

    def cluster(self, dataset: Any, max_iterations: int | None = None) -> None:
        """
        Уточняет центроиды датасета до сходимости или до max_iterations.

        Args:
            dataset: Датасет с инициализированными центроидами
            max_iterations: Максимум итераций; None — значение по умолчанию
                стратегии (для K-means практически без ограничения)

        Raises:
            ValidationError: Если max_iterations < 0
            StateError: Если центроиды датасета не инициализированы
        """
        if max_iterations is None:
            max_iterations = self.default_max_iterations
        if max_iterations < 0:
            raise ValidationError(
                f"max_iterations cannot be negative, got {max_iterations}"
            )
        if dataset.centroids is None:
            raise StateError(
                f"{type(self).__name__}.cluster(): centroids are not initialized"
            )

        timer = Timer()
        self.n_iters_actual = 0
        self.converged = False

        self._prepare(dataset)
        for iteration in range(1, max_iterations + 1):
            with timer:
                converged = self._iterate(dataset, iteration)
            self.n_iters_actual = iteration

            if self.logger and (iteration == 1 or iteration % 10 == 0 or converged):
                status = " (converged)" if converged else ""
                self.logger.debug(
                    f"  Iteration {iteration}{status} (T_iter={timer.elapsed:.6f}s)"
                )

            if converged:
                self.converged = True
                if self.logger:
                    self.logger.debug(
                        f"  Convergence reached after {iteration} iterations"
                    )
                break
        self.t_iter_total = timer.total

        self._finish(dataset)

    def _prepare(self, dataset: Any) -> None:
        """Подготовка состояния стратегии перед циклом итераций."""

    def _finish(self, dataset: Any) -> None:
        """Завершающий шаг после цикла итераций."""

    @abstractmethod
    def _iterate(self, dataset: Any, iteration: int) -> bool:
        """Одна итерация; возвращает True, если достигнута сходимость."""
        raise NotImplementedError
