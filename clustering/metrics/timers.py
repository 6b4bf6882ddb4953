"""
Таймер для измерения времени итераций и прогонов кластеризации.

Timer — контекстный менеджер на time.perf_counter(). В отличие от
одноразового секундомера он накапливает время: ``elapsed`` хранит последнее
измерение, ``total`` — сумму всех измерений, ``count`` — их количество.
Один экземпляр можно использовать для всех итераций алгоритма.
"""
from __future__ import annotations
import time
from typing import Any


class Timer:
    """
    Накопительный контекстный менеджер для замеров времени.

    Пример использования:
        timer = Timer()
        for _ in range(n):
            with timer:
                step()
        timer.total, timer.count, timer.mean
    """

    def __init__(self) -> None:
        self.start: float = 0.0
        self.end: float = 0.0
        self.elapsed: float = 0.0
        self.total: float = 0.0
        self.count: int = 0

    @property
    def mean(self) -> float:
        """Среднее время одного замера (0.0, если замеров не было)."""
        return self.total / self.count if self.count else 0.0

    def reset(self) -> None:
        """Сбрасывает накопленные значения."""
        self.elapsed = 0.0
        self.total = 0.0
        self.count = 0

    def __enter__(self) -> Timer:
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args: Any) -> None:
        self.end = time.perf_counter()
        self.elapsed = self.end - self.start
        self.total += self.elapsed
        self.count += 1
