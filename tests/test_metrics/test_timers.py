"""
Тесты таймера для измерения времени итераций.
"""

import time

from clustering.metrics.timers import Timer


class TestTimer:
    """Тесты контекстного менеджера Timer."""

    def test_timer_basic(self):
        """Базовый тест работы таймера."""
        with Timer() as t:
            time.sleep(0.05)

        assert t.elapsed >= 0.05
        assert t.end > t.start
        assert t.count == 1
        assert t.total == t.elapsed

    def test_timer_elapsed_property(self):
        with Timer() as t:
            time.sleep(0.01)

        # elapsed должен быть равен разности end - start
        assert abs(t.elapsed - (t.end - t.start)) < 1e-9

    def test_timer_accumulates(self):
        """Повторное использование накапливает total и count."""
        timer = Timer()

        with timer:
            time.sleep(0.02)
        first = timer.elapsed

        with timer:
            time.sleep(0.02)
        second = timer.elapsed

        assert timer.count == 2
        assert abs(timer.total - (first + second)) < 1e-9
        assert abs(timer.mean - timer.total / 2) < 1e-9

    def test_mean_without_measurements(self):
        assert Timer().mean == 0.0

    def test_reset(self):
        timer = Timer()
        with timer:
            pass
        timer.reset()
        assert timer.count == 0
        assert timer.total == 0.0
        assert timer.elapsed == 0.0

    def test_timer_nested(self):
        """Тест вложенных таймеров."""
        with Timer() as outer:
            time.sleep(0.02)
            with Timer() as inner:
                time.sleep(0.02)

        assert outer.elapsed > inner.elapsed
