"""
Иерархия исключений пакета clustering.

- ValidationError — некорректные входные данные (размерности, K, границы);
- StateError — операция вызвана раньше, чем появилось нужное состояние
  (например, update_centroids() до первого partition()).
"""

from __future__ import annotations


class ClusteringError(Exception):
    """Базовое исключение пакета."""


class ValidationError(ClusteringError, ValueError):
    """Некорректные входные данные."""


class DimensionMismatchError(ValidationError):
    """Размерности точек/центроидов не совпадают."""


class StateError(ClusteringError, RuntimeError):
    """Нарушен порядок вызовов: требуемое состояние ещё не создано."""
