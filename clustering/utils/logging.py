import logging
from typing import Any


def setup_logger(level: int = logging.INFO) -> logging.Logger:
    """
    Создаёт и настраивает корневой логгер проекта ``clustering``.

    Логгеры модулей (``logging.getLogger(__name__)``) являются его потомками
    и пишут через тот же обработчик.

    :param level: минимальный уровень логирования
    :return: настроенный экземпляр :class:`logging.Logger`
    """
    logger = logging.getLogger("clustering")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Чтобы сообщения не дублировались через root-логгер
    logger.propagate = False

    return logger


def format_dataset_prefix(dataset: Any, algorithm: str | None = None) -> str:
    """
    Формирует текстовый префикс для логов по датасету.

    Ожидается объект с атрибутами ``n_points``, ``dimension`` и ``n_clusters``.
    """
    prefix = f"[N={dataset.n_points} D={dataset.dimension} K={dataset.n_clusters}"
    if algorithm:
        prefix += f" algo={algorithm}"
    return prefix + "]"


class PrefixedLogger:
    """Обёртка над логгером, добавляющая префикс к каждому сообщению."""

    def __init__(self, base_logger: logging.Logger | None, prefix: str) -> None:
        self._base = base_logger
        self._prefix = prefix

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._base:
            self._base.debug(f"{self._prefix} {msg}", *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._base:
            self._base.info(f"{self._prefix} {msg}", *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._base:
            self._base.warning(f"{self._prefix} {msg}", *args, **kwargs)
