import logging
import os
from typing import Mapping, Optional

LOG_LEVEL_ENV_VAR: str = "QR_FILE_SERVER_LOG"
DEFAULT_LOG_LEVEL: str = "info"
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

LOG_LEVELS: dict[str, int] = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "off": logging.CRITICAL + 10,
}


def resolve_log_level(value: Optional[str]) -> Optional[int]:
    """
    Переводит текстовое значение фильтра логов в уровень logging.

    :param value: Значение переменной окружения.
    :return: Уровень логирования или None для неизвестного значения.
    """
    if value is None or not value.strip():
        return LOG_LEVELS[DEFAULT_LOG_LEVEL]

    return LOG_LEVELS.get(value.strip().lower())


def setup_logging(environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Настраивает корневой логгер один раз при запуске процесса.

    :param environ: Переменные окружения, по умолчанию окружение процесса.
    :return: Установленный уровень логирования.
    """
    environ = os.environ if environ is None else environ
    raw_level: Optional[str] = environ.get(LOG_LEVEL_ENV_VAR)
    level: Optional[int] = resolve_log_level(raw_level)

    logging.basicConfig(level=level or LOG_LEVELS[DEFAULT_LOG_LEVEL], format=LOG_FORMAT)
    if level is None:
        logging.getLogger(__name__).warning(
            "Unknown %s value %r, falling back to %r",
            LOG_LEVEL_ENV_VAR, raw_level, DEFAULT_LOG_LEVEL
        )
        level = LOG_LEVELS[DEFAULT_LOG_LEVEL]

    return level
