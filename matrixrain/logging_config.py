"""
Logging do pacote `matrixrain`.

Tudo vai pro logger "matrixrain"; o nível e o arquivo opcional vêm do
RainSettings (`log_level`, `log_file`).
"""
import logging
import sys
from typing import Optional, Union

from .config import RainSettings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Liga o log no stdout (e em `log_file`, se houver).

    `level` aceita número ou nome ("DEBUG", "info", ...). Pode ser chamado de
    novo: os handlers anteriores são fechados e trocados.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger("matrixrain")
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for h in handlers:
        h.setLevel(level)
        h.setFormatter(formatter)
        logger.addHandler(h)

    logger.info("Logging initialized (level=%s, file=%s).", logging.getLevelName(level), log_file or "-")
    return logger


def setup_from_settings(settings: RainSettings) -> logging.Logger:
    return setup_logging(settings.log_level, settings.log_file)
