import logging
import sys
from pathlib import Path

from mailer.core.config import get_settings


def _get_log_level(level_name: str) -> int:
    """Получить уровень логирования по имени."""
    level_mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }

    return level_mapping.get(level_name.strip().upper(), logging.INFO)


def setup_logging(log_dir: str | Path | None = None) -> Path:
    """Настройка логирования: консоль + файл mailer.log. Возвращает путь к файлу логов."""
    settings = get_settings()

    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    # Создаём директорию для логов, если её нет
    logs_path = Path(log_dir if log_dir is not None else settings.LOG_DIR)
    logs_path.mkdir(parents=True, exist_ok=True)
    log_file = logs_path / "mailer.log"

    logging.basicConfig(
        level=_get_log_level(settings.LOG_LEVEL),
        format=log_format,
        datefmt=date_format,
        handlers=[
            logging.StreamHandler(sys.stdout),  # Консоль
            logging.FileHandler(log_file, encoding="utf-8"),  # Файл
        ],
    )

    # aiosmtplib на DEBUG пишет весь SMTP-диалог
    logging.getLogger("aiosmtplib").setLevel(logging.WARNING)

    return log_file


def get_logger(name: str) -> logging.Logger:
    """Получить logger с указанным именем."""
    return logging.getLogger(name)
