"""
Конфигурация почтового отправителя из переменных окружения (.env).
"""
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import SecretStr

from mailer.integrations.email.types import TransportConfig

# Загружаем .env из корня проекта
_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
load_dotenv(_env_path)


def _str(key: str, default: str | None = None) -> str:
    value = os.getenv(key)
    if value is not None:
        return value.strip()
    if default is not None:
        return default
    return ""


def _int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _optional_bool(key: str) -> bool | None:
    raw = os.getenv(key, "").strip().lower()
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    return None


class Settings:
    """Настройки отправки почты. Значения читаются из окружения при создании экземпляра."""

    def __init__(self) -> None:
        # Провайдер: "smtp" | "console"
        self.MAIL_PROVIDER: str = _str("MAIL_PROVIDER", "smtp")

        # SMTP-сервер
        self.MAIL_HOST: str = _str("MAIL_HOST", "localhost")
        self.MAIL_PORT: int = _int("MAIL_PORT", 587)
        # None — STARTTLS только если сервер его объявляет
        self.MAIL_STARTTLS: bool | None = _optional_bool("MAIL_STARTTLS")

        # Учётная запись администратора: логин и фиксированный отправитель
        self.ADMIN_EMAIL: str = _str("ADMIN_EMAIL", "admin@localhost")
        self.ADMIN_PASSWORD: SecretStr = SecretStr(_str("ADMIN_PASSWORD", ""))
        self.ADMIN_NAME: str = _str("ADMIN_NAME", "")

        # Логирование
        self.LOG_LEVEL: str = _str("LOG_LEVEL", "INFO")
        self.LOG_DIR: str = _str("LOG_DIR", "logs")

    @property
    def transport_config(self) -> TransportConfig:
        """Конфигурация транспорта, которая передаётся в MailSender."""
        return TransportConfig(
            provider=self.MAIL_PROVIDER.strip().lower() or "smtp",
            host=self.MAIL_HOST,
            port=self.MAIL_PORT,
            user=self.ADMIN_EMAIL,
            password=self.ADMIN_PASSWORD,
            start_tls=self.MAIL_STARTTLS,
            sender_name=self.ADMIN_NAME or None,
        )


# Глобальный экземпляр конфига (создаётся при первом обращении)
_settings: Settings | None = None


def get_settings() -> Settings:
    """Возвращает экземпляр настроек (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
