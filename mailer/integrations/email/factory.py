"""
Фабрика выбора реализации Transport по TransportConfig.provider.
"""
import logging

from mailer.integrations.email.ports import Transport
from mailer.integrations.email.transports.console_transport import ConsoleTransport
from mailer.integrations.email.transports.smtp_transport import SMTPTransport
from mailer.integrations.email.types import TransportConfig

logger = logging.getLogger(__name__)


def create_transport(config: TransportConfig) -> Transport:
    """
    Возвращает новый экземпляр Transport в зависимости от provider.

    - "smtp" (по умолчанию) — SMTP через aiosmtplib
    - "console" — вывод в лог/консоль

    Вызывается на каждое письмо: транспорт не переиспользуется.
    """
    provider = (config.provider or "smtp").strip().lower()
    if provider == "smtp":
        return SMTPTransport(config)
    if provider == "console":
        return ConsoleTransport(config)
    # Неизвестный провайдер — fallback на console
    logger.warning("Unknown mail provider %r, falling back to console", config.provider)
    return ConsoleTransport(config)
