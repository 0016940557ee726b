"""
mailer: отправка HTML-писем через SMTP от имени учётной записи администратора.

    from mailer import send_mail, setup_logging

    setup_logging()  # консоль + LOG_DIR/mailer.log, уровень из LOG_LEVEL
    receipt = await send_mail("a@example.com", "Hi", "<b>hi</b>")
"""
from mailer.core.config import get_settings
from mailer.core.logging_config import get_logger, setup_logging
from mailer.integrations.email import DeliveryReceipt, MailError, MailSender

__all__ = [
    "send_mail",
    "setup_logging",
    "get_logger",
    "MailSender",
    "MailError",
    "DeliveryReceipt",
]


async def send_mail(to: str, subject: str, html_body: str) -> DeliveryReceipt:
    """Отправить письмо с настройками из окружения (get_settings())."""
    sender = MailSender(get_settings().transport_config)
    return await sender.send(to, subject, html_body)
