"""
Отправка писем через SMTP (aiosmtplib).
"""
import logging
from email.message import EmailMessage
from email.utils import formataddr, formatdate, make_msgid

import aiosmtplib
from bs4 import BeautifulSoup

from mailer.integrations.email.ports import Transport
from mailer.integrations.email.types import DeliveryReceipt, Envelope, MailMessage, TransportConfig

logger = logging.getLogger(__name__)


def html_to_text(markup: str) -> str:
    """Текстовое представление HTML для text/plain части письма (без style/script)."""
    soup = BeautifulSoup(markup, "html.parser")
    for tag in soup(["style", "script"]):
        tag.decompose()
    return soup.get_text("\n", strip=True)


def build_email_message(message: MailMessage, sender_name: str | None = None) -> EmailMessage:
    """Собрать MIME-письмо: text/plain + text/html (multipart/alternative)."""
    # Без "@" в адресе домен берёт make_msgid (FQDN хоста)
    domain = message.from_.partition("@")[2] or None
    msg = EmailMessage()
    msg["Subject"] = message.subject
    msg["From"] = formataddr((sender_name or None, message.from_))
    msg["To"] = message.to
    msg["Date"] = formatdate(localtime=True)
    msg["Message-ID"] = make_msgid(domain=domain)
    msg.set_content(html_to_text(message.html), subtype="plain", charset="utf-8")
    msg.add_alternative(message.html, subtype="html", charset="utf-8")
    return msg


class SMTPTransport(Transport):
    """Транспорт SMTP: одно соединение на одно письмо, без пула."""

    def __init__(self, config: TransportConfig) -> None:
        self._config = config

    async def send_mail(self, message: MailMessage) -> DeliveryReceipt:
        config = self._config
        msg = build_email_message(message, config.sender_name)
        username = config.user or None
        password = config.password.get_secret_value() or None

        # Ошибки aiosmtplib пробрасываются как есть; логирует их MailSender
        # Таймаут не задаём: действует значение по умолчанию aiosmtplib
        async with aiosmtplib.SMTP(
            hostname=config.host,
            port=config.port,
            use_tls=config.use_tls,
            start_tls=config.start_tls,
        ) as smtp:
            if username and password:
                await smtp.login(username, password)
            errors, response = await smtp.send_message(
                msg,
                sender=message.from_,
                recipients=[message.to],
            )

        rejected = list(errors)
        logger.debug("SMTP server response: %s", response)
        return DeliveryReceipt(
            message_id=str(msg["Message-ID"]),
            envelope=Envelope(from_=message.from_, to=[message.to]),
            accepted=[message.to] if message.to not in errors else [],
            rejected=rejected,
            response=response,
        )
