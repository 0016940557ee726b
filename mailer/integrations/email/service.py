"""
MailSender: отправка одного HTML-письма от имени учётной записи администратора.
"""
import logging

from mailer.integrations.email.errors import MailError
from mailer.integrations.email.factory import create_transport
from mailer.integrations.email.ports import TransportFactory
from mailer.integrations.email.types import DeliveryReceipt, MailMessage, TransportConfig

logger = logging.getLogger(__name__)


class MailSender:
    """
    Сервис отправки писем.

    Отправитель всегда равен config.user; на каждый вызов send создаётся
    новый транспорт, общего изменяемого состояния между вызовами нет.

        sender = MailSender(get_settings().transport_config)
        receipt = await sender.send("a@example.com", "Hi", "<b>hi</b>")
    """

    def __init__(
        self,
        config: TransportConfig,
        transport_factory: TransportFactory = create_transport,
    ) -> None:
        self._config = config
        self._transport_factory = transport_factory

    def build_message(self, to: str, subject: str, html_body: str) -> MailMessage:
        return MailMessage(from_=self._config.user, to=to, subject=subject, html=html_body)

    async def send(self, to: str, subject: str, html_body: str) -> DeliveryReceipt:
        """
        Отправить письмо одному получателю.

        Args:
            to: Email получателя (не валидируется).
            subject: Тема письма, может быть пустой.
            html_body: HTML-содержимое письма (без санитизации).

        Returns:
            DeliveryReceipt от транспорта.

        Raises:
            MailError: транспорт не смог подключиться, сервер отклонил
                авторизацию или письмо. Исходная ошибка — в MailError.cause.
        """
        message = self.build_message(to, subject, html_body)
        try:
            transport = self._transport_factory(self._config)
            receipt = await transport.send_mail(message)
        except MailError:
            raise
        except Exception as e:
            logger.exception("Mail send failed to=%s subject=%s", to, subject)
            raise MailError(f"Failed to send mail to {to}: {e}", cause=e) from e

        logger.info(
            "Mail sent to=%s subject=%s message_id=%s",
            to,
            subject,
            receipt.message_id,
        )
        return receipt
