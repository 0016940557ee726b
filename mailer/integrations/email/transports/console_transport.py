"""
Fallback: печать письма в лог/консоль (без реальной отправки).
"""
import logging

from mailer.integrations.email.ports import Transport
from mailer.integrations.email.types import DeliveryReceipt, Envelope, MailMessage, TransportConfig

logger = logging.getLogger(__name__)


class ConsoleTransport(Transport):
    """Отправка «в консоль» — только логирование."""

    def __init__(self, config: TransportConfig | None = None) -> None:
        self._config = config

    async def send_mail(self, message: MailMessage) -> DeliveryReceipt:
        logger.info(
            "[ConsoleEmail] from=%s to=%s subject=%s\n---\n%s\n---",
            message.from_,
            message.to,
            message.subject,
            message.html,
        )
        return DeliveryReceipt(
            envelope=Envelope(from_=message.from_, to=[message.to]),
            accepted=[message.to],
            response="console",
        )
