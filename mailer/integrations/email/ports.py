"""
Интерфейс почтового транспорта (port).
"""
from abc import ABC, abstractmethod
from collections.abc import Callable

from mailer.integrations.email.types import DeliveryReceipt, MailMessage, TransportConfig


class Transport(ABC):
    """Абстракция транспорта: передаёт одно письмо почтовому серверу."""

    @abstractmethod
    async def send_mail(self, message: MailMessage) -> DeliveryReceipt:
        """
        Отправить письмо.

        Args:
            message: Письмо (отправитель уже зафиксирован).

        Returns:
            DeliveryReceipt — ответ сервера о приёме письма.

        Ошибки транспорта пробрасываются без изменений.
        """
        ...


TransportFactory = Callable[[TransportConfig], Transport]
