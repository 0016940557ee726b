"""
Интеграция отправки email: MailSender + транспорты (smtp, console) + фабрика по provider.
"""
from mailer.integrations.email.errors import MailError
from mailer.integrations.email.factory import create_transport
from mailer.integrations.email.ports import Transport, TransportFactory
from mailer.integrations.email.service import MailSender
from mailer.integrations.email.types import DeliveryReceipt, Envelope, MailMessage, TransportConfig

__all__ = [
    "MailSender",
    "MailError",
    "Transport",
    "TransportFactory",
    "create_transport",
    "MailMessage",
    "Envelope",
    "DeliveryReceipt",
    "TransportConfig",
]
