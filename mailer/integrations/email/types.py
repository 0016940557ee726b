"""
Типы для отправки почты: сообщение, конфигурация транспорта, квитанция о приёме.
"""
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class MailMessage(BaseModel):
    """Одно письмо. Создаётся на каждый вызов отправки и не хранится."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: str = Field(alias="from")
    to: str
    subject: str = ""
    html: str = ""


class Envelope(BaseModel):
    """SMTP-конверт (MAIL FROM / RCPT TO)."""

    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from")
    to: list[str]


class DeliveryReceipt(BaseModel):
    """
    Ответ транспорта: сервер принял письмо к пересылке.

    Это не подтверждение доставки во входящие.
    """

    message_id: str | None = None
    envelope: Envelope
    accepted: list[str] = Field(default_factory=list)
    rejected: list[str] = Field(default_factory=list)
    response: str = ""


@dataclass(frozen=True)
class TransportConfig:
    """Параметры подключения к почтовому серверу и учётная запись отправителя."""

    host: str
    port: int
    user: str
    password: SecretStr
    provider: str = "smtp"
    # Неявный TLS не используется: соединение открытое, с апгрейдом через STARTTLS
    use_tls: bool = False
    start_tls: bool | None = None
    sender_name: str | None = None

    def __post_init__(self) -> None:
        if self.use_tls:
            raise ValueError("Implicit TLS is not supported; use STARTTLS instead")
