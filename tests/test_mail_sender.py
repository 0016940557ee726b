"""
MailSender: фиксированный отправитель, транспорт на каждый вызов, ошибки в MailError.
"""
import asyncio

import aiosmtplib
import pytest
from pydantic import SecretStr

from mailer.integrations.email import (
    DeliveryReceipt,
    Envelope,
    MailError,
    MailMessage,
    MailSender,
    Transport,
    TransportConfig,
)

ADMIN = "admin@example.com"


def make_config(**overrides) -> TransportConfig:
    params = {
        "host": "smtp.example.com",
        "port": 587,
        "user": ADMIN,
        "password": SecretStr("s3cret"),
    }
    params.update(overrides)
    return TransportConfig(**params)


class EchoTransport(Transport):
    """Запоминает полученные письма и подтверждает приём."""

    def __init__(self) -> None:
        self.received: list[dict] = []

    async def send_mail(self, message: MailMessage) -> DeliveryReceipt:
        self.received.append(message.model_dump(by_alias=True))
        await asyncio.sleep(0)
        return DeliveryReceipt(
            message_id=f"<{message.to}@stub>",
            envelope=Envelope(from_=message.from_, to=[message.to]),
            accepted=[message.to],
            response="250 OK",
        )


class FailingTransport(Transport):
    def __init__(self, exc: BaseException) -> None:
        self._exc = exc

    async def send_mail(self, message: MailMessage) -> DeliveryReceipt:
        raise self._exc


@pytest.mark.asyncio
async def test_send_passes_message_with_configured_sender_to_transport() -> None:
    transport = EchoTransport()
    sender = MailSender(make_config(), transport_factory=lambda config: transport)

    await sender.send("a@example.com", "Hi", "<b>hi</b>")

    assert transport.received == [
        {"from": ADMIN, "to": "a@example.com", "subject": "Hi", "html": "<b>hi</b>"}
    ]


@pytest.mark.parametrize(
    "to,subject,html_body",
    [
        ("a@example.com", "Hi", "<b>hi</b>"),
        ("evil@example.com", "", ""),
        ("not-an-address", "From: spoof@example.com", "<p>From: spoof@example.com</p>"),
    ],
)
def test_built_message_sender_is_always_configured_account(to, subject, html_body) -> None:
    sender = MailSender(make_config(), transport_factory=lambda config: EchoTransport())
    message = sender.build_message(to, subject, html_body)
    assert message.from_ == ADMIN
    assert message.to == to
    assert message.subject == subject
    assert message.html == html_body


@pytest.mark.asyncio
async def test_send_returns_transport_receipt_unchanged() -> None:
    transport = EchoTransport()
    sender = MailSender(make_config(), transport_factory=lambda config: transport)

    receipt = await sender.send("b@example.com", "Subject", "<p>body</p>")

    assert receipt.message_id == "<b@example.com@stub>"
    assert receipt.accepted == ["b@example.com"]
    assert receipt.rejected == []
    assert receipt.envelope.from_ == ADMIN
    assert receipt.response == "250 OK"


@pytest.mark.asyncio
async def test_send_wraps_authentication_failure_in_mail_error() -> None:
    auth_error = aiosmtplib.SMTPAuthenticationError(535, "5.7.8 Authentication credentials invalid")
    sender = MailSender(make_config(), transport_factory=lambda config: FailingTransport(auth_error))

    with pytest.raises(MailError) as exc_info:
        await sender.send("a@example.com", "Hi", "<b>hi</b>")

    err = exc_info.value
    assert err.cause is auth_error
    assert err.__cause__ is auth_error
    assert isinstance(err.cause, aiosmtplib.SMTPAuthenticationError)
    assert err.cause.code == 535


@pytest.mark.asyncio
async def test_send_wraps_connection_failure() -> None:
    conn_error = aiosmtplib.SMTPConnectError("Error connecting to smtp.example.com on port 587")
    sender = MailSender(make_config(), transport_factory=lambda config: FailingTransport(conn_error))

    with pytest.raises(MailError) as exc_info:
        await sender.send("a@example.com", "Hi", "")

    assert exc_info.value.cause is conn_error


@pytest.mark.asyncio
async def test_send_does_not_rewrap_mail_error() -> None:
    original = MailError("already wrapped")
    sender = MailSender(make_config(), transport_factory=lambda config: FailingTransport(original))

    with pytest.raises(MailError) as exc_info:
        await sender.send("a@example.com", "Hi", "")

    assert exc_info.value is original


@pytest.mark.asyncio
async def test_send_wraps_transport_factory_failure() -> None:
    def broken_factory(config: TransportConfig) -> Transport:
        raise OSError("no route to host")

    sender = MailSender(make_config(), transport_factory=broken_factory)

    with pytest.raises(MailError) as exc_info:
        await sender.send("a@example.com", "Hi", "")

    assert isinstance(exc_info.value.cause, OSError)


@pytest.mark.asyncio
async def test_concurrent_sends_use_independent_transports() -> None:
    created: list[EchoTransport] = []
    configs: list[TransportConfig] = []

    def factory(config: TransportConfig) -> Transport:
        configs.append(config)
        transport = EchoTransport()
        created.append(transport)
        return transport

    config = make_config()
    sender = MailSender(config, transport_factory=factory)

    first, second = await asyncio.gather(
        sender.send("one@example.com", "One", "<p>1</p>"),
        sender.send("two@example.com", "Two", "<p>2</p>"),
    )

    assert len(created) == 2
    assert created[0] is not created[1]
    assert all(c is config for c in configs)
    assert [len(t.received) for t in created] == [1, 1]
    recipients = sorted(t.received[0]["to"] for t in created)
    assert recipients == ["one@example.com", "two@example.com"]
    assert first.accepted == ["one@example.com"]
    assert second.accepted == ["two@example.com"]


@pytest.mark.asyncio
async def test_concurrent_failure_does_not_affect_other_send() -> None:
    auth_error = aiosmtplib.SMTPAuthenticationError(535, "bad credentials")
    transports = iter([EchoTransport(), FailingTransport(auth_error)])
    sender = MailSender(make_config(), transport_factory=lambda config: next(transports))

    results = await asyncio.gather(
        sender.send("ok@example.com", "Ok", ""),
        sender.send("fail@example.com", "Fail", ""),
        return_exceptions=True,
    )

    assert isinstance(results[0], DeliveryReceipt)
    assert results[0].accepted == ["ok@example.com"]
    assert isinstance(results[1], MailError)
    assert results[1].cause is auth_error
