from mailer.integrations.email.transports.smtp_transport import SMTPTransport
from mailer.integrations.email.transports.console_transport import ConsoleTransport

__all__ = ["SMTPTransport", "ConsoleTransport"]
