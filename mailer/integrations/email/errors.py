class MailError(Exception):
    """Ошибка отправки письма. Исходное исключение транспорта доступно в cause."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
