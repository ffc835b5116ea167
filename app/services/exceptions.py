"""
Service-layer exceptions
"""


class AppError(Exception):
    """Базовое исключение бизнес-логики (со статусом для HTTP слоя)."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"
    default_message: str = "Internal error"

    def __init__(self, message: str = "") -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(AppError):
    """Сущность не найдена."""

    status_code = 404
    code = "NOT_FOUND"
    default_message = "Resource not found"


class ValidationError(AppError):
    """Нарушена ссылочная целостность или уникальность."""

    status_code = 400
    code = "VALIDATION_ERROR"
    default_message = "Invalid input data"


class ConflictError(AppError):
    """Операция заблокирована зависимыми сущностями."""

    status_code = 409
    code = "CONFLICT"
    default_message = "Conflict"
