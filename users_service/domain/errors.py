class AppError(Exception):
    """Ошибка бизнес-логики, которую HTTP-слой отдаёт клиенту как есть."""
    status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    status_code = 409


class ValidationError(AppError):
    status_code = 400


class UnauthorizedError(AppError):
    status_code = 401
