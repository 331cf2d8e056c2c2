"""Error taxonomy shared by services and the HTTP layer.

Each error maps to exactly one HTTP status and a short message which the
exception handlers render as ``{"message": ...}``.
"""


class AppError(Exception):
    status_code: int = 500
    message: str = "Internal Error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    message = "Validation failed"


class InvalidId(AppError):
    status_code = 400
    message = "Invalid ID"


class DuplicateEmail(AppError):
    status_code = 400
    message = "Email already registered"


class Unauthorized(AppError):
    status_code = 401
    message = "unauthorised"


class InvalidCredentials(AppError):
    status_code = 401
    message = "Invalid email/password"


class NotFound(AppError):
    status_code = 404
    message = "Not found"


class PersistenceError(AppError):
    status_code = 500
    message = "Internal Error"


__all__ = [
    "AppError",
    "ValidationError",
    "InvalidId",
    "DuplicateEmail",
    "Unauthorized",
    "InvalidCredentials",
    "NotFound",
    "PersistenceError",
]
