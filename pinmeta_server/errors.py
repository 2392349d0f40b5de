"""Service errors mapped to HTTP status codes by the app's exception handler."""


class PinMetaError(Exception):
    """Base error for the PinMeta service."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(PinMetaError):
    status_code = 404


class ConflictError(PinMetaError):
    status_code = 409


class ValidationError(PinMetaError):
    status_code = 400


class AuthenticationError(PinMetaError):
    status_code = 401
