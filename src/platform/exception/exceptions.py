class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


# Test harness errors: never mapped to HTTP responses, they surface to pytest as-is


class ConfigurationError(RuntimeError):
    """The bootstrapped application is unusable (no app, no container)."""


class InvalidArgumentError(ValueError):
    """A harness call received an argument it cannot act on (e.g. unknown mock target)."""
