class ServiceError(Exception):
    """Base class for failures raised by the quiz/question services."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Malformed or missing input."""


class NotFoundError(ServiceError):
    """No row matched the requested id."""

    def __init__(self, message: str = "no rows in result set") -> None:
        super().__init__(message)


class StorageError(ServiceError):
    """The underlying store rejected a statement. Carries the driver's message."""
