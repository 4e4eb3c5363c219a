"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidEventError(ValidationError):
    """Raised when a login event is malformed (empty or oversized fields)."""

    def __init__(self, message: str):
        super().__init__(f"Invalid login event: {message}")


class StoreError(DomainError):
    """Base error for binding store failures."""

    pass


class StoreUnavailableError(StoreError):
    """Raised when the store cannot serve an operation in time or at all."""

    def __init__(self, operation: str, cause: str):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Binding store unavailable during {operation}: {cause}")


class StoreViolationError(StoreError):
    """Raised when a write conflicts with a uniqueness constraint."""

    def __init__(self, operation: str, cause: str):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Binding store constraint violated during {operation}: {cause}")
