"""Domain errors surfaced to API callers."""


class DomainError(Exception):
    """Base class for expected, user-facing failures."""

    code = "E_DOMAIN"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(DomainError):
    """Raised when user input fails validation before any calculation."""

    code = "E_INVALID_INPUT"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""

    code = "E_NOT_FOUND"

    def __init__(self, resource: str, identifier: object) -> None:
        super().__init__(f"{resource} '{identifier}' not found")
        self.resource = resource
        self.identifier = identifier
