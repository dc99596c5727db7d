"""Typed failures raised by the domain services."""


class DomainError(Exception):
    """Base class for errors the API layer maps onto HTTP status codes."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    """A referenced task, subtask, tag, channel or association does not exist."""


class ConflictError(DomainError):
    """A uniqueness rule would be violated (tag name, task-tag pair)."""
