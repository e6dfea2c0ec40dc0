"""Errors raised when a domain rule is broken."""


class DomainError(Exception):
    """Base class of every domain rule violation."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """A value is not acceptable for an entity attribute."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InvariantViolationError(DomainError):
    """An operation would leave an aggregate in an inconsistent state."""

    def __init__(self, aggregate: str, invariant: str) -> None:
        super().__init__(f"{aggregate}: {invariant}")
        self.aggregate = aggregate
        self.invariant = invariant
