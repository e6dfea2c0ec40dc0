"""Custom exception hierarchy for the recall application."""

from starlette import status


class RecallError(Exception):
    """Base exception for all recall errors.

    ``message`` is the code returned to the client in the error envelope,
    ``fields`` optionally maps request fields to error codes.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        fields: dict[str, str] | None = None,
    ) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        self.fields = fields
        super().__init__(self.message)


class NotFoundError(RecallError):
    """Resource not found error."""

    def __init__(self, message: str = "NOT_FOUND", fields: dict[str, str] | None = None) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND, fields=fields)


class ForbiddenError(RecallError):
    """Resource belongs to another user."""

    def __init__(self, message: str = "FORBIDDEN", fields: dict[str, str] | None = None) -> None:
        """Initialize with message and 403 status code."""
        super().__init__(message, status_code=status.HTTP_403_FORBIDDEN, fields=fields)


class ServiceError(RecallError):
    """Service layer error."""


class PersistenceError(ServiceError):
    """Storage engine failure. The underlying detail is logged, never returned."""

    def __init__(self, detail: str) -> None:
        """Initialize with an internal detail message."""
        self.detail = detail
        super().__init__("INTERNAL_SERVER_ERROR")


class GenerationServiceError(ServiceError):
    """The flashcard generation engine is unreachable or returned an error."""

    def __init__(self, reason: str) -> None:
        """Initialize with the engine failure reason."""
        self.reason = reason
        super().__init__("AI_SERVICE_UNAVAILABLE", status_code=status.HTTP_502_BAD_GATEWAY)


class GenerationSourceNotFoundError(NotFoundError):
    """Generation source does not exist."""

    def __init__(self, generation_source_id: object) -> None:
        """Initialize with the missing generation source ID."""
        self.generation_source_id = generation_source_id
        super().__init__(fields={"generationSourceId": "GENERATION_SOURCE_NOT_FOUND"})

    def __str__(self) -> str:
        return f"Generation source with id {self.generation_source_id} not found"


class GenerationSourceForbiddenError(ForbiddenError):
    """Generation source belongs to another user."""

    def __init__(self, generation_source_id: object) -> None:
        """Initialize with the foreign generation source ID."""
        self.generation_source_id = generation_source_id
        super().__init__(fields={"generationSourceId": "GENERATION_SOURCE_FORBIDDEN"})

    def __str__(self) -> str:
        return f"Generation source with id {self.generation_source_id} does not belong to the user"
