"""Service-level error types, mapped to HTTP statuses by the API layer."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vehicle_inspection.services.submission_validator import ValidationFailure


class InspectionServiceError(Exception):
    """Base class for errors raised by the inspection services."""


class SubmissionValidationError(InspectionServiceError, ValueError):
    """A checklist submission broke a business rule (HTTP 400)."""

    def __init__(self, failure: "ValidationFailure"):
        super().__init__(failure.message)
        self.failure = failure

    @property
    def message(self) -> str:
        return self.failure.message


class ResourceNotFoundError(InspectionServiceError, LookupError):
    """A referenced inspection or question does not exist (HTTP 404)."""
