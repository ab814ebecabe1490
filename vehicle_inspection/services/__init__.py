"""Services package."""
from vehicle_inspection.services.inspection_service import InspectionService, get_inspection_service
from vehicle_inspection.services.question_service import QuestionService, get_question_service
from vehicle_inspection.services.submission_validator import (
    ValidationFailure,
    ValidationRule,
    validate_submission,
)

__all__ = [
    "InspectionService",
    "get_inspection_service",
    "QuestionService",
    "get_question_service",
    "ValidationFailure",
    "ValidationRule",
    "validate_submission",
]
