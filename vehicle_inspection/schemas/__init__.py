"""Pydantic schemas package."""
from vehicle_inspection.schemas.inspections import (
    AnswerSubmission,
    CreateInspectionRequest,
    InspectionCreatedResponse,
    InspectionHistoryItem,
    InspectionHistoryResponse,
    InspectionQuestionsResponse,
    InspectionSummary,
    PhotoInfo,
    PreviousAnswer,
    QuestionResponse,
    ServiceHealth,
)
from vehicle_inspection.schemas.questions import QuestionCatalogItem

__all__ = [
    "AnswerSubmission",
    "CreateInspectionRequest",
    "InspectionCreatedResponse",
    "InspectionHistoryItem",
    "InspectionHistoryResponse",
    "InspectionQuestionsResponse",
    "InspectionSummary",
    "PhotoInfo",
    "PreviousAnswer",
    "QuestionResponse",
    "ServiceHealth",
    "QuestionCatalogItem",
]
