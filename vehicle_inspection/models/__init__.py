"""Database models package."""
from vehicle_inspection.models.db_models import (
    AnswerType,
    Inspection,
    InspectionAnswer,
    InspectionPhoto,
    InspectionStatus,
    Question,
)

__all__ = [
    "Question",
    "Inspection",
    "InspectionAnswer",
    "InspectionPhoto",
    "InspectionStatus",
    "AnswerType",
]
