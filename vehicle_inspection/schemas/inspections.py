"""Pydantic schemas for inspections and checklist submissions."""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialising to camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# REQUESTS
# =============================================================================

class AnswerSubmission(CamelModel):
    """One answered question in a checklist submission.

    All fields are optional; missing values are reported by
    ``validate_submission`` as 400 errors.
    """

    question_id: Optional[int] = None
    answer: Optional[str] = Field(None, description='"YES" or "NO", case-insensitive')
    description: Optional[str] = Field(None, description="Required for YES answers")
    photo_urls: Optional[List[Optional[str]]] = Field(
        None, description="1-3 photo URLs, required for YES answers"
    )


class CreateInspectionRequest(CamelModel):
    """Checklist submission for a car."""

    car_id: Optional[str] = Field(None, description="Car identifier", examples=["CAR-12345"])
    answers: Optional[List[AnswerSubmission]] = None


# =============================================================================
# RESPONSES
# =============================================================================

class PhotoInfo(CamelModel):
    """Photo reference in a previous answer."""

    url: str
    is_new: bool


class PreviousAnswer(CamelModel):
    """Answer carried forward from the reference inspection."""

    answer: str
    description: Optional[str] = None
    photos: List[PhotoInfo] = []


class QuestionResponse(CamelModel):
    """Checklist question with optional carried-forward answer."""

    id: int
    question_text: str
    order_index: int
    previous_answer: Optional[PreviousAnswer] = None


class InspectionQuestionsResponse(CamelModel):
    """Response for GET /inspections/{carId}/questions."""

    car_id: str
    questions: List[QuestionResponse]
    has_previous_inspection: bool
    last_inspection_date: Optional[datetime] = None
    inspection_id: Optional[int] = None
    status: Optional[str] = None


class InspectionCreatedResponse(CamelModel):
    """Response for POST /inspections."""

    inspection_id: int
    car_id: str
    status: str
    created_at: datetime
    message: str = "Inspection created successfully"


class InspectionSummary(CamelModel):
    """Debug projection of a single inspection."""

    inspection_id: int
    car_id: str
    status: str
    inspection_date: datetime
    created_at: datetime
    answer_count: int


class InspectionHistoryItem(CamelModel):
    """One row of a car's inspection history."""

    inspection_id: int
    status: str
    inspection_date: datetime
    created_at: datetime


class InspectionHistoryResponse(CamelModel):
    """Response for GET /inspections/car/{carId}."""

    car_id: str
    total_inspections: int
    inspections: List[InspectionHistoryItem]


class ServiceHealth(CamelModel):
    """Response for GET /inspections/health."""

    status: str = "UP"
    service: str
    timestamp: datetime
