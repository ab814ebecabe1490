"""Pydantic schemas for the question catalog."""
from datetime import datetime

from pydantic import ConfigDict

from vehicle_inspection.schemas.inspections import CamelModel


class QuestionCatalogItem(CamelModel):
    """Question as stored in the catalog."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    question_text: str
    order_index: int
    is_active: bool
    created_at: datetime
