"""Read-only question catalog routes."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from vehicle_inspection.database import get_db
from vehicle_inspection.exceptions import ResourceNotFoundError
from vehicle_inspection.schemas.questions import QuestionCatalogItem
from vehicle_inspection.services.question_service import QuestionService, get_question_service

logger = logging.getLogger(__name__)

question_router = APIRouter(prefix="/questions", tags=["questions"])


@question_router.get("", response_model=List[QuestionCatalogItem])
async def list_active_questions(
    db: AsyncSession = Depends(get_db),
    service: QuestionService = Depends(get_question_service),
):
    """List active questions in display order."""
    questions = await service.list_active_questions(db)
    return [QuestionCatalogItem.model_validate(q) for q in questions]


@question_router.get("/search", response_model=List[QuestionCatalogItem])
async def search_questions(
    text: Optional[str] = Query(None, description="Text to look for in the question"),
    db: AsyncSession = Depends(get_db),
    service: QuestionService = Depends(get_question_service),
):
    """Search active questions by text."""
    questions = await service.search_questions(db, text)
    return [QuestionCatalogItem.model_validate(q) for q in questions]


@question_router.get("/{question_id}", response_model=QuestionCatalogItem)
async def get_question(
    question_id: int,
    db: AsyncSession = Depends(get_db),
    service: QuestionService = Depends(get_question_service),
):
    """Get a single question by ID."""
    try:
        question = await service.get_question_by_id(db, question_id)
    except ResourceNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return QuestionCatalogItem.model_validate(question)
