"""Inspection API routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from vehicle_inspection.config import settings
from vehicle_inspection.database import get_db
from vehicle_inspection.exceptions import ResourceNotFoundError, SubmissionValidationError
from vehicle_inspection.models.db_models import local_now
from vehicle_inspection.schemas.inspections import (
    CreateInspectionRequest,
    InspectionCreatedResponse,
    InspectionHistoryResponse,
    InspectionQuestionsResponse,
    InspectionSummary,
    ServiceHealth,
)
from vehicle_inspection.services.inspection_service import InspectionService, get_inspection_service

logger = logging.getLogger(__name__)

inspection_router = APIRouter(prefix="/inspections", tags=["inspections"])


@inspection_router.get("/health", response_model=ServiceHealth)
async def health_check():
    """Health check endpoint."""
    return ServiceHealth(status="UP", service=settings.SERVICE_NAME, timestamp=local_now())


# Declared before /car/{car_id}: /inspections/car/questions is the checklist for car "car"
@inspection_router.get(
    "/{car_id}/questions",
    response_model=InspectionQuestionsResponse,
    response_model_exclude_none=True,
)
async def get_inspection_questions(
    car_id: str,
    db: AsyncSession = Depends(get_db),
    service: InspectionService = Depends(get_inspection_service),
):
    """Get the checklist for a car with its latest answers as context."""
    logger.info(f"GET /inspections/{car_id}/questions - Getting inspection questions")

    try:
        return await service.get_inspection_questions(db, car_id)
    except Exception as e:
        logger.error(f"Error getting inspection questions for car {car_id}: {e}")
        raise


@inspection_router.post(
    "",
    response_model=InspectionCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_inspection(
    request: CreateInspectionRequest,
    db: AsyncSession = Depends(get_db),
    service: InspectionService = Depends(get_inspection_service),
):
    """Submit a completed checklist for a car."""
    answer_count = len(request.answers) if request.answers else 0
    logger.info(f"POST /inspections - Creating inspection for car: {request.car_id} with {answer_count} answers")

    try:
        return await service.create_inspection(db, request)
    except SubmissionValidationError as e:
        logger.warning(f"Invalid request for creating inspection: {e.message}")
        raise HTTPException(status_code=400, detail=e.message)
    except ResourceNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error creating inspection for car {request.car_id}: {e}")
        raise


@inspection_router.get("/car/{car_id}", response_model=InspectionHistoryResponse)
async def get_inspections_by_car_id(
    car_id: str,
    db: AsyncSession = Depends(get_db),
    service: InspectionService = Depends(get_inspection_service),
):
    """Get inspection history for a car, newest first."""
    logger.info(f"GET /inspections/car/{car_id} - Getting inspection history")
    return await service.get_inspection_history(db, car_id)


@inspection_router.get("/{inspection_id}", response_model=InspectionSummary)
async def get_inspection_by_id(
    inspection_id: int,
    db: AsyncSession = Depends(get_db),
    service: InspectionService = Depends(get_inspection_service),
):
    """Get an inspection by ID (debugging/admin)."""
    logger.info(f"GET /inspections/{inspection_id} - Getting inspection details")

    try:
        return await service.get_inspection_summary(db, inspection_id)
    except ResourceNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
