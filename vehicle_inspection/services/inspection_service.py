"""Inspection service: checklist with carried-forward answers, and submissions.

Read path (``get_inspection_questions``):
    The reference inspection for a car is its newest IN_PROGRESS inspection,
    or failing that its newest COMPLETED one. Answers of the reference are
    attached to the active questions as previous-answer context, with every
    photo reported as not new.

Write path (``create_inspection``):
    Validate, reuse the car's IN_PROGRESS inspection or create one, upsert one
    answer per question, append new photos for YES answers, then mark the
    inspection COMPLETED. Everything commits together or not at all.
"""
import logging
from typing import Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from vehicle_inspection.exceptions import ResourceNotFoundError, SubmissionValidationError
from vehicle_inspection.models.db_models import (
    Inspection,
    InspectionAnswer,
    InspectionPhoto,
    InspectionStatus,
    local_now,
)
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
)
from vehicle_inspection.services.question_service import QuestionService, get_question_service
from vehicle_inspection.services.submission_validator import parse_answer_value, validate_submission

logger = logging.getLogger(__name__)


class InspectionService:
    """Builds checklists for cars and persists checklist submissions."""

    def __init__(self, question_service: Optional[QuestionService] = None):
        self.question_service = question_service or get_question_service()

    # =========================================================================
    # LOOKUPS
    # =========================================================================

    async def _find_latest_by_status(
        self,
        db: AsyncSession,
        car_id: str,
        status: InspectionStatus
    ) -> Optional[Inspection]:
        """Newest inspection for a car in the given status."""
        result = await db.execute(
            select(Inspection)
            .where(Inspection.car_id == car_id, Inspection.status == status)
            .order_by(Inspection.created_at.desc(), Inspection.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def _find_answer(
        self,
        db: AsyncSession,
        inspection_id: int,
        question_id: int
    ) -> Optional[InspectionAnswer]:
        result = await db.execute(
            select(InspectionAnswer)
            .options(selectinload(InspectionAnswer.photos))
            .where(
                InspectionAnswer.inspection_id == inspection_id,
                InspectionAnswer.question_id == question_id,
            )
        )
        return result.scalar_one_or_none()

    async def _answers_with_photos(
        self,
        db: AsyncSession,
        inspection_id: int
    ) -> List[InspectionAnswer]:
        result = await db.execute(
            select(InspectionAnswer)
            .options(selectinload(InspectionAnswer.photos))
            .where(InspectionAnswer.inspection_id == inspection_id)
            .order_by(InspectionAnswer.id)
        )
        return list(result.scalars().all())

    async def get_latest_completed_inspection(
        self,
        db: AsyncSession,
        car_id: str
    ) -> Optional[Inspection]:
        """Get the newest COMPLETED inspection for a car."""
        logger.debug(f"Getting latest completed inspection for car: {car_id}")
        return await self._find_latest_by_status(db, car_id, InspectionStatus.COMPLETED)

    async def car_has_previous_inspections(self, db: AsyncSession, car_id: str) -> bool:
        """Check if a car has any COMPLETED inspection."""
        result = await db.execute(
            select(func.count(Inspection.id)).where(
                Inspection.car_id == car_id,
                Inspection.status == InspectionStatus.COMPLETED,
            )
        )
        has_previous = result.scalar_one() > 0
        logger.debug(f"Car {car_id} has previous inspections: {has_previous}")
        return has_previous

    # =========================================================================
    # READ: CHECKLIST WITH PREVIOUS ANSWERS
    # =========================================================================

    async def get_inspection_questions(
        self,
        db: AsyncSession,
        car_id: str
    ) -> InspectionQuestionsResponse:
        """
        Get the active checklist for a car with its latest answers attached.

        Args:
            db: Database session
            car_id: Car identifier (opaque; unknown cars are first-time cars)

        Returns:
            Questions in display order plus reference inspection details
        """
        logger.debug(f"Getting inspection questions for car: {car_id}")

        questions = await self.question_service.list_active_questions(db)

        # A draft takes priority over completed history
        reference = await self._find_latest_by_status(db, car_id, InspectionStatus.IN_PROGRESS)
        if reference is None:
            reference = await self.get_latest_completed_inspection(db, car_id)

        previous_answers: Dict[int, InspectionAnswer] = {}
        if reference is not None:
            logger.debug(
                f"Found previous inspection for car: {car_id} with ID: {reference.id} "
                f"at {reference.created_at}"
            )
            for answer in await self._answers_with_photos(db, reference.id):
                previous_answers[answer.question_id] = answer

        question_responses = []
        for question in questions:
            previous = previous_answers.get(question.id)
            previous_answer = None
            if previous is not None:
                previous_answer = PreviousAnswer(
                    answer=previous.answer.value,
                    description=previous.description,
                    # Nothing from an earlier inspection is new to this one
                    photos=[PhotoInfo(url=photo.photo_url, is_new=False) for photo in previous.photos],
                )
            question_responses.append(
                QuestionResponse(
                    id=question.id,
                    question_text=question.question_text,
                    order_index=question.order_index,
                    previous_answer=previous_answer,
                )
            )

        logger.info(
            f"Retrieved {len(questions)} questions for car: {car_id}, "
            f"has previous inspection: {reference is not None}"
        )

        return InspectionQuestionsResponse(
            car_id=car_id,
            questions=question_responses,
            has_previous_inspection=reference is not None,
            last_inspection_date=reference.created_at if reference else None,
            inspection_id=reference.id if reference else None,
            status=reference.status.value if reference else None,
        )

    # =========================================================================
    # WRITE: SUBMISSION
    # =========================================================================

    async def create_inspection(
        self,
        db: AsyncSession,
        request: CreateInspectionRequest
    ) -> InspectionCreatedResponse:
        """
        Persist a checklist submission as a completed inspection.

        Args:
            db: Database session (committed or rolled back here)
            request: Checklist submission

        Returns:
            Created inspection details

        Raises:
            SubmissionValidationError: If the submission breaks a business rule
            ResourceNotFoundError: If an answer references an unknown question
        """
        failure = validate_submission(request)
        if failure is not None:
            raise SubmissionValidationError(failure)

        logger.debug(f"Creating new inspection for car: {request.car_id}")

        try:
            inspection = await self._find_latest_by_status(
                db, request.car_id, InspectionStatus.IN_PROGRESS
            )

            if inspection is not None:
                logger.debug(
                    f"Found an existing IN_PROGRESS inspection with id: {inspection.id}. Updating it."
                )
            else:
                logger.debug("No existing IN_PROGRESS inspection found. Creating a new one.")
                inspection = Inspection(
                    car_id=request.car_id,
                    inspection_date=local_now(),
                    status=InspectionStatus.IN_PROGRESS,
                )
                db.add(inspection)

            # Answers reference the inspection by id
            await db.flush()

            for answer_request in request.answers:
                await self._process_answer(db, inspection, answer_request)

            inspection.mark_as_completed()
            await db.commit()

        except Exception:
            await db.rollback()
            raise

        logger.info(
            f"Successfully created inspection with id: {inspection.id} for car: {request.car_id} "
            f"with {len(request.answers)} answers"
        )

        return InspectionCreatedResponse(
            inspection_id=inspection.id,
            car_id=inspection.car_id,
            status=inspection.status.value,
            created_at=inspection.created_at,
        )

    async def _process_answer(
        self,
        db: AsyncSession,
        inspection: Inspection,
        answer_request: AnswerSubmission
    ) -> InspectionAnswer:
        """Upsert one answer and append any new photos."""
        value = parse_answer_value(answer_request.answer)
        answer = await self._find_answer(db, inspection.id, answer_request.question_id)

        if answer is not None:
            logger.debug(f"Updating existing answer with id: {answer.id}")
            answer.answer = value
            answer.description = answer_request.description
        else:
            question = await self.question_service.get_question_by_id(db, answer_request.question_id)
            answer = InspectionAnswer(
                inspection_id=inspection.id,
                question_id=question.id,
                answer=value,
                description=answer_request.description,
                photos=[],
            )
            db.add(answer)

        # NO answers take no new photos; photos already on the row are kept
        if answer.is_yes_answer and answer_request.photo_urls:
            # Merge: skip URLs already attached
            existing_urls = {photo.photo_url for photo in answer.photos}
            added = 0
            for url in answer_request.photo_urls:
                if url in existing_urls:
                    continue
                answer.photos.append(InspectionPhoto(photo_url=url, is_new=True))
                existing_urls.add(url)
                added += 1
            logger.debug(f"Added {added} photos for question: {answer_request.question_id}")

        # Later answers for the same question in this submission must see this row
        await db.flush()
        return answer

    # =========================================================================
    # DEBUG / HISTORY
    # =========================================================================

    async def get_inspection_by_id(self, db: AsyncSession, inspection_id: int) -> Inspection:
        """
        Get an inspection by ID.

        Raises:
            ResourceNotFoundError: If no inspection has this ID
        """
        logger.debug(f"Getting inspection by id: {inspection_id}")
        inspection = await db.get(Inspection, inspection_id)

        if inspection is None:
            logger.error(f"Inspection not found with id: {inspection_id}")
            raise ResourceNotFoundError(f"Inspection not found with id: {inspection_id}")

        return inspection

    async def get_inspection_summary(self, db: AsyncSession, inspection_id: int) -> InspectionSummary:
        """Debug projection of an inspection, including its answer count."""
        inspection = await self.get_inspection_by_id(db, inspection_id)

        result = await db.execute(
            select(func.count(InspectionAnswer.id)).where(
                InspectionAnswer.inspection_id == inspection.id
            )
        )

        return InspectionSummary(
            inspection_id=inspection.id,
            car_id=inspection.car_id,
            status=inspection.status.value,
            inspection_date=inspection.inspection_date,
            created_at=inspection.created_at,
            answer_count=result.scalar_one(),
        )

    async def get_inspections_by_car_id(self, db: AsyncSession, car_id: str) -> List[Inspection]:
        """Get all inspections for a car, newest first."""
        result = await db.execute(
            select(Inspection)
            .where(Inspection.car_id == car_id)
            .order_by(Inspection.created_at.desc(), Inspection.id.desc())
        )
        inspections = list(result.scalars().all())
        logger.debug(f"Found {len(inspections)} inspections for car: {car_id}")
        return inspections

    async def get_inspection_history(self, db: AsyncSession, car_id: str) -> InspectionHistoryResponse:
        """Inspection history projection for a car."""
        inspections = await self.get_inspections_by_car_id(db, car_id)

        return InspectionHistoryResponse(
            car_id=car_id,
            total_inspections=len(inspections),
            inspections=[
                InspectionHistoryItem(
                    inspection_id=inspection.id,
                    status=inspection.status.value,
                    inspection_date=inspection.inspection_date,
                    created_at=inspection.created_at,
                )
                for inspection in inspections
            ],
        )


# Singleton instance
_inspection_service: Optional[InspectionService] = None


def get_inspection_service() -> InspectionService:
    """Get or create the singleton inspection service."""
    global _inspection_service

    if _inspection_service is None:
        _inspection_service = InspectionService()

    return _inspection_service
