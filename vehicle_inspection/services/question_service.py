"""Question catalog service (read side of the checklist)."""
import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from vehicle_inspection.exceptions import ResourceNotFoundError
from vehicle_inspection.models.db_models import Question

logger = logging.getLogger(__name__)


class QuestionService:
    """Reads checklist questions in display order."""

    async def list_active_questions(self, db: AsyncSession) -> List[Question]:
        """Get all active questions ordered by order index."""
        result = await db.execute(
            select(Question)
            .where(Question.is_active.is_(True))
            .order_by(Question.order_index)
        )
        questions = list(result.scalars().all())
        logger.debug(f"Found {len(questions)} active questions")
        return questions

    async def list_all_questions(self, db: AsyncSession) -> List[Question]:
        """Get all questions (including inactive) ordered by order index."""
        result = await db.execute(select(Question).order_by(Question.order_index))
        return list(result.scalars().all())

    async def get_question_by_id(self, db: AsyncSession, question_id: int) -> Question:
        """
        Get a question by ID.

        Raises:
            ResourceNotFoundError: If no question has this ID
        """
        question = await db.get(Question, question_id)

        if question is None:
            logger.error(f"Question not found with id: {question_id}")
            raise ResourceNotFoundError(f"Question not found with id: {question_id}")

        return question

    async def get_question_by_order_index(self, db: AsyncSession, order_index: int) -> Question:
        """
        Get a question by its order index.

        Raises:
            ResourceNotFoundError: If no question has this order index
        """
        result = await db.execute(select(Question).where(Question.order_index == order_index))
        question = result.scalar_one_or_none()

        if question is None:
            logger.error(f"Question not found with order index: {order_index}")
            raise ResourceNotFoundError(f"Question not found with order index: {order_index}")

        return question

    async def search_questions(self, db: AsyncSession, text: Optional[str]) -> List[Question]:
        """Case-insensitive substring search over active questions."""
        if text is None or not text.strip():
            return await self.list_active_questions(db)

        pattern = f"%{text.strip().lower()}%"
        result = await db.execute(
            select(Question)
            .where(
                Question.is_active.is_(True),
                func.lower(Question.question_text).like(pattern),
            )
            .order_by(Question.order_index)
        )
        questions = list(result.scalars().all())
        logger.debug(f"Found {len(questions)} questions matching search text: {text}")
        return questions

    async def count_active_questions(self, db: AsyncSession) -> int:
        """Get total count of active questions."""
        result = await db.execute(
            select(func.count(Question.id)).where(Question.is_active.is_(True))
        )
        return result.scalar_one()


# Singleton instance
_question_service: Optional[QuestionService] = None


def get_question_service() -> QuestionService:
    """Get or create the singleton question service."""
    global _question_service

    if _question_service is None:
        _question_service = QuestionService()

    return _question_service
