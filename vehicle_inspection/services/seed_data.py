"""Seed data for the default inspection checklist."""
import asyncio
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vehicle_inspection.database import AsyncSessionLocal, dispose_engine, get_engine, init_db
from vehicle_inspection.models.db_models import Question

logger = logging.getLogger(__name__)


# =============================================================================
# CHECKLIST QUESTIONS
# =============================================================================

DEFAULT_QUESTIONS = [
    {"order_index": 1, "question_text": "Is there any body damage on the vehicle?"},
    {"order_index": 2, "question_text": "Are the tires worn?"},
    {"order_index": 3, "question_text": "Are there cracks or chips in the windshield or windows?"},
    {"order_index": 4, "question_text": "Are any exterior lights broken or not working?"},
    {"order_index": 5, "question_text": "Is there visible rust or corrosion?"},
    {"order_index": 6, "question_text": "Are there stains, tears or damage in the interior?"},
    {"order_index": 7, "question_text": "Are any warning lights on in the dashboard?"},
    {"order_index": 8, "question_text": "Are there signs of fluid leaks under the vehicle?"},
]


async def seed_questions(db: AsyncSession) -> int:
    """Seed checklist questions into database."""
    count = 0

    for question_data in DEFAULT_QUESTIONS:
        # Order index identifies a checklist slot
        result = await db.execute(
            select(Question).where(Question.order_index == question_data["order_index"])
        )
        existing = result.scalar_one_or_none()

        if not existing:
            db.add(
                Question(
                    question_text=question_data["question_text"],
                    order_index=question_data["order_index"],
                    is_active=True,
                )
            )
            count += 1
            logger.info(f"Added question {question_data['order_index']}: {question_data['question_text']}")
        else:
            logger.debug(f"Question already exists at order index {question_data['order_index']}")

    await db.commit()
    return count


async def seed_all(db: Optional[AsyncSession] = None) -> dict:
    """Seed all initial data."""
    close_session = False

    if db is None:
        get_engine()
        db = AsyncSessionLocal()
        close_session = True

    try:
        results = {
            "questions": await seed_questions(db),
        }

        logger.info(f"Seeding complete: {results}")
        return results

    finally:
        if close_session:
            await db.close()


# =============================================================================
# CLI ENTRY POINT
# =============================================================================

async def main():
    """Run seeding from command line."""
    logging.basicConfig(level=logging.INFO)

    logger.info("Seeding database with initial data...")

    await init_db()
    results = await seed_all()
    await dispose_engine()

    logger.info(f"Questions added: {results['questions']}")
    logger.info("Seeding complete!")


if __name__ == "__main__":
    asyncio.run(main())
