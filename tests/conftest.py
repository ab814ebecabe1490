"""Shared fixtures: in-memory database, seeded checklist, HTTP client."""
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from vehicle_inspection.database import Base, get_db
from vehicle_inspection.main import app
from vehicle_inspection.models.db_models import (
    AnswerType,
    Inspection,
    InspectionAnswer,
    InspectionPhoto,
    InspectionStatus,
    Question,
)
from vehicle_inspection.services.question_service import QuestionService
from vehicle_inspection.services.seed_data import seed_questions


# =============================================================================
# DATABASE
# =============================================================================

@pytest.fixture
async def engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def questions(db_session: AsyncSession):
    """Default checklist (ids 1-8) plus one retired question."""
    await seed_questions(db_session)

    db_session.add(
        Question(question_text="Is the cassette player working?", order_index=99, is_active=False)
    )
    await db_session.commit()

    active = await QuestionService().list_active_questions(db_session)
    # Release the shared connection for other sessions
    await db_session.commit()
    return active


@pytest.fixture
def make_draft(db_session: AsyncSession):
    """Insert an IN_PROGRESS inspection with the given answers.

    ``answers`` maps question id to (answer, description, photo urls).
    """

    async def _make_draft(car_id, answers):
        inspection = Inspection(car_id=car_id, status=InspectionStatus.IN_PROGRESS)
        db_session.add(inspection)
        await db_session.flush()

        for question_id, (value, description, urls) in answers.items():
            db_session.add(
                InspectionAnswer(
                    inspection_id=inspection.id,
                    question_id=question_id,
                    answer=AnswerType(value),
                    description=description,
                    photos=[InspectionPhoto(photo_url=url, is_new=True) for url in urls],
                )
            )

        await db_session.commit()
        return inspection

    return _make_draft


# =============================================================================
# HTTP
# =============================================================================

@pytest.fixture
async def client(session_factory, questions):
    """API client bound to the test database."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
