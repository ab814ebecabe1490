"""Tests for the question catalog service and seeding."""
import pytest

from vehicle_inspection.exceptions import ResourceNotFoundError
from vehicle_inspection.services.question_service import QuestionService
from vehicle_inspection.services.seed_data import DEFAULT_QUESTIONS, seed_questions


@pytest.fixture
def service():
    return QuestionService()


async def test_active_questions_in_display_order(db_session, questions, service):
    active = await service.list_active_questions(db_session)

    assert len(active) == len(DEFAULT_QUESTIONS)
    assert [q.order_index for q in active] == sorted(q.order_index for q in active)
    assert all(q.is_active for q in active)


async def test_list_all_includes_inactive(db_session, questions, service):
    everything = await service.list_all_questions(db_session)

    assert len(everything) == len(DEFAULT_QUESTIONS) + 1
    assert everything[-1].order_index == 99
    assert everything[-1].is_active is False


async def test_get_question_by_id(db_session, questions, service):
    question = await service.get_question_by_id(db_session, questions[0].id)
    assert question.question_text == questions[0].question_text


async def test_get_question_by_id_missing(db_session, questions, service):
    with pytest.raises(ResourceNotFoundError, match="Question not found with id: 9999"):
        await service.get_question_by_id(db_session, 9999)


async def test_get_question_by_order_index(db_session, questions, service):
    question = await service.get_question_by_order_index(db_session, 2)
    assert question.question_text == "Are the tires worn?"

    with pytest.raises(ResourceNotFoundError):
        await service.get_question_by_order_index(db_session, 42)


async def test_search_is_case_insensitive(db_session, questions, service):
    results = await service.search_questions(db_session, "TIRES")
    assert [q.order_index for q in results] == [2]


async def test_search_skips_inactive(db_session, questions, service):
    assert await service.search_questions(db_session, "cassette") == []


async def test_blank_search_returns_active(db_session, questions, service):
    results = await service.search_questions(db_session, "  ")
    assert len(results) == len(DEFAULT_QUESTIONS)


async def test_count_active_questions(db_session, questions, service):
    assert await service.count_active_questions(db_session) == len(DEFAULT_QUESTIONS)


async def test_seeding_is_idempotent(db_session):
    assert await seed_questions(db_session) == len(DEFAULT_QUESTIONS)
    assert await seed_questions(db_session) == 0
    assert await QuestionService().count_active_questions(db_session) == len(DEFAULT_QUESTIONS)
