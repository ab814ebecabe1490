"""Tests for the ordered submission rules."""
import pytest

from vehicle_inspection.models.db_models import AnswerType
from vehicle_inspection.schemas.inspections import AnswerSubmission, CreateInspectionRequest
from vehicle_inspection.services.submission_validator import (
    ValidationRule,
    parse_answer_value,
    validate_submission,
)


def _yes(**overrides):
    data = {"question_id": 1, "answer": "YES", "description": "Dent on door", "photo_urls": ["a.jpg"]}
    data.update(overrides)
    return AnswerSubmission(**data)


def _request(answers, car_id="CAR-1"):
    return CreateInspectionRequest(car_id=car_id, answers=answers)


class TestParseAnswerValue:

    @pytest.mark.parametrize("raw", ["YES", "yes", " Yes "])
    def test_yes_is_case_insensitive(self, raw):
        assert parse_answer_value(raw) == AnswerType.YES

    def test_no(self):
        assert parse_answer_value("no") == AnswerType.NO

    def test_unknown_value(self):
        assert parse_answer_value("MAYBE") is None


class TestValidateSubmission:

    def test_valid_submission(self):
        request = _request([_yes(), AnswerSubmission(question_id=2, answer="NO")])
        assert validate_submission(request) is None

    @pytest.mark.parametrize("car_id", [None, "", "   "])
    def test_car_id_required(self, car_id):
        failure = validate_submission(_request([_yes()], car_id=car_id))
        assert failure.rule == ValidationRule.CAR_ID_REQUIRED
        assert failure.message == "Car ID cannot be null or empty"

    def test_car_id_too_long(self):
        failure = validate_submission(_request([_yes()], car_id="C" * 101))
        assert failure.message == "Car ID cannot exceed 100 characters"

    @pytest.mark.parametrize("answers", [None, []])
    def test_answers_required(self, answers):
        failure = validate_submission(_request(answers))
        assert failure.message == "Answers cannot be null or empty"

    def test_question_id_required(self):
        failure = validate_submission(_request([AnswerSubmission(answer="NO")]))
        assert failure.message == "Question ID cannot be null"
        assert failure.answer_index == 0

    def test_answer_required(self):
        failure = validate_submission(_request([AnswerSubmission(question_id=1, answer=" ")]))
        assert failure.message == "Answer cannot be null or empty"

    def test_answer_must_be_yes_or_no(self):
        failure = validate_submission(_request([AnswerSubmission(question_id=1, answer="MAYBE")]))
        assert failure.rule == ValidationRule.ANSWER_INVALID
        assert failure.message == "Answer must be YES or NO"

    def test_yes_requires_description(self):
        failure = validate_submission(_request([_yes(description="")]))
        assert failure.message == "Description is required for YES answers"

    def test_yes_requires_photo(self):
        failure = validate_submission(_request([_yes(photo_urls=[])]))
        assert failure.message == "At least one photo is required for YES answers"

    def test_yes_allows_at_most_three_photos(self):
        failure = validate_submission(_request([_yes(photo_urls=["1", "2", "3", "4"])]))
        assert failure.message == "Maximum 3 photos allowed per answer"

    def test_blank_photo_url(self):
        failure = validate_submission(_request([_yes(photo_urls=["a.jpg", " "])]))
        assert failure.message == "Photo URL cannot be null or empty"

    def test_description_length_limit(self):
        failure = validate_submission(
            _request([AnswerSubmission(question_id=1, answer="NO", description="x" * 1001)])
        )
        assert failure.message == "Description cannot exceed 1000 characters"

    def test_photo_url_length_limit(self):
        failure = validate_submission(_request([_yes(photo_urls=["x" * 501])]))
        assert failure.message == "Photo URL cannot exceed 500 characters"

    def test_no_answer_needs_no_evidence(self):
        request = _request([AnswerSubmission(question_id=1, answer="NO", photo_urls=["ignored.jpg"])])
        assert validate_submission(request) is None

    def test_first_failing_answer_wins(self):
        request = _request([
            AnswerSubmission(question_id=1, answer="NO"),
            _yes(question_id=2, description=None),
            _yes(question_id=3, photo_urls=None),
        ])

        failure = validate_submission(request)

        assert failure.rule == ValidationRule.DESCRIPTION_REQUIRED
        assert failure.answer_index == 1

    def test_description_checked_before_photos(self):
        failure = validate_submission(_request([_yes(description=None, photo_urls=None)]))
        assert failure.rule == ValidationRule.DESCRIPTION_REQUIRED
