"""Tests for model helpers."""
from vehicle_inspection.models.db_models import (
    AnswerType,
    Inspection,
    InspectionAnswer,
    InspectionPhoto,
    InspectionStatus,
)


class TestInspectionAnswer:

    def test_yes_with_description_and_photo_is_valid(self):
        answer = InspectionAnswer(
            answer=AnswerType.YES,
            description="Dent on door",
            photos=[InspectionPhoto(photo_url="a.jpg")],
        )

        assert answer.is_yes_answer
        assert answer.is_valid_yes_answer

    def test_yes_without_photos_is_invalid(self):
        answer = InspectionAnswer(answer=AnswerType.YES, description="Dent on door", photos=[])
        assert not answer.is_valid_yes_answer

    def test_yes_with_blank_description_is_invalid(self):
        answer = InspectionAnswer(
            answer=AnswerType.YES,
            description="  ",
            photos=[InspectionPhoto(photo_url="a.jpg")],
        )
        assert not answer.is_valid_yes_answer

    def test_no_answer_needs_no_evidence(self):
        answer = InspectionAnswer(answer=AnswerType.NO)

        assert not answer.is_yes_answer
        assert answer.is_valid_yes_answer


def test_mark_as_completed():
    inspection = Inspection(car_id="CAR-1", status=InspectionStatus.IN_PROGRESS)
    assert not inspection.is_completed

    inspection.mark_as_completed()

    assert inspection.is_completed
    assert inspection.status == InspectionStatus.COMPLETED
