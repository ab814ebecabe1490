"""Ordered business-rule checks for checklist submissions.

Rules are evaluated in a fixed order across the whole submission and the
first violation wins:

1. car id present and within length
2. at least one answer
3. for each answer, in list order:
   question id, answer value, YES evidence (description and 1-3 photo URLs),
   then description/URL storage limits

NO answers carry no description or photo requirements.
"""
import enum
from dataclasses import dataclass
from typing import List, Optional

from vehicle_inspection.models.db_models import AnswerType
from vehicle_inspection.schemas.inspections import AnswerSubmission, CreateInspectionRequest

MAX_CAR_ID_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 1000
MAX_PHOTO_URL_LENGTH = 500
MAX_PHOTOS_PER_ANSWER = 3


class ValidationRule(str, enum.Enum):
    """Identifies which rule a submission violated."""

    CAR_ID_REQUIRED = "car_id_required"
    CAR_ID_TOO_LONG = "car_id_too_long"
    ANSWERS_REQUIRED = "answers_required"
    QUESTION_ID_REQUIRED = "question_id_required"
    ANSWER_REQUIRED = "answer_required"
    ANSWER_INVALID = "answer_invalid"
    DESCRIPTION_REQUIRED = "description_required"
    PHOTO_REQUIRED = "photo_required"
    TOO_MANY_PHOTOS = "too_many_photos"
    PHOTO_URL_REQUIRED = "photo_url_required"
    DESCRIPTION_TOO_LONG = "description_too_long"
    PHOTO_URL_TOO_LONG = "photo_url_too_long"


MESSAGES = {
    ValidationRule.CAR_ID_REQUIRED: "Car ID cannot be null or empty",
    ValidationRule.CAR_ID_TOO_LONG: f"Car ID cannot exceed {MAX_CAR_ID_LENGTH} characters",
    ValidationRule.ANSWERS_REQUIRED: "Answers cannot be null or empty",
    ValidationRule.QUESTION_ID_REQUIRED: "Question ID cannot be null",
    ValidationRule.ANSWER_REQUIRED: "Answer cannot be null or empty",
    ValidationRule.ANSWER_INVALID: "Answer must be YES or NO",
    ValidationRule.DESCRIPTION_REQUIRED: "Description is required for YES answers",
    ValidationRule.PHOTO_REQUIRED: "At least one photo is required for YES answers",
    ValidationRule.TOO_MANY_PHOTOS: f"Maximum {MAX_PHOTOS_PER_ANSWER} photos allowed per answer",
    ValidationRule.PHOTO_URL_REQUIRED: "Photo URL cannot be null or empty",
    ValidationRule.DESCRIPTION_TOO_LONG: f"Description cannot exceed {MAX_DESCRIPTION_LENGTH} characters",
    ValidationRule.PHOTO_URL_TOO_LONG: f"Photo URL cannot exceed {MAX_PHOTO_URL_LENGTH} characters",
}


@dataclass(frozen=True)
class ValidationFailure:
    """First rule a submission violated."""

    rule: ValidationRule
    message: str
    answer_index: Optional[int] = None  # Position in the answers list, if per-answer


def _fail(rule: ValidationRule, answer_index: Optional[int] = None) -> ValidationFailure:
    return ValidationFailure(rule=rule, message=MESSAGES[rule], answer_index=answer_index)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def parse_answer_value(value: str) -> Optional[AnswerType]:
    """Map a case-insensitive answer string to AnswerType, or None."""
    try:
        return AnswerType(value.strip().upper())
    except ValueError:
        return None


def validate_answer(answer: AnswerSubmission, index: int) -> Optional[ValidationFailure]:
    """Check one answer. Returns the first violated rule or None."""
    if answer.question_id is None:
        return _fail(ValidationRule.QUESTION_ID_REQUIRED, index)

    if _is_blank(answer.answer):
        return _fail(ValidationRule.ANSWER_REQUIRED, index)

    value = parse_answer_value(answer.answer)
    if value is None:
        return _fail(ValidationRule.ANSWER_INVALID, index)

    photo_urls: List[Optional[str]] = answer.photo_urls or []

    if value == AnswerType.YES:
        if _is_blank(answer.description):
            return _fail(ValidationRule.DESCRIPTION_REQUIRED, index)

        if not photo_urls:
            return _fail(ValidationRule.PHOTO_REQUIRED, index)

        if len(photo_urls) > MAX_PHOTOS_PER_ANSWER:
            return _fail(ValidationRule.TOO_MANY_PHOTOS, index)

        for url in photo_urls:
            if _is_blank(url):
                return _fail(ValidationRule.PHOTO_URL_REQUIRED, index)

    if answer.description is not None and len(answer.description) > MAX_DESCRIPTION_LENGTH:
        return _fail(ValidationRule.DESCRIPTION_TOO_LONG, index)

    for url in photo_urls:
        if url is not None and len(url) > MAX_PHOTO_URL_LENGTH:
            return _fail(ValidationRule.PHOTO_URL_TOO_LONG, index)

    return None


def validate_submission(request: CreateInspectionRequest) -> Optional[ValidationFailure]:
    """
    Validate a checklist submission.

    Args:
        request: Parsed submission body

    Returns:
        The first ValidationFailure found, or None if the submission is valid
    """
    if _is_blank(request.car_id):
        return _fail(ValidationRule.CAR_ID_REQUIRED)

    if len(request.car_id) > MAX_CAR_ID_LENGTH:
        return _fail(ValidationRule.CAR_ID_TOO_LONG)

    if not request.answers:
        return _fail(ValidationRule.ANSWERS_REQUIRED)

    for index, answer in enumerate(request.answers):
        failure = validate_answer(answer, index)
        if failure is not None:
            return failure

    return None
