"""SQLAlchemy database models."""

import enum
from datetime import datetime

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from vehicle_inspection.database import Base

# BIGINT identity on PostgreSQL, INTEGER PRIMARY KEY (rowid) on SQLite
IdType = BigInteger().with_variant(Integer(), "sqlite")


def local_now():
    """Return current time in local timezone."""
    return datetime.now().astimezone()


class InspectionStatus(str, enum.Enum):
    """Inspection status enumeration."""

    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class AnswerType(str, enum.Enum):
    """Allowed checklist answer values."""

    YES = "YES"
    NO = "NO"


class Question(Base):
    """Checklist question model."""

    __tablename__ = "questions"

    id = Column(IdType, primary_key=True, autoincrement=True)
    question_text = Column(String(500), nullable=False)
    order_index = Column(Integer, nullable=False, unique=True)
    is_active = Column(Boolean, default=True, nullable=False)  # Soft delete flag
    created_at = Column(DateTime(timezone=True), default=local_now, nullable=False)


class Inspection(Base):
    """Inspection of a single car."""

    __tablename__ = "inspections"

    id = Column(IdType, primary_key=True, autoincrement=True)
    car_id = Column(String(100), nullable=False)
    inspection_date = Column(DateTime(timezone=True), default=local_now, nullable=False)
    status = Column(
        Enum(InspectionStatus, name="inspectionstatus"),
        default=InspectionStatus.IN_PROGRESS,
        nullable=False,
    )
    created_at = Column(DateTime(timezone=True), default=local_now, nullable=False)

    # Ownership only; answers are written by inspection_id and loaded explicitly
    answers = relationship(
        "InspectionAnswer",
        cascade="all",
        passive_deletes=True,
        order_by="InspectionAnswer.id",
        lazy="raise",
    )

    __table_args__ = (
        Index("ix_inspections_car_id_status_created_at", "car_id", "status", "created_at"),
    )

    def mark_as_completed(self):
        """IN_PROGRESS -> COMPLETED. COMPLETED is terminal."""
        self.status = InspectionStatus.COMPLETED

    @property
    def is_completed(self) -> bool:
        return self.status == InspectionStatus.COMPLETED


class InspectionAnswer(Base):
    """Answer to one question within an inspection."""

    __tablename__ = "inspection_answers"

    id = Column(IdType, primary_key=True, autoincrement=True)
    inspection_id = Column(
        IdType, ForeignKey("inspections.id", ondelete="CASCADE"), nullable=False, index=True
    )
    question_id = Column(IdType, ForeignKey("questions.id"), nullable=False, index=True)
    answer = Column(Enum(AnswerType, name="answertype"), nullable=False)
    description = Column(String(1000), nullable=True)
    created_at = Column(DateTime(timezone=True), default=local_now, nullable=False)

    photos = relationship(
        "InspectionPhoto",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="InspectionPhoto.id",
        lazy="raise",
    )

    __table_args__ = (
        UniqueConstraint("inspection_id", "question_id", name="uq_inspection_answers_inspection_question"),
    )

    @property
    def is_yes_answer(self) -> bool:
        return self.answer == AnswerType.YES

    @property
    def is_valid_yes_answer(self) -> bool:
        """A YES answer needs a description and at least one photo. Requires photos loaded."""
        if self.answer != AnswerType.YES:
            return True
        has_description = bool(self.description and self.description.strip())
        return has_description and len(self.photos) > 0


class InspectionPhoto(Base):
    """Photo evidence attached to an answer."""

    __tablename__ = "inspection_photos"

    id = Column(IdType, primary_key=True, autoincrement=True)
    answer_id = Column(
        IdType, ForeignKey("inspection_answers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    photo_url = Column(String(500), nullable=False)
    is_new = Column(Boolean, default=True, nullable=False)  # False = carried over
    uploaded_at = Column(DateTime(timezone=True), default=local_now, nullable=False)
