"""Children, stored exercises and best scores."""
from datetime import datetime
from uuid import uuid4
from sqlalchemy import Column, String, DateTime, Text, ForeignKey, Integer, Float, JSON, Index, UniqueConstraint
from sqlalchemy.orm import relationship

from core.database import Base, GUID


class Child(Base):
    """A child practising conjugation"""
    __tablename__ = "children"

    id = Column(GUID, primary_key=True, default=uuid4)
    first_name = Column(String(100), nullable=False)
    level = Column(String(20), nullable=False, default="débutant")
    created_at = Column(DateTime, default=datetime.utcnow)

    scores = relationship("Score", back_populates="child", cascade="all, delete-orphan")


class Exercise(Base):
    """A generated exercise, stored as it was emitted"""
    __tablename__ = "exercises"
    __table_args__ = (
        Index("ix_exercises_type_level", "type", "level"),
    )

    id = Column(String(100), primary_key=True)  # e.g. "beginner_qcm_je_avoir_1a2b3c4d"
    type = Column(String(20), nullable=False, default="QCM")
    verb = Column(String(20), nullable=False)
    level = Column(String(20), nullable=False)
    sentence = Column(Text, nullable=False)
    correct_answer = Column(String(50), nullable=False)
    options = Column(JSON, default=list)
    subject = Column(String(20), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)


class Score(Base):
    """Best finished session per child, exercise type and level"""
    __tablename__ = "scores"
    __table_args__ = (
        UniqueConstraint("child_id", "exercise_type", "level", name="uq_scores_child_type_level"),
    )

    id = Column(GUID, primary_key=True, default=uuid4)
    child_id = Column(GUID, ForeignKey("children.id", ondelete="CASCADE"), nullable=False)
    exercise_type = Column(String(20), nullable=False, default="QCM")
    level = Column(String(20), nullable=False)
    score = Column(Integer, nullable=False)
    max_score = Column(Integer, nullable=False)
    elapsed_time = Column(Float, nullable=False)  # seconds
    completed_at = Column(DateTime, default=datetime.utcnow)

    child = relationship("Child", back_populates="scores")
