from sqlalchemy import Column, Integer, DateTime, ForeignKey, Float, Boolean, Enum, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base
from app.core.constants import AttemptStatusEnum, CompletionReasonEnum

class TestAttempt(Base):
    __tablename__ = "test_attempts"
    __table_args__ = (
        UniqueConstraint("user_id", "test_id", "attempt_number", name="uq_test_attempts_user_test_number"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    test_id = Column(Integer, ForeignKey("tests.id"), nullable=False, index=True)
    planned_test_id = Column(Integer, ForeignKey("planned_tests.id"), nullable=True, index=True)
    attempt_number = Column(Integer, nullable=False)
    status = Column(Enum(AttemptStatusEnum), nullable=False, default=AttemptStatusEnum.COMPLETED)
    completion_reason = Column(Enum(CompletionReasonEnum), nullable=True)
    started_at = Column(DateTime(timezone=True), nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    points_earned = Column(Integer, nullable=True)
    total_points = Column(Integer, nullable=True)
    score = Column(Float, nullable=True)
    passed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    test = relationship("Test", back_populates="attempts")
    planned_test = relationship("PlannedTest", back_populates="attempts")
    answers = relationship(
        "AttemptAnswer",
        back_populates="attempt",
        cascade="all, delete-orphan",
        order_by="AttemptAnswer.id"
    )
