from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Boolean
from sqlalchemy.orm import relationship
from app.core.database import Base

class AttemptAnswer(Base):
    __tablename__ = "attempt_answers"

    id = Column(Integer, primary_key=True, index=True)
    attempt_id = Column(Integer, ForeignKey("test_attempts.id"), nullable=False, index=True)
    question_id = Column(Integer, nullable=False)
    selected_option_id = Column(String, nullable=True)
    is_correct = Column(Boolean, nullable=True)
    points_earned = Column(Integer, nullable=True)
    answered_at = Column(DateTime(timezone=True), nullable=True)

    attempt = relationship("TestAttempt", back_populates="answers")
