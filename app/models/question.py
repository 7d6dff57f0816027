from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Boolean, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base

class Question(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, index=True)
    test_id = Column(Integer, ForeignKey("tests.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    question_text = Column(String, nullable=False)
    options = Column(JSON, nullable=False) # [{"id": "a", "text": "..."}]
    correct_option_id = Column(String, nullable=False)
    points = Column(Integer, nullable=False, default=1)
    is_manual = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    test = relationship("Test", back_populates="questions")
