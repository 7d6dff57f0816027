from sqlalchemy import Column, Integer, String, DateTime, Float, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base
from app.core.constants import TestStatusEnum

class Test(Base):
    __tablename__ = "tests"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    description = Column(String, nullable=True)
    status = Column(Enum(TestStatusEnum), nullable=False, default=TestStatusEnum.INACTIVE)
    duration_minutes = Column(Integer, nullable=False, default=30)
    min_success_percentage = Column(Float, nullable=False, default=70.0)
    retry_count = Column(Integer, nullable=False, default=1)
    retry_backoff_hours = Column(Float, nullable=False, default=0)
    certificate_id = Column(String, nullable=True)
    published_at = Column(DateTime(timezone=True), nullable=True)
    deleted_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    questions = relationship(
        "Question",
        back_populates="test",
        cascade="all, delete-orphan",
        order_by="[Question.position, Question.id]"
    )
    attempts = relationship("TestAttempt", back_populates="test", cascade="all, delete-orphan")
