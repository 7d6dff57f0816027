from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime

from app.core.constants import TestStatusEnum
from app.schemas.question import Question

class TestBase(BaseModel):
    name: str
    description: Optional[str] = None
    duration_minutes: int = Field(default=30, gt=0)
    min_success_percentage: float = Field(default=70.0, ge=0, le=100)
    retry_count: int = Field(default=1, ge=0)
    retry_backoff_hours: float = Field(default=0, ge=0)
    certificate_id: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "name": "React Fundamentals Assessment",
                "description": "Test covering basic React concepts and JSX syntax",
                "duration_minutes": 30,
                "min_success_percentage": 70,
                "retry_count": 3,
                "retry_backoff_hours": 24,
                "certificate_id": "cert-1"
            }
        }

class TestCreate(TestBase):
    pass

class TestUpdate(TestBase):
    name: Optional[str] = None
    duration_minutes: Optional[int] = Field(default=None, gt=0)
    min_success_percentage: Optional[float] = Field(default=None, ge=0, le=100)
    retry_count: Optional[int] = Field(default=None, ge=0)
    retry_backoff_hours: Optional[float] = Field(default=None, ge=0)

class Test(TestBase):
    id: int
    status: TestStatusEnum = TestStatusEnum.INACTIVE
    published_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    questions: List[Question] = []

    model_config = ConfigDict(from_attributes=True)
