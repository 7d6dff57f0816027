from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional, List
from datetime import datetime

from app.core.constants import AttemptStatusEnum, CompletionReasonEnum
from app.schemas.score import ScoreResult
from app.utils.datetime_utils import ensure_timezone_aware


class AnswerRecord(BaseModel):
    question_id: int
    selected_option_id: Optional[str] = None
    is_correct: Optional[bool] = None
    points_earned: Optional[int] = None
    answered_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("answered_at")
    @classmethod
    def to_utc(cls, v):
        return ensure_timezone_aware(v) if v is not None else v

class AttemptBase(BaseModel):
    user_id: int
    test_id: int
    planned_test_id: Optional[int] = None
    attempt_number: int
    status: AttemptStatusEnum = AttemptStatusEnum.COMPLETED
    completion_reason: Optional[CompletionReasonEnum] = None
    started_at: datetime
    completed_at: Optional[datetime] = None
    points_earned: Optional[int] = None
    total_points: Optional[int] = None
    score: Optional[float] = None
    passed: bool = False
    answers: List[AnswerRecord] = []

    @field_validator("started_at", "completed_at")
    @classmethod
    def to_utc(cls, v):
        return ensure_timezone_aware(v) if v is not None else v

class AttemptCreate(AttemptBase):
    pass

class Attempt(AttemptBase):
    id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class AttemptResult(BaseModel):
    """What a finished session hands back: the stored attempt plus its score breakdown."""
    session_id: str
    attempt: Attempt
    result: Optional[ScoreResult] = None
