from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from app.core.constants import EligibilityReasonEnum, TestStatusEnum
from app.schemas.attempt import Attempt


class EligibilityResult(BaseModel):
    test_id: int
    can_take_now: bool
    reason: EligibilityReasonEnum
    attempts_used: int
    max_attempts: int
    next_attempt_number: int
    next_retry_at: Optional[datetime] = None
    retry_message: Optional[str] = None
    last_attempt: Optional[Attempt] = None

class Assignment(EligibilityResult):
    test_name: str
    status: TestStatusEnum
    duration_minutes: int
    min_success_percentage: float
