from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from app.core.constants import SessionStatusEnum
from app.schemas.attempt import AttemptResult
from app.schemas.question import SessionQuestion


class RecordedAnswer(BaseModel):
    question_id: int
    selected_option_id: str
    answered_at: datetime

class TestSessionView(BaseModel):
    session_id: str
    user_id: int
    test_id: int
    test_name: str
    planned_test_id: Optional[int] = None
    attempt_number: int
    status: SessionStatusEnum
    started_at: datetime
    current_question_index: int
    total_questions: int
    time_remaining: int
    answers: List[RecordedAnswer] = []
    current_question: Optional[SessionQuestion] = None
    questions: List[SessionQuestion] = []
    result: Optional[AttemptResult] = None

class StartSessionRequest(BaseModel):
    user_id: int
    test_id: int

class SubmitAnswerRequest(BaseModel):
    question_id: int
    option_id: str

class TickRequest(BaseModel):
    seconds_elapsed: int = Field(..., ge=0)
