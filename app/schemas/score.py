from pydantic import BaseModel, ConfigDict
from typing import Optional, Tuple
from datetime import datetime


class QuestionOutcome(BaseModel):
    question_id: int
    selected_option_id: Optional[str] = None
    is_correct: bool
    points_earned: int
    points_possible: int
    answered_at: Optional[datetime] = None

    model_config = ConfigDict(frozen=True)


class ScoreResult(BaseModel):
    """Immutable outcome of scoring one attempt."""
    score: int
    points_earned: int
    total_points: int
    passed: bool
    correct_answers: int
    total_questions: int
    outcomes: Tuple[QuestionOutcome, ...]
    started_at: datetime
    completed_at: datetime
    duration_seconds: int
    duration: str

    model_config = ConfigDict(frozen=True)
