from pydantic import BaseModel
from typing import List

from app.schemas.attempt import Attempt


class TestStatistics(BaseModel):
    test_id: int
    test_name: str
    total_attempts: int
    completed_attempts: int
    abandoned_attempts: int
    unique_users: int
    average_score: float
    pass_rate: float
    attempts: List[Attempt] = []
