"""
Attempt scoring.

Every question in the bank contributes its points to the total; only
questions whose recorded option matches the answer key contribute to the
points earned. Skipped questions are therefore scored as wrong rather than
excluded.

The percentage is rounded half-up to a whole number using exact decimal
arithmetic, so 2.5 -> 3 and 82.5 -> 83 regardless of float representation.
"""
import logging
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Mapping, Sequence

from app.schemas.question import Question
from app.schemas.score import QuestionOutcome, ScoreResult
from app.schemas.session import RecordedAnswer
from app.utils.datetime_utils import format_duration

logger = logging.getLogger(__name__)


def calculate_percentage(points_earned: int, total_points: int) -> int:
    if total_points <= 0:
        return 0
    ratio = Decimal(points_earned) * 100 / Decimal(total_points)
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class ScoringEngine:

    def score(
        self,
        questions: Sequence[Question],
        answers: Mapping[int, RecordedAnswer],
        *,
        min_success_percentage: float,
        started_at: datetime,
        completed_at: datetime
    ) -> ScoreResult:
        total_points = 0
        points_earned = 0
        correct_answers = 0
        outcomes = []

        for question in questions:
            total_points += question.points
            answer = answers.get(question.id)
            is_correct = answer is not None and answer.selected_option_id == question.correct_option_id
            earned = question.points if is_correct else 0

            if is_correct:
                points_earned += earned
                correct_answers += 1

            outcomes.append(QuestionOutcome(
                question_id=question.id,
                selected_option_id=answer.selected_option_id if answer else None,
                is_correct=is_correct,
                points_earned=earned,
                points_possible=question.points,
                answered_at=answer.answered_at if answer else None
            ))

        percentage = calculate_percentage(points_earned, total_points)
        duration_seconds = max(int((completed_at - started_at).total_seconds()), 0)

        logger.debug(
            f"Scored {len(questions)} questions: {points_earned}/{total_points} points ({percentage}%)"
        )

        return ScoreResult(
            score=percentage,
            points_earned=points_earned,
            total_points=total_points,
            passed=percentage >= min_success_percentage,
            correct_answers=correct_answers,
            total_questions=len(questions),
            outcomes=tuple(outcomes),
            started_at=started_at,
            completed_at=completed_at,
            duration_seconds=duration_seconds,
            duration=format_duration(duration_seconds)
        )
