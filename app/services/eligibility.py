"""
Decides whether a user may begin a new attempt at a test right now.

Only completed attempts take part in the cap and pass/fail decision: they are
the ones that count towards the attempt cap and the one whose outcome and
completion time drive the backoff. Abandoned or in-progress records still
advance the attempt number.

An abandon newer than the last completed attempt opens the same backoff
window, measured from when the abandoned attempt started. It never consumes
the cap.

Resolution order for a failed last attempt is cap first, then backoff, so an
exhausted test reports "no attempts remaining" at any later time rather than
a cooldown that would never open.
"""
from datetime import datetime, timedelta
from typing import Optional, Sequence

from app.core.constants import AttemptStatusEnum, EligibilityReasonEnum
from app.schemas.attempt import Attempt
from app.schemas.eligibility import EligibilityResult
from app.schemas.test import Test
from app.utils.datetime_utils import ensure_timezone_aware, format_wait


class AssignmentEligibilityResolver:

    def __init__(self, pass_blocks_retake: bool = False):
        self.pass_blocks_retake = pass_blocks_retake

    @staticmethod
    def max_attempts(test: Test) -> int:
        # retry_count=0 still allows the first attempt; a failure then exhausts it
        return max(test.retry_count, 1)

    @staticmethod
    def last_completed(history: Sequence[Attempt]) -> Optional[Attempt]:
        completed = [a for a in history if a.status == AttemptStatusEnum.COMPLETED]
        if not completed:
            return None
        return max(completed, key=lambda a: (ensure_timezone_aware(a.completed_at or a.started_at), a.attempt_number))

    @staticmethod
    def last_abandoned(history: Sequence[Attempt], last: Optional[Attempt]) -> Optional[Attempt]:
        abandoned = [
            a for a in history
            if a.status == AttemptStatusEnum.ABANDONED
            and (last is None or a.attempt_number > last.attempt_number)
        ]
        if not abandoned:
            return None
        return max(abandoned, key=lambda a: a.attempt_number)

    def resolve(self, test: Test, history: Sequence[Attempt], now: datetime) -> EligibilityResult:
        now = ensure_timezone_aware(now)
        attempts_used = sum(1 for a in history if a.status == AttemptStatusEnum.COMPLETED)
        max_attempts = self.max_attempts(test)
        last = self.last_completed(history)
        backoff = timedelta(hours=test.retry_backoff_hours)

        def result(can_take_now: bool, reason: EligibilityReasonEnum,
                   next_retry_at: Optional[datetime] = None, message: Optional[str] = None) -> EligibilityResult:
            return EligibilityResult(
                test_id=test.id,
                can_take_now=can_take_now,
                reason=reason,
                attempts_used=attempts_used,
                max_attempts=max_attempts,
                next_attempt_number=len(history) + 1,
                next_retry_at=next_retry_at,
                retry_message=message,
                last_attempt=last
            )

        def wait_until(next_retry_at: datetime) -> EligibilityResult:
            wait_seconds = int((next_retry_at - now).total_seconds())
            return result(
                False,
                EligibilityReasonEnum.BACKOFF,
                next_retry_at=next_retry_at,
                message=f"You can retry this test in {format_wait(wait_seconds)}."
            )

        def eligible(reason: EligibilityReasonEnum) -> EligibilityResult:
            abandoned = self.last_abandoned(history, last)
            if abandoned is not None:
                next_retry_at = ensure_timezone_aware(abandoned.started_at) + backoff
                if now < next_retry_at:
                    return wait_until(next_retry_at)
            return result(True, reason)

        if last is None:
            return eligible(EligibilityReasonEnum.FIRST_ATTEMPT if not history else EligibilityReasonEnum.RETRY_AVAILABLE)

        if last.passed:
            if self.pass_blocks_retake:
                return result(False, EligibilityReasonEnum.PASSED_LOCKED, message="You have already passed this test.")
            return eligible(EligibilityReasonEnum.PASSED_RETAKE)

        if attempts_used >= max_attempts:
            return result(False, EligibilityReasonEnum.EXHAUSTED, message="No attempts remaining for this test.")

        next_retry_at = ensure_timezone_aware(last.completed_at or last.started_at) + backoff
        if now < next_retry_at:
            return wait_until(next_retry_at)

        return eligible(EligibilityReasonEnum.RETRY_AVAILABLE)
