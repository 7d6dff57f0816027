from enum import Enum


class TestStatusEnum(str, Enum):
    PROCESSING = "processing"
    INACTIVE = "inactive"
    ACTIVE = "active"

class AttemptStatusEnum(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ABANDONED = "abandoned"

class SessionStatusEnum(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

class CompletionReasonEnum(str, Enum):
    SUBMITTED = "submitted"
    TIME_UP = "time_up"
    ABANDONED = "abandoned"

class PlannedTestStatusEnum(str, Enum):
    PLANNED = "planned"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"

class EligibilityReasonEnum(str, Enum):
    FIRST_ATTEMPT = "first_attempt"
    RETRY_AVAILABLE = "retry_available"
    PASSED_RETAKE = "passed_retake"
    PASSED_LOCKED = "passed_locked"
    BACKOFF = "backoff"
    EXHAUSTED = "exhausted"


SECONDS_PER_MINUTE = 60
