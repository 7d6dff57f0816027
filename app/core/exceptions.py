from typing import Any, Dict, Optional


class LearningConsoleError(Exception):
    """Base class for expected, typed failures reported to callers."""
    status_code: int = 400
    code: str = "BAD_REQUEST"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class NotFound(LearningConsoleError):
    status_code = 404
    code = "NOT_FOUND"


class QuestionNotFound(NotFound):
    code = "QUESTION_NOT_FOUND"


class NotEligible(LearningConsoleError):
    """Raised when the retry gate or the attempt cap blocks a new attempt."""
    status_code = 409
    code = "NOT_ELIGIBLE"

    def __init__(self, message: str, eligibility=None):
        details = eligibility.model_dump(mode="json") if eligibility is not None else None
        super().__init__(message, details=details)
        self.eligibility = eligibility


class TestNotActive(LearningConsoleError):
    status_code = 409
    code = "TEST_NOT_ACTIVE"


class AlreadyCompleted(LearningConsoleError):
    status_code = 409
    code = "ALREADY_COMPLETED"


class InvalidTestState(LearningConsoleError):
    status_code = 409
    code = "INVALID_TEST_STATE"


class AttemptImmutable(LearningConsoleError):
    status_code = 409
    code = "ATTEMPT_IMMUTABLE"


class ValidationFailed(LearningConsoleError):
    status_code = 422
    code = "VALIDATION_ERROR"


class Conflict(LearningConsoleError):
    status_code = 409
    code = "CONFLICT"


class SessionWindowClosed(LearningConsoleError):
    """Raised when a planned test is joined outside its scheduled window."""
    status_code = 409
    code = "SESSION_WINDOW_CLOSED"


class SessionFull(LearningConsoleError):
    status_code = 409
    code = "SESSION_FULL"
