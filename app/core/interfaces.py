"""
Repository contracts consumed by the test-taking core.

The services only talk to these protocols. `app.crud.stores` provides the
SQLAlchemy-backed implementations; tests substitute in-memory fakes.
"""
from typing import List, Optional, Protocol, Set

from app.schemas.attempt import Attempt, AttemptCreate
from app.schemas.planned_test import PlannedTest
from app.schemas.question import Question
from app.schemas.test import Test


class TestCatalog(Protocol):
    def get_test(self, test_id: int) -> Optional[Test]:
        ...

    def list_active_tests(self) -> List[Test]:
        ...


class QuestionBank(Protocol):
    def get_questions(self, test_id: int) -> List[Question]:
        """Return the test's questions in a stable order (position, then id)."""
        ...


class AttemptStore(Protocol):
    def get_history(self, user_id: int, test_id: int) -> List[Attempt]:
        """Return every recorded attempt for the pair, oldest first."""
        ...

    def get_by_test(self, test_id: int) -> List[Attempt]:
        ...

    def get_attendee_ids(self, planned_test_id: int) -> Set[int]:
        """Return the users who already hold an attempt at the planned test."""
        ...

    def append(self, attempt: AttemptCreate) -> Attempt:
        """Persist a terminal attempt. Existing records are never rewritten."""
        ...


class PlannedTestSchedule(Protocol):
    def get_by_code(self, code: str) -> Optional[PlannedTest]:
        ...
