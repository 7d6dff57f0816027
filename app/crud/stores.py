"""
SQLAlchemy-backed repositories for the test-taking core.

Each store wraps one request-scoped Session and converts ORM rows into the
pydantic records the services work with.
"""
from typing import List, Optional, Set
from sqlalchemy.orm import Session

from app.core.constants import TestStatusEnum
from app.crud.attempt import attempt as crud_attempt
from app.crud.planned_test import planned_test as crud_planned_test
from app.crud.question import question as crud_question
from app.crud.test import test as crud_test
from app.schemas.attempt import Attempt, AttemptCreate
from app.schemas.planned_test import PlannedTest
from app.schemas.question import Question
from app.schemas.test import Test


class SqlTestCatalog:
    def __init__(self, db: Session):
        self.db = db

    def get_test(self, test_id: int) -> Optional[Test]:
        db_obj = crud_test.get(self.db, id=test_id)
        return Test.model_validate(db_obj) if db_obj else None

    def list_active_tests(self) -> List[Test]:
        return [Test.model_validate(t) for t in crud_test.get_by_status(self.db, TestStatusEnum.ACTIVE)]


class SqlQuestionBank:
    def __init__(self, db: Session):
        self.db = db

    def get_questions(self, test_id: int) -> List[Question]:
        return [Question.model_validate(q) for q in crud_question.get_by_test(self.db, test_id=test_id)]


class SqlAttemptStore:
    def __init__(self, db: Session):
        self.db = db

    def get_history(self, user_id: int, test_id: int) -> List[Attempt]:
        rows = crud_attempt.get_by_user_and_test(self.db, user_id=user_id, test_id=test_id)
        return [Attempt.model_validate(row) for row in rows]

    def get_by_test(self, test_id: int) -> List[Attempt]:
        return [Attempt.model_validate(row) for row in crud_attempt.get_all_by_test(self.db, test_id=test_id)]

    def get_attendee_ids(self, planned_test_id: int) -> Set[int]:
        return crud_attempt.get_attendee_ids(self.db, planned_test_id=planned_test_id)

    def append(self, attempt: AttemptCreate) -> Attempt:
        return Attempt.model_validate(crud_attempt.append(self.db, obj_in=attempt))


class SqlPlannedTestSchedule:
    def __init__(self, db: Session):
        self.db = db

    def get_by_code(self, code: str) -> Optional[PlannedTest]:
        db_obj = crud_planned_test.get_by_code(self.db, code=code)
        return PlannedTest.model_validate(db_obj) if db_obj else None
