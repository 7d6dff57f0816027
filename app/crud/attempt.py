from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import List, Set

from app.core.exceptions import AttemptImmutable
from app.crud.base import CRUDBase
from app.models.attempt import TestAttempt
from app.models.attempt_answer import AttemptAnswer
from app.schemas.attempt import AttemptCreate


class CRUDAttempt(CRUDBase[TestAttempt, AttemptCreate, AttemptCreate]):
    """Append-only access to attempt history."""

    def _query_with_relationships(self, db: Session):
        return db.query(TestAttempt).options(selectinload(TestAttempt.answers))

    def get(self, db: Session, id: int):
        return self._query_with_relationships(db).filter(TestAttempt.id == id).first()

    def get_by_user_and_test(self, db: Session, user_id: int, test_id: int) -> List[TestAttempt]:
        return (
            self._query_with_relationships(db)
            .filter(TestAttempt.user_id == user_id)
            .filter(TestAttempt.test_id == test_id)
            .order_by(TestAttempt.attempt_number.asc())
            .all()
        )

    def get_all_by_test(self, db: Session, test_id: int) -> List[TestAttempt]:
        return (
            self._query_with_relationships(db)
            .filter(TestAttempt.test_id == test_id)
            .order_by(TestAttempt.started_at.desc())
            .all()
        )

    def get_by_planned_test(self, db: Session, planned_test_id: int) -> List[TestAttempt]:
        return (
            self._query_with_relationships(db)
            .filter(TestAttempt.planned_test_id == planned_test_id)
            .order_by(TestAttempt.started_at.desc())
            .all()
        )

    def get_attendee_ids(self, db: Session, planned_test_id: int) -> Set[int]:
        rows = (
            db.query(TestAttempt.user_id)
            .filter(TestAttempt.planned_test_id == planned_test_id)
            .distinct()
            .all()
        )
        return {row.user_id for row in rows}

    def append(self, db: Session, *, obj_in: AttemptCreate) -> TestAttempt:
        existing = (
            db.query(TestAttempt.id)
            .filter(
                TestAttempt.user_id == obj_in.user_id,
                TestAttempt.test_id == obj_in.test_id,
                TestAttempt.attempt_number == obj_in.attempt_number
            )
            .first()
        )
        if existing:
            raise AttemptImmutable(
                f"Attempt {obj_in.attempt_number} for user {obj_in.user_id} on test {obj_in.test_id} is already recorded."
            )

        data = obj_in.model_dump(exclude={"answers"})
        db_obj = TestAttempt(**data)
        db_obj.answers = [AttemptAnswer(**answer.model_dump()) for answer in obj_in.answers]
        db.add(db_obj)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise AttemptImmutable(
                f"Attempt {obj_in.attempt_number} for user {obj_in.user_id} on test {obj_in.test_id} is already recorded."
            )
        except SQLAlchemyError:
            db.rollback()
            raise
        db.refresh(db_obj)
        return db_obj

    def create(self, db: Session, *, obj_in, commit: bool = True):
        raise AttemptImmutable("Attempts are recorded through append().")

    def update(self, db: Session, *, db_obj, obj_in):
        raise AttemptImmutable("Recorded attempts cannot be modified.")

    def delete(self, db: Session, *, id: int):
        raise AttemptImmutable("Recorded attempts cannot be deleted.")


attempt = CRUDAttempt(TestAttempt)
