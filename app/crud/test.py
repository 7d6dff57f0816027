from sqlalchemy.orm import Session, selectinload
from typing import List

from app.core.constants import TestStatusEnum
from app.crud.base import CRUDBase
from app.models.test import Test
from app.schemas.test import TestCreate, TestUpdate


class CRUDTest(CRUDBase[Test, TestCreate, TestUpdate]):

    def _query_active(self, db: Session):
        return (
            db.query(Test)
            .options(selectinload(Test.questions))
            .filter(Test.deleted_at.is_(None))
        )

    def get(self, db: Session, id: int):
        return self._query_active(db).filter(Test.id == id).first()

    def get_multi(self, db: Session, skip: int = 0, limit: int = 100) -> List[Test]:
        return (
            self._query_active(db)
            .order_by(Test.id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def get_by_status(self, db: Session, status: TestStatusEnum) -> List[Test]:
        return (
            self._query_active(db)
            .filter(Test.status == status)
            .order_by(Test.id)
            .all()
        )

test = CRUDTest(Test)
