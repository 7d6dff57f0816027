from typing import List
from sqlalchemy import func
from sqlalchemy.orm import Session
from fastapi.encoders import jsonable_encoder

from app.crud.base import CRUDBase
from app.models.question import Question
from app.schemas.question import QuestionCreate, QuestionUpdate

class CRUDQuestion(CRUDBase[Question, QuestionCreate, QuestionUpdate]):
    def get_by_test(self, db: Session, *, test_id: int) -> List[Question]:
        return (
            db.query(self.model)
            .filter(self.model.test_id == test_id)
            .order_by(self.model.position, self.model.id)
            .all()
        )

    def count_by_test(self, db: Session, *, test_id: int) -> int:
        return db.query(func.count(self.model.id)).filter(self.model.test_id == test_id).scalar() or 0

    def next_position(self, db: Session, *, test_id: int) -> int:
        current = db.query(func.max(self.model.position)).filter(self.model.test_id == test_id).scalar()
        return 0 if current is None else current + 1

    def create_for_test(self, db: Session, *, test_id: int, obj_in: QuestionCreate, commit: bool = True) -> Question:
        data = jsonable_encoder(obj_in)
        data["test_id"] = test_id
        data["position"] = self.next_position(db, test_id=test_id)
        return self.create(db, obj_in=data, commit=commit)

question = CRUDQuestion(Question)
