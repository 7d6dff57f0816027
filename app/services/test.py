from typing import List
from sqlalchemy.orm import Session

from app.core.constants import AttemptStatusEnum, TestStatusEnum
from app.core.exceptions import InvalidTestState, NotFound, ValidationFailed
from app.crud.stores import SqlAttemptStore
from app.crud.question import question as crud_question
from app.crud.test import test as crud_test
from app.models.question import Question as QuestionModel
from app.models.test import Test as TestModel
from app.schemas.question import QuestionCreate, QuestionOption, QuestionUpdate, validate_option_set
from app.schemas.statistics import TestStatistics
from app.schemas.test import TestCreate, TestUpdate
from app.utils.datetime_utils import utc_now


class TestService:

    def _get_test_or_404(self, db: Session, test_id: int) -> TestModel:
        test = crud_test.get(db, id=test_id)
        if not test:
            raise NotFound("Test not found.")
        return test

    def _get_question_or_404(self, db: Session, question_id: int) -> QuestionModel:
        question = crud_question.get(db, id=question_id)
        if not question:
            raise NotFound("Question not found.")
        return question

    def _require_editable(self, test: TestModel):
        if test.status == TestStatusEnum.PROCESSING:
            raise InvalidTestState("Test is still being processed.")

    def create_test(self, db: Session, test_in: TestCreate) -> TestModel:
        new_test = crud_test.create(db, obj_in=test_in)
        return crud_test.get(db, id=new_test.id)

    def get_test(self, db: Session, test_id: int) -> TestModel:
        return self._get_test_or_404(db, test_id)

    def list_tests(self, db: Session, skip: int = 0, limit: int = 100) -> List[TestModel]:
        return crud_test.get_multi(db, skip=skip, limit=limit)

    def update_test(self, db: Session, test_id: int, test_in: TestUpdate) -> TestModel:
        test = self._get_test_or_404(db, test_id)
        self._require_editable(test)
        return crud_test.update(db, db_obj=test, obj_in=test_in)

    def delete_test(self, db: Session, test_id: int) -> TestModel:
        self._get_test_or_404(db, test_id)
        return crud_test.delete(db, id=test_id)

    def get_test_questions(self, db: Session, test_id: int) -> List[QuestionModel]:
        self._get_test_or_404(db, test_id)
        return crud_question.get_by_test(db, test_id=test_id)

    def add_questions(self, db: Session, test_id: int, questions_in: List[QuestionCreate]) -> List[QuestionModel]:
        test = self._get_test_or_404(db, test_id)
        self._require_editable(test)
        if not questions_in:
            raise ValidationFailed("No questions provided.")

        new_questions = [
            crud_question.create_for_test(db, test_id=test_id, obj_in=question_in, commit=False)
            for question_in in questions_in
        ]
        db.commit()
        return new_questions

    def update_question(self, db: Session, question_id: int, question_in: QuestionUpdate) -> QuestionModel:
        question = self._get_question_or_404(db, question_id)
        self._require_editable(question.test)

        update_data = question_in.model_dump(exclude_unset=True)
        options = question_in.options if question_in.options is not None else [
            QuestionOption.model_validate(option) for option in question.options
        ]
        correct_option_id = update_data.get("correct_option_id", question.correct_option_id)
        try:
            validate_option_set(options, correct_option_id)
        except ValueError as e:
            raise ValidationFailed(str(e))

        return crud_question.update(db, db_obj=question, obj_in=update_data)

    def delete_question(self, db: Session, question_id: int) -> QuestionModel:
        question = self._get_question_or_404(db, question_id)
        test = question.test
        if test.status == TestStatusEnum.ACTIVE and crud_question.count_by_test(db, test_id=test.id) <= 1:
            raise InvalidTestState("Cannot remove the last question of a published test.")
        return crud_question.delete(db, id=question_id)

    def publish_test(self, db: Session, test_id: int) -> TestModel:
        test = self._get_test_or_404(db, test_id)
        if test.status != TestStatusEnum.INACTIVE:
            raise InvalidTestState("Only inactive tests can be published.")
        if crud_question.count_by_test(db, test_id=test_id) == 0:
            raise InvalidTestState("Cannot publish test with no questions.")

        return crud_test.update(db, db_obj=test, obj_in={
            "status": TestStatusEnum.ACTIVE,
            "published_at": utc_now()
        })

    def unpublish_test(self, db: Session, test_id: int) -> TestModel:
        test = self._get_test_or_404(db, test_id)
        if test.status != TestStatusEnum.ACTIVE:
            raise InvalidTestState("Only active tests can be unpublished.")
        return crud_test.update(db, db_obj=test, obj_in={"status": TestStatusEnum.INACTIVE})

    def get_test_statistics(self, db: Session, test_id: int) -> TestStatistics:
        test = self._get_test_or_404(db, test_id)
        attempts = SqlAttemptStore(db).get_by_test(test_id)

        completed = [a for a in attempts if a.status == AttemptStatusEnum.COMPLETED]
        abandoned = [a for a in attempts if a.status == AttemptStatusEnum.ABANDONED]

        average_score = (
            sum(a.score or 0 for a in completed) / len(completed) if completed else 0.0
        )
        pass_rate = (
            sum(1 for a in completed if a.passed) / len(completed) * 100 if completed else 0.0
        )

        return TestStatistics(
            test_id=test.id,
            test_name=test.name,
            total_attempts=len(attempts),
            completed_attempts=len(completed),
            abandoned_attempts=len(abandoned),
            unique_users=len({a.user_id for a in attempts}),
            average_score=round(average_score, 1),
            pass_rate=round(pass_rate, 1),
            attempts=sorted(attempts, key=lambda a: a.started_at, reverse=True)
        )


test_service = TestService()
