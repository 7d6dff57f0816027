from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.schemas.response import APIResponse
from app.utils import deps
from app.schemas.test import Test, TestCreate, TestUpdate
from app.schemas.question import Question, QuestionCreate, QuestionUpdate
from app.schemas.statistics import TestStatistics
from app.services.test import test_service

router = APIRouter()

@router.post("/", response_model=APIResponse[Test], status_code=status.HTTP_201_CREATED)
async def create_test(
    *,
    db: Session = Depends(deps.get_transactional_db),
    test_in: TestCreate
):
    new_test = test_service.create_test(db, test_in=test_in)
    return APIResponse(message="Test created successfully", data=Test.model_validate(new_test))


@router.get("/", response_model=APIResponse[List[Test]])
async def list_tests(
    db: Session = Depends(deps.get_db),
    skip: int = 0,
    limit: int = 100
):
    tests = test_service.list_tests(db, skip=skip, limit=limit)
    return APIResponse(message="Tests retrieved successfully", data=[Test.model_validate(t) for t in tests])


@router.put("/questions/{question_id}", response_model=APIResponse[Question])
async def update_question(
    *,
    db: Session = Depends(deps.get_transactional_db),
    question_id: int,
    question_in: QuestionUpdate
):
    updated_question = test_service.update_question(db, question_id=question_id, question_in=question_in)
    return APIResponse(message="Question updated successfully", data=Question.model_validate(updated_question))


@router.delete("/questions/{question_id}", response_model=APIResponse[Question])
async def delete_question(
    *,
    db: Session = Depends(deps.get_transactional_db),
    question_id: int
):
    deleted_question = test_service.delete_question(db, question_id=question_id)
    return APIResponse(message="Question deleted successfully", data=Question.model_validate(deleted_question))


@router.get("/{test_id}", response_model=APIResponse[Test])
async def get_test(
    *,
    db: Session = Depends(deps.get_db),
    test_id: int
):
    test = test_service.get_test(db, test_id=test_id)
    return APIResponse(message="Test retrieved successfully", data=Test.model_validate(test))


@router.put("/{test_id}", response_model=APIResponse[Test])
async def update_test(
    *,
    db: Session = Depends(deps.get_transactional_db),
    test_id: int,
    test_in: TestUpdate
):
    updated_test = test_service.update_test(db, test_id=test_id, test_in=test_in)
    return APIResponse(message="Test updated successfully", data=Test.model_validate(updated_test))


@router.delete("/{test_id}", response_model=APIResponse[Test])
async def delete_test(
    *,
    db: Session = Depends(deps.get_transactional_db),
    test_id: int
):
    deleted_test = test_service.delete_test(db, test_id=test_id)
    return APIResponse(message="Test deleted successfully", data=Test.model_validate(deleted_test))


@router.get("/{test_id}/questions", response_model=APIResponse[List[Question]])
async def get_test_questions(
    *,
    db: Session = Depends(deps.get_db),
    test_id: int
):
    questions = test_service.get_test_questions(db, test_id=test_id)
    return APIResponse(message="Test questions retrieved successfully", data=[Question.model_validate(q) for q in questions])


@router.post("/{test_id}/questions", response_model=APIResponse[List[Question]], status_code=status.HTTP_201_CREATED)
async def add_questions(
    *,
    db: Session = Depends(deps.get_transactional_db),
    test_id: int,
    questions_in: List[QuestionCreate]
):
    new_questions = test_service.add_questions(db, test_id=test_id, questions_in=questions_in)
    return APIResponse(message="Questions created successfully", data=[Question.model_validate(q) for q in new_questions])


@router.post("/{test_id}/publish", response_model=APIResponse[Test])
async def publish_test(
    *,
    db: Session = Depends(deps.get_transactional_db),
    test_id: int
):
    published_test = test_service.publish_test(db, test_id=test_id)
    return APIResponse(message="Test published successfully", data=Test.model_validate(published_test))


@router.post("/{test_id}/unpublish", response_model=APIResponse[Test])
async def unpublish_test(
    *,
    db: Session = Depends(deps.get_transactional_db),
    test_id: int
):
    unpublished_test = test_service.unpublish_test(db, test_id=test_id)
    return APIResponse(message="Test unpublished successfully", data=Test.model_validate(unpublished_test))


@router.get("/{test_id}/statistics", response_model=APIResponse[TestStatistics])
async def get_test_statistics(
    *,
    db: Session = Depends(deps.get_db),
    test_id: int
):
    statistics = test_service.get_test_statistics(db, test_id=test_id)
    return APIResponse(message="Test statistics retrieved successfully", data=statistics)
