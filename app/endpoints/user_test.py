from typing import List
from fastapi import APIRouter, Depends, status

from app.schemas.response import APIResponse
from app.schemas.attempt import Attempt, AttemptResult
from app.schemas.eligibility import Assignment, EligibilityResult
from app.schemas.planned_test import JoinPlannedTestRequest
from app.schemas.session import StartSessionRequest, SubmitAnswerRequest, TestSessionView, TickRequest
from app.services.user_test import TestTakingService
from app.utils import deps

router = APIRouter()

@router.get("/users/{user_id}/assignments", response_model=APIResponse[List[Assignment]])
async def list_assignments(
    *,
    user_id: int,
    service: TestTakingService = Depends(deps.get_test_taking_service)
):
    assignments = service.list_assignments(user_id)
    return APIResponse(message="Assignments retrieved successfully", data=assignments)


@router.get("/users/{user_id}/tests/{test_id}/eligibility", response_model=APIResponse[EligibilityResult])
async def get_eligibility(
    *,
    user_id: int,
    test_id: int,
    service: TestTakingService = Depends(deps.get_test_taking_service)
):
    eligibility = service.resolve_eligibility(user_id, test_id)
    return APIResponse(message="Eligibility resolved successfully", data=eligibility)


@router.get("/users/{user_id}/tests/{test_id}/history", response_model=APIResponse[List[Attempt]])
async def get_history(
    *,
    user_id: int,
    test_id: int,
    service: TestTakingService = Depends(deps.get_test_taking_service)
):
    history = service.get_history(user_id, test_id)
    return APIResponse(message="Attempt history retrieved successfully", data=history)


@router.post("/sessions", response_model=APIResponse[TestSessionView], status_code=status.HTTP_201_CREATED)
async def start_session(
    *,
    session_in: StartSessionRequest,
    service: TestTakingService = Depends(deps.get_test_taking_service)
):
    session = service.start_session(session_in.user_id, session_in.test_id)
    return APIResponse(message="Test session started successfully", data=session)


@router.post("/sessions/join", response_model=APIResponse[TestSessionView], status_code=status.HTTP_201_CREATED)
async def join_planned_test(
    *,
    join_in: JoinPlannedTestRequest,
    service: TestTakingService = Depends(deps.get_test_taking_service)
):
    session = service.join_planned_test(join_in.user_id, join_in.code)
    return APIResponse(message="Joined planned test successfully", data=session)


@router.get("/sessions/{session_id}", response_model=APIResponse[TestSessionView])
async def get_session(
    *,
    session_id: str,
    service: TestTakingService = Depends(deps.get_test_taking_service)
):
    session = service.get_session(session_id)
    return APIResponse(message="Test session retrieved successfully", data=session)


@router.post("/sessions/{session_id}/answers", response_model=APIResponse[TestSessionView])
async def submit_answer(
    *,
    session_id: str,
    answer_in: SubmitAnswerRequest,
    service: TestTakingService = Depends(deps.get_test_taking_service)
):
    session = service.submit_answer(session_id, answer_in.question_id, answer_in.option_id)
    return APIResponse(message="Answer submitted successfully", data=session)


@router.post("/sessions/{session_id}/tick", response_model=APIResponse[TestSessionView])
async def tick_session(
    *,
    session_id: str,
    tick_in: TickRequest,
    service: TestTakingService = Depends(deps.get_test_taking_service)
):
    session = service.tick_session(session_id, tick_in.seconds_elapsed)
    return APIResponse(message="Session timer updated successfully", data=session)


@router.post("/sessions/{session_id}/complete", response_model=APIResponse[AttemptResult])
async def complete_session(
    *,
    session_id: str,
    service: TestTakingService = Depends(deps.get_test_taking_service)
):
    result = service.complete_session(session_id)
    return APIResponse(message="Test completed successfully", data=result)


@router.post("/sessions/{session_id}/abandon", response_model=APIResponse[AttemptResult])
async def abandon_session(
    *,
    session_id: str,
    service: TestTakingService = Depends(deps.get_test_taking_service)
):
    result = service.abandon_session(session_id)
    return APIResponse(message="Test session abandoned", data=result)
