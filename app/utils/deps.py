from fastapi import Depends
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.database import SessionLocal
from app.crud.stores import SqlAttemptStore, SqlPlannedTestSchedule, SqlQuestionBank, SqlTestCatalog
from app.services.eligibility import AssignmentEligibilityResolver
from app.services.scoring import ScoringEngine
from app.services.test_session import session_registry
from app.services.user_test import TestTakingService


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_transactional_db():
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

def build_test_taking_service(db: Session) -> TestTakingService:
    """Wire the test-taking service around one database session."""
    return TestTakingService(
        catalog=SqlTestCatalog(db),
        question_bank=SqlQuestionBank(db),
        attempts=SqlAttemptStore(db),
        sessions=session_registry,
        resolver=AssignmentEligibilityResolver(pass_blocks_retake=settings.PASS_BLOCKS_RETAKE),
        scoring=ScoringEngine(),
        planned_tests=SqlPlannedTestSchedule(db)
    )

def get_test_taking_service(db: Session = Depends(get_transactional_db)) -> TestTakingService:
    return build_test_taking_service(db)
