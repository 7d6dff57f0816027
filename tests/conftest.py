import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault("TESTING", "true")
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from datetime import datetime, timezone
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.core.database import Base, get_db
from app.models import attempt, attempt_answer, planned_test, question, test  # noqa: F401
from app.services.eligibility import AssignmentEligibilityResolver
from app.services.scoring import ScoringEngine
from app.services.test_session import SessionRegistry, session_registry
from app.services.user_test import TestTakingService as TakingService
from app.utils import deps as deps_utils
import main
from fastapi.testclient import TestClient
from app.core.config import settings
from tests.helpers.fakes import (
    FakeClock,
    InMemoryAttemptStore,
    InMemoryPlannedTestSchedule,
    InMemoryQuestionBank,
    InMemoryTestCatalog,
)

test_db_url = settings.TEST_DATABASE_URL or "sqlite:///./test.db"

@pytest.fixture(scope="session")
def database_engine():
    if test_db_url.startswith("sqlite"):
        engine = create_engine(test_db_url, connect_args={"check_same_thread": False})
    else:
        engine = create_engine(test_db_url)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()
    if test_db_url.startswith("sqlite") and os.path.exists("./test.db"):
        os.remove("./test.db")

@pytest.fixture(scope="function")
def db_session(database_engine):
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=database_engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(table.delete())
        db.commit()
        db.close()

@pytest.fixture(autouse=True)
def _clear_session_registry():
    session_registry.clear()
    yield
    session_registry.clear()

@pytest.fixture(scope="function")
def client(db_session):
    # Re-initialize the app for each test function to ensure a clean state
    from importlib import reload
    reload(main)
    main.app.dependency_overrides[get_db] = lambda: db_session
    main.app.dependency_overrides[deps_utils.get_db] = lambda: db_session
    main.app.dependency_overrides[deps_utils.get_transactional_db] = lambda: db_session
    with TestClient(main.app) as test_client:
        yield test_client

@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc))

@pytest.fixture
def catalog():
    return InMemoryTestCatalog()

@pytest.fixture
def question_bank():
    return InMemoryQuestionBank()

@pytest.fixture
def attempt_store():
    return InMemoryAttemptStore()

@pytest.fixture
def planned_schedule():
    return InMemoryPlannedTestSchedule()

@pytest.fixture
def taking_service(catalog, question_bank, attempt_store, planned_schedule, clock):
    """Test-taking service wired to in-memory repositories and a private registry."""
    return TakingService(
        catalog=catalog,
        question_bank=question_bank,
        attempts=attempt_store,
        sessions=SessionRegistry(),
        resolver=AssignmentEligibilityResolver(),
        scoring=ScoringEngine(),
        planned_tests=planned_schedule,
        clock=clock
    )

@pytest.fixture
def make_test_payload():
    def _payload(**overrides):
        data = {
            "name": "React Fundamentals Assessment",
            "description": "JSX and components",
            "duration_minutes": 30,
            "min_success_percentage": 70,
            "retry_count": 3,
            "retry_backoff_hours": 24
        }
        data.update(overrides)
        return data
    return _payload

@pytest.fixture
def questions_payload():
    return [
        {
            "question_text": "Which syntax does React use to describe UI elements?",
            "options": [{"id": "a", "text": "HTML"}, {"id": "b", "text": "JSX"}, {"id": "c", "text": "XML"}],
            "correct_option_id": "b",
            "points": 10
        },
        {
            "question_text": "Which hook stores component state?",
            "options": [{"id": "a", "text": "useState"}, {"id": "b", "text": "useMemo"}],
            "correct_option_id": "a",
            "points": 10
        }
    ]

@pytest.fixture
def published_test(client, make_test_payload, questions_payload):
    """Create a test over HTTP, add two questions and publish it."""
    def _published_test(**overrides):
        r_test = client.post("/tests/", json=make_test_payload(**overrides))
        assert r_test.status_code == 201, r_test.text
        test_id = r_test.json()["data"]["id"]

        r_questions = client.post(f"/tests/{test_id}/questions", json=questions_payload)
        assert r_questions.status_code == 201, r_questions.text

        r_publish = client.post(f"/tests/{test_id}/publish")
        assert r_publish.status_code == 200, r_publish.text
        return r_publish.json()["data"]
    return _published_test
