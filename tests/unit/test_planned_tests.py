from datetime import datetime, timedelta, timezone

import pytest

from app.core import exceptions
from app.core.constants import PlannedTestStatusEnum
from app.services.planned_test import build_slug, planned_test_status

T0 = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def scheduled_test(catalog, question_bank, planned_schedule):
    catalog.add(1, name="React Fundamentals Assessment", duration_minutes=30, retry_backoff_hours=0)
    question_bank.add(1, 1, correct_option_id="a")
    question_bank.add(1, 2, correct_option_id="b")
    return planned_schedule.add(1, test_id=1, code="REACT-2024-001", starts_at=T0, time_window_minutes=60, attendees=2)


class TestPlannedTestStatus:
    @pytest.mark.parametrize("offset_minutes, expected", [
        (-1, PlannedTestStatusEnum.PLANNED),
        (0, PlannedTestStatusEnum.IN_PROGRESS),
        (60, PlannedTestStatusEnum.IN_PROGRESS),
        (61, PlannedTestStatusEnum.FINISHED),
    ])
    def test_status_follows_the_window(self, offset_minutes, expected):
        now = T0 + timedelta(minutes=offset_minutes)
        assert planned_test_status(T0, T0 + timedelta(minutes=60), now) == expected

    def test_naive_times_are_utc(self):
        assert planned_test_status(T0.replace(tzinfo=None), T0 + timedelta(hours=1), T0) == PlannedTestStatusEnum.IN_PROGRESS

    def test_slug_uses_test_and_month(self):
        assert build_slug(1, datetime(2024, 2, 15, 10, 0)) == "test-1-feb-2024"


class TestJoinPlannedTest:
    def test_unknown_code_is_not_found(self, taking_service, scheduled_test):
        with pytest.raises(exceptions.NotFound):
            taking_service.join_planned_test(1, "NOPE-0000")

    def test_code_lookup_ignores_case_and_whitespace(self, taking_service, scheduled_test, clock):
        clock.advance(minutes=5)
        view = taking_service.join_planned_test(1, "  react-2024-001 ")
        assert view.planned_test_id == scheduled_test.id
        assert view.test_id == 1

    def test_join_before_window_opens_is_rejected(self, taking_service, scheduled_test, clock):
        clock.advance(minutes=-5)
        with pytest.raises(exceptions.SessionWindowClosed) as exc_info:
            taking_service.join_planned_test(1, scheduled_test.code)
        assert "not started yet" in exc_info.value.message

    def test_join_after_window_closes_is_rejected(self, taking_service, scheduled_test, clock):
        clock.advance(minutes=61)
        with pytest.raises(exceptions.SessionWindowClosed) as exc_info:
            taking_service.join_planned_test(1, scheduled_test.code)
        assert "already ended" in exc_info.value.message

    def test_time_budget_stops_at_window_end(self, taking_service, scheduled_test, clock):
        clock.advance(minutes=10)
        assert taking_service.join_planned_test(1, scheduled_test.code).time_remaining == 30 * 60

        clock.advance(minutes=40)
        assert taking_service.join_planned_test(2, scheduled_test.code).time_remaining == 10 * 60

    def test_attendee_slots_are_capped(self, taking_service, scheduled_test, attempt_store, clock):
        first = taking_service.join_planned_test(1, scheduled_test.code)
        taking_service.join_planned_test(2, scheduled_test.code)

        with pytest.raises(exceptions.SessionFull):
            taking_service.join_planned_test(3, scheduled_test.code)

        outcome = taking_service.complete_session(first.session_id)
        assert outcome.attempt.planned_test_id == scheduled_test.id
        assert attempt_store.get_attendee_ids(scheduled_test.id) == {1}

        rejoined = taking_service.join_planned_test(1, scheduled_test.code)
        assert rejoined.attempt_number == 2
        with pytest.raises(exceptions.SessionFull):
            taking_service.join_planned_test(3, scheduled_test.code)

    def test_join_still_applies_retry_gate(self, taking_service, scheduled_test, catalog):
        catalog.add(1, name="React Fundamentals Assessment", retry_count=1, retry_backoff_hours=0)
        view = taking_service.join_planned_test(1, scheduled_test.code)
        taking_service.submit_answer(view.session_id, 1, "b")
        taking_service.complete_session(view.session_id)

        with pytest.raises(exceptions.NotEligible):
            taking_service.join_planned_test(1, scheduled_test.code)
