from datetime import timedelta

from fastapi.testclient import TestClient

from app.utils.datetime_utils import utc_now


def planned_payload(test_id: int, code: str = "react-2024-001", minutes_from_now: int = -5, **overrides):
    data = {
        "test_id": test_id,
        "code": code,
        "starts_at": (utc_now() + timedelta(minutes=minutes_from_now)).isoformat(),
        "time_window_minutes": 60,
        "attendees": 25,
        "responsible_manager": "Sarah Johnson",
        "description": "Monthly React assessment for frontend team"
    }
    data.update(overrides)
    return data


class TestPlannedTestEndpoints:
    def test_create_planned_test_smoke(self, client: TestClient, published_test):
        test = published_test()
        response = client.post("/planned-tests/", json=planned_payload(test["id"]))
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["code"] == "REACT-2024-001"
        assert data["status"] == "in_progress"
        assert data["test_name"] == "React Fundamentals Assessment"
        assert data["slug"].startswith(f"test-{test['id']}-")

    def test_duplicate_code_is_rejected(self, client: TestClient, published_test):
        test = published_test()
        client.post("/planned-tests/", json=planned_payload(test["id"]))
        response = client.post("/planned-tests/", json=planned_payload(test["id"], code="REACT-2024-001 "))
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CONFLICT"

    def test_unknown_test_is_not_found(self, client: TestClient):
        response = client.post("/planned-tests/", json=planned_payload(999))
        assert response.status_code == 404

    def test_list_get_and_update(self, client: TestClient, published_test):
        test = published_test()
        planned_id = client.post("/planned-tests/", json=planned_payload(test["id"])).json()["data"]["id"]
        client.post("/planned-tests/", json=planned_payload(test["id"], code="LATER-1", minutes_from_now=120))

        response = client.get("/planned-tests/")
        assert response.status_code == 200
        assert [p["code"] for p in response.json()["data"]] == ["LATER-1", "REACT-2024-001"]
        assert response.json()["data"][0]["status"] == "planned"

        response = client.put(f"/planned-tests/{planned_id}", json={"time_window_minutes": 90, "attendees": 10})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["attendees"] == 10
        assert data["time_window_minutes"] == 90

        response = client.get(f"/planned-tests/{planned_id}")
        assert response.status_code == 200
        assert response.json()["data"]["attendees"] == 10

    def test_join_by_code_smoke(self, client: TestClient, published_test):
        test = published_test()
        planned = client.post("/planned-tests/", json=planned_payload(test["id"])).json()["data"]

        response = client.post("/user-tests/sessions/join", json={"user_id": 1, "code": "react-2024-001"})
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["planned_test_id"] == planned["id"]
        assert data["time_remaining"] == 30 * 60

    def test_join_before_start_is_rejected(self, client: TestClient, published_test):
        test = published_test()
        client.post("/planned-tests/", json=planned_payload(test["id"], minutes_from_now=60))
        response = client.post("/user-tests/sessions/join", json={"user_id": 1, "code": "REACT-2024-001"})
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "SESSION_WINDOW_CLOSED"

    def test_join_full_session_is_rejected(self, client: TestClient, published_test):
        test = published_test()
        client.post("/planned-tests/", json=planned_payload(test["id"], attendees=1))
        assert client.post("/user-tests/sessions/join", json={"user_id": 1, "code": "REACT-2024-001"}).status_code == 201
        response = client.post("/user-tests/sessions/join", json={"user_id": 2, "code": "REACT-2024-001"})
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "SESSION_FULL"

    def test_join_unknown_code(self, client: TestClient):
        response = client.post("/user-tests/sessions/join", json={"user_id": 1, "code": "MISSING"})
        assert response.status_code == 404

    def test_results_and_delete(self, client: TestClient, published_test):
        test = published_test()
        taken = client.post("/planned-tests/", json=planned_payload(test["id"])).json()["data"]
        empty = client.post("/planned-tests/", json=planned_payload(test["id"], code="EMPTY-1")).json()["data"]

        session_id = client.post(
            "/user-tests/sessions/join", json={"user_id": 1, "code": taken["code"]}
        ).json()["data"]["session_id"]
        client.post(f"/user-tests/sessions/{session_id}/complete")

        response = client.get(f"/planned-tests/{taken['id']}/results")
        assert response.status_code == 200
        assert [a["user_id"] for a in response.json()["data"]] == [1]

        assert client.delete(f"/planned-tests/{taken['id']}").status_code == 409
        response = client.delete(f"/planned-tests/{empty['id']}")
        assert response.status_code == 200
        assert client.get(f"/planned-tests/{empty['id']}").status_code == 404
