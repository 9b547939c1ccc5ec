"""
Unit tests for the users router (api/routers/users.py).

Runs against the app from conftest.py with FakeUserRepository and
FixedClock injected through dependency overrides.

Tests cover:
- JSON and form-encoded bodies
- Wire shapes (``_id``, rendered durations and dates)
- Error mapping: 400 validation, 404 unknown user, 500 store failure
- Log query options: from/to/limit
"""

import pytest

from tests.fakes import FakeUserRepository

pytestmark = pytest.mark.unit


def _seed_user(repo: FakeUserRepository, *dates: str, user_id: str = "u1") -> None:
    repo.seed(
        [
            {
                "id": user_id,
                "username": "alice",
                "log": [
                    {"description": f"Exercise {i + 1}", "duration": (i + 1) * 10, "date": d}
                    for i, d in enumerate(dates)
                ],
            }
        ]
    )


# =============================================================================
# POST /api/users
# =============================================================================


class TestCreateUser:
    def test_json_body(self, client, user_repo):
        response = client.post("/api/users", json={"username": "fcc_test"})

        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "fcc_test"
        assert data["_id"] == user_repo.get_all()[0].id
        assert set(data) == {"_id", "username"}

    def test_form_body(self, client):
        response = client.post("/api/users", data={"username": "form_user"})

        assert response.status_code == 200
        assert response.json()["username"] == "form_user"

    def test_unknown_fields_ignored(self, client):
        response = client.post("/api/users", json={"username": "bob", "admin": True})
        assert response.status_code == 200

    @pytest.mark.parametrize("body", [{}, {"username": ""}, {"username": "   "}])
    def test_missing_username(self, client, user_repo, body):
        response = client.post("/api/users", json=body)

        assert response.status_code == 400
        assert response.json() == {"detail": "Username is required"}
        assert user_repo.get_all() == []

    def test_empty_form_body(self, client):
        response = client.post("/api/users")

        assert response.status_code == 400
        assert response.json()["detail"] == "Username is required"

    def test_malformed_json(self, client):
        response = client.post(
            "/api/users",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 400

    def test_json_content_type_is_case_insensitive(self, client):
        response = client.post(
            "/api/users",
            content=b'{"username": "caps"}',
            headers={"content-type": "Application/JSON"},
        )

        assert response.status_code == 200
        assert response.json()["username"] == "caps"

    def test_non_object_json(self, client):
        response = client.post("/api/users", json=["alice"])
        assert response.status_code == 400

    def test_store_failure(self, client, user_repo):
        user_repo.fail_on("create")

        response = client.post("/api/users", json={"username": "alice"})

        assert response.status_code == 500
        assert response.json() == {"detail": "Server error"}


# =============================================================================
# GET /api/users
# =============================================================================


class TestListUsers:
    def test_empty(self, client):
        response = client.get("/api/users")

        assert response.status_code == 200
        assert response.json() == []

    def test_returns_stored_documents(self, client, user_repo):
        _seed_user(user_repo, "2020-01-01")
        user_repo.seed(
            [
                {
                    "id": "u2",
                    "username": "bob",
                    "log": [{"description": "Swim", "duration": "45", "date": "someday"}],
                }
            ]
        )

        response = client.get("/api/users")

        assert response.status_code == 200
        data = response.json()
        assert [u["_id"] for u in data] == ["u1", "u2"]
        assert data[0]["log"] == [
            {"description": "Exercise 1", "duration": 10, "date": "2020-01-01"}
        ]
        # Stored values are returned without formatting
        assert data[1]["log"] == [{"description": "Swim", "duration": "45", "date": "someday"}]

    def test_store_failure(self, client, user_repo):
        user_repo.fail_on("list_all")

        response = client.get("/api/users")

        assert response.status_code == 500
        assert response.json() == {"detail": "Server error"}


# =============================================================================
# POST /api/users/{user_id}/exercises
# =============================================================================


class TestAddExercise:
    def test_json_body(self, client, user_repo):
        _seed_user(user_repo)

        response = client.post(
            "/api/users/u1/exercises",
            json={"description": "Run", "duration": 30, "date": "2020-01-01"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "_id": "u1",
            "username": "alice",
            "description": "Run",
            "duration": 30,
            "date": "Wed Jan 01 2020",
        }
        assert user_repo.get_all()[0].exercise_count == 1

    def test_form_body_duration_rendered_as_integer(self, client, user_repo):
        _seed_user(user_repo)

        response = client.post(
            "/api/users/u1/exercises",
            data={"description": "Run", "duration": "30", "date": "2020-01-01"},
        )

        assert response.status_code == 200
        assert response.json()["duration"] == 30
        assert user_repo.get_all()[0].log[0].duration == "30"

    def test_default_date_is_today(self, client, user_repo):
        _seed_user(user_repo)

        response = client.post(
            "/api/users/u1/exercises",
            json={"description": "Run", "duration": 30},
        )

        assert response.status_code == 200
        assert response.json()["date"] == "Fri Mar 15 2024"

    def test_non_numeric_duration_renders_null(self, client, user_repo):
        _seed_user(user_repo)

        response = client.post(
            "/api/users/u1/exercises",
            json={"description": "Run", "duration": "lots"},
        )

        assert response.status_code == 200
        assert response.json()["duration"] is None

    @pytest.mark.parametrize(
        "body,detail",
        [
            ({"duration": 30}, "Description is required"),
            ({"description": "", "duration": 30}, "Description is required"),
            ({"description": "Run"}, "Duration is required"),
            ({"description": "Run", "duration": ""}, "Duration is required"),
        ],
    )
    def test_missing_fields(self, client, user_repo, body, detail):
        _seed_user(user_repo)

        response = client.post("/api/users/u1/exercises", json=body)

        assert response.status_code == 400
        assert response.json() == {"detail": detail}
        assert user_repo.get_all()[0].exercise_count == 0

    @pytest.mark.parametrize("flag", [True, False])
    def test_boolean_duration_rejected(self, client, user_repo, flag):
        _seed_user(user_repo)

        response = client.post(
            "/api/users/u1/exercises",
            json={"description": "Run", "duration": flag},
        )

        assert response.status_code == 400
        assert "duration must be a number or numeric text" in response.json()["detail"]
        assert user_repo.get_all()[0].exercise_count == 0

    def test_numeric_date_is_epoch_millis(self, client, user_repo):
        _seed_user(user_repo)

        response = client.post(
            "/api/users/u1/exercises",
            json={"description": "Run", "duration": 30, "date": 1577836800000},
        )

        assert response.status_code == 200
        assert response.json()["date"] == "Wed Jan 01 2020"
        assert user_repo.get_all()[0].log[0].date == "2020-01-01T00:00:00+00:00"

    def test_out_of_range_numeric_date_reads_as_invalid(self, client, user_repo):
        _seed_user(user_repo)

        response = client.post(
            "/api/users/u1/exercises",
            json={"description": "Run", "duration": 30, "date": 1e300},
        )

        assert response.status_code == 200
        assert response.json()["date"] == "Invalid Date"

    def test_unknown_user(self, client):
        response = client.post(
            "/api/users/nobody/exercises",
            json={"description": "Run", "duration": 30},
        )

        assert response.status_code == 404
        assert response.json() == {"detail": "User not found"}

    def test_store_failure_on_save(self, client, user_repo):
        _seed_user(user_repo)
        user_repo.fail_on("put")

        response = client.post(
            "/api/users/u1/exercises",
            json={"description": "Run", "duration": 30},
        )

        assert response.status_code == 500
        assert response.json() == {"detail": "Server error"}


# =============================================================================
# GET /api/users/{user_id}/logs
# =============================================================================


class TestGetLogs:
    def test_full_log(self, client, user_repo):
        _seed_user(user_repo, "2020-01-01", "2020-06-15", "2021-01-01")

        response = client.get("/api/users/u1/logs")

        assert response.status_code == 200
        data = response.json()
        assert data["_id"] == "u1"
        assert data["username"] == "alice"
        assert data["count"] == 3
        assert data["log"][0] == {
            "description": "Exercise 1",
            "duration": 10,
            "date": "Wed Jan 01 2020",
        }

    def test_date_range(self, client, user_repo):
        _seed_user(user_repo, "2020-01-01", "2020-06-15", "2021-01-01")

        response = client.get("/api/users/u1/logs?from=2020-01-01&to=2020-12-31")

        data = response.json()
        assert data["count"] == 2
        assert [e["date"] for e in data["log"]] == ["Wed Jan 01 2020", "Mon Jun 15 2020"]

    def test_single_bound_is_ignored(self, client, user_repo):
        _seed_user(user_repo, "2020-01-01", "2021-01-01")

        response = client.get("/api/users/u1/logs?from=2020-06-01")

        assert response.json()["count"] == 2

    def test_unparsable_bound_returns_empty_log(self, client, user_repo):
        _seed_user(user_repo, "2020-01-01")

        response = client.get("/api/users/u1/logs?from=garbage&to=2020-12-31")

        assert response.status_code == 200
        assert response.json()["count"] == 0
        assert response.json()["log"] == []

    def test_limit(self, client, user_repo):
        _seed_user(user_repo, *[f"2020-01-0{i}" for i in range(1, 6)])

        response = client.get("/api/users/u1/logs?limit=2")

        data = response.json()
        assert data["count"] == 2
        assert [e["description"] for e in data["log"]] == ["Exercise 1", "Exercise 2"]

    @pytest.mark.parametrize("limit,expected", [("0", 0), ("", 3), ("10", 3)])
    def test_limit_edges(self, client, user_repo, limit, expected):
        _seed_user(user_repo, "2020-01-01", "2020-01-02", "2020-01-03")

        response = client.get(f"/api/users/u1/logs?limit={limit}")

        assert response.status_code == 200
        assert response.json()["count"] == expected

    @pytest.mark.parametrize("limit", ["abc", "-1", "1.5"])
    def test_invalid_limit(self, client, user_repo, limit):
        _seed_user(user_repo, "2020-01-01")

        response = client.get(f"/api/users/u1/logs?limit={limit}")

        assert response.status_code == 400
        assert response.json() == {"detail": "limit must be a non-negative integer"}

    def test_unknown_user(self, client):
        response = client.get("/api/users/nobody/logs")

        assert response.status_code == 404
        assert response.json() == {"detail": "User not found"}

    def test_store_failure(self, client, user_repo):
        _seed_user(user_repo, "2020-01-01")
        user_repo.fail_on("get")

        response = client.get("/api/users/u1/logs")

        assert response.status_code == 500


# =============================================================================
# GET /health
# =============================================================================


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "user_store": "memory"}
