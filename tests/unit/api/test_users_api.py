"""
Name: Users API Tests

Responsibilities:
  - Exercise every users endpoint over HTTP against the in-memory repository
  - Verify status codes for success, validation and use-case failures
  - Verify the camelCase response shape
"""

import pytest

from app.modules.user_management.presentation.api.v1.users import UserOperation, status_for
from app.shared.core.exceptions import UserErrorKind

pytestmark = pytest.mark.unit

JOHN = {"email": "john.doe@example.com", "firstName": "John", "lastName": "Doe", "age": 30}
JANE = {"email": "jane.smith@example.com", "firstName": "Jane", "lastName": "Smith", "age": 25}


def _create(client, payload):
    response = client.post("/users", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateUser:
    def test_create_returns_201_and_body(self, client):
        response = client.post("/users", json=JOHN)

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == JOHN["email"]
        assert body["firstName"] == "John"
        assert body["lastName"] == "Doe"
        assert body["age"] == 30
        assert body["id"]
        assert body["createdAt"]
        assert body["updatedAt"]

    def test_invalid_data_returns_400(self, client):
        response = client.post("/users", json={"email": "invalid-email", "firstName": "", "age": -1})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        fields = {item["field"] for item in error["details"]["errors"]}
        assert fields == {"email", "firstName", "lastName", "age"}

    def test_unknown_field_returns_400(self, client):
        response = client.post("/users", json={**JOHN, "isAdmin": True})

        assert response.status_code == 400

    def test_non_object_body_returns_400(self, client):
        response = client.post("/users", json=[JOHN])

        assert response.status_code == 400

    @pytest.mark.parametrize(
        "email",
        ["John Doe <john.doe@example.com>", "  john.doe@example.com  ", "<john.doe@example.com>"],
    )
    def test_non_address_email_returns_400(self, client, email):
        response = client.post("/users", json={**JOHN, "email": email})

        assert response.status_code == 400
        assert response.json()["error"]["details"]["errors"][0]["field"] == "email"
        assert client.get("/users").json() == []

    def test_age_beyond_integer_column_returns_400(self, client):
        response = client.post("/users", json={**JOHN, "age": 2**31})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_duplicate_email_returns_400(self, client):
        _create(client, JOHN)

        response = client.post("/users", json=JOHN)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "DUPLICATE_EMAIL"


class TestReadUsers:
    def test_list_returns_newest_first(self, client):
        john = _create(client, JOHN)
        jane = _create(client, JANE)

        response = client.get("/users")

        assert response.status_code == 200
        assert [user["id"] for user in response.json()] == [jane["id"], john["id"]]

    def test_list_empty(self, client):
        response = client.get("/users")

        assert response.status_code == 200
        assert response.json() == []

    def test_get_by_id(self, client):
        john = _create(client, JOHN)

        response = client.get(f"/users/{john['id']}")

        assert response.status_code == 200
        assert response.json() == john

    def test_get_unknown_id_returns_404(self, client):
        response = client.get("/users/non-existent-id")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"


class TestUpdateUser:
    def test_update_changes_only_given_fields(self, client):
        john = _create(client, JOHN)

        response = client.put(f"/users/{john['id']}", json={"firstName": "Jonathan", "age": 31})

        assert response.status_code == 200
        body = response.json()
        assert body["firstName"] == "Jonathan"
        assert body["age"] == 31
        assert body["lastName"] == "Doe"
        assert body["email"] == JOHN["email"]
        assert body["createdAt"] == john["createdAt"]
        assert body["updatedAt"] != john["updatedAt"]

    def test_update_unknown_id_returns_400(self, client):
        response = client.put("/users/non-existent-id", json={"firstName": "Ghost"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_update_invalid_data_returns_400(self, client):
        john = _create(client, JOHN)

        response = client.put(f"/users/{john['id']}", json={"email": "invalid-email"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_update_to_taken_email_returns_400(self, client):
        john = _create(client, JOHN)
        _create(client, JANE)

        response = client.put(f"/users/{john['id']}", json={"email": JANE["email"]})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "EMAIL_CONFLICT"
        assert client.get(f"/users/{john['id']}").json()["email"] == JOHN["email"]

    def test_update_with_own_email_succeeds(self, client):
        john = _create(client, JOHN)

        response = client.put(f"/users/{john['id']}", json={"email": JOHN["email"], "lastName": "Doe-Smith"})

        assert response.status_code == 200
        assert response.json()["lastName"] == "Doe-Smith"


class TestDeleteUser:
    def test_delete_returns_204(self, client):
        john = _create(client, JOHN)

        response = client.delete(f"/users/{john['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/users/{john['id']}").status_code == 404

    def test_delete_twice_returns_404(self, client):
        john = _create(client, JOHN)
        client.delete(f"/users/{john['id']}")

        response = client.delete(f"/users/{john['id']}")

        assert response.status_code == 404


class TestStatusMapping:
    def test_status_table_is_exhaustive(self):
        for operation in UserOperation:
            for kind in UserErrorKind:
                assert 400 <= status_for(operation, kind) < 600

    @pytest.mark.parametrize(
        "operation, kind, expected",
        [
            (UserOperation.CREATE, UserErrorKind.DUPLICATE_EMAIL, 400),
            (UserOperation.GET_BY_ID, UserErrorKind.NOT_FOUND, 404),
            (UserOperation.UPDATE, UserErrorKind.NOT_FOUND, 400),
            (UserOperation.UPDATE, UserErrorKind.EMAIL_CONFLICT, 400),
            (UserOperation.DELETE, UserErrorKind.NOT_FOUND, 404),
        ],
    )
    def test_reachable_mappings(self, operation, kind, expected):
        assert status_for(operation, kind) == expected


def test_response_carries_request_id(client):
    response = client.get("/users", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
    assert "X-Response-Time" in response.headers


def test_liveness_endpoint(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_validation_and_use_case_errors_share_one_envelope(client):
    _create(client, JOHN)

    invalid = client.post("/users", json={**JOHN, "age": -1}).json()
    duplicate = client.post("/users", json=JOHN).json()

    for body in (invalid, duplicate):
        assert set(body) == {"error"}
        assert {"code", "message", "details", "request_id"} <= set(body["error"])
    assert invalid["error"]["code"] == "VALIDATION_ERROR"
    assert duplicate["error"]["code"] == "DUPLICATE_EMAIL"
    assert duplicate["error"]["status_code"] == 400
