"""
Name: User Payload Validation Tests

Responsibilities:
  - Verify validate_user_payload for create and update bodies
  - Verify camelCase and snake_case keys are both accepted
  - Verify UserResponse serializes camelCase with ISO-8601 timestamps
"""

from datetime import datetime, timezone

import pytest

from app.modules.user_management.domain.models.user import User
from app.modules.user_management.presentation.api.schemas.user_schemas import (
    MAX_AGE,
    MAX_NAME_LENGTH,
    UserResponse,
    parse_create_payload,
    parse_update_payload,
    validate_user_payload,
)

pytestmark = pytest.mark.unit

VALID = {"email": "john.doe@example.com", "firstName": "John", "lastName": "Doe", "age": 30}


def _fields(errors):
    return {error.field for error in errors}


class TestCreatePayload:
    def test_valid_camel_case(self):
        assert validate_user_payload(VALID) == []

    def test_valid_snake_case(self):
        payload = {"email": "john.doe@example.com", "first_name": "John", "last_name": "Doe", "age": 30}
        assert validate_user_payload(payload) == []

    def test_missing_fields(self):
        errors = validate_user_payload({"email": "john.doe@example.com"})

        assert _fields(errors) == {"firstName", "lastName", "age"}
        assert all(error.type == "missing" for error in errors)

    def test_invalid_email(self):
        errors = validate_user_payload({**VALID, "email": "invalid-email"})

        assert _fields(errors) == {"email"}

    @pytest.mark.parametrize(
        "email",
        [
            "John Doe <john.doe@example.com>",
            "<john.doe@example.com>",
            "  john.doe@example.com  ",
            "john.doe@example.com\n",
            " john.doe@example.com",
        ],
    )
    def test_email_must_be_bare_address(self, email):
        errors = validate_user_payload({**VALID, "email": email})

        assert _fields(errors) == {"email"}

    def test_empty_names(self):
        errors = validate_user_payload({**VALID, "firstName": "", "lastName": ""})

        assert _fields(errors) == {"firstName", "lastName"}

    @pytest.mark.parametrize("age", [-1, "30", 30.5, None, True])
    def test_invalid_age(self, age):
        errors = validate_user_payload({**VALID, "age": age})

        assert _fields(errors) == {"age"}

    def test_age_upper_bound_matches_integer_column(self):
        assert validate_user_payload({**VALID, "age": MAX_AGE}) == []
        assert _fields(validate_user_payload({**VALID, "age": MAX_AGE + 1})) == {"age"}
        assert _fields(validate_user_payload({**VALID, "age": 2**63})) == {"age"}

    def test_name_length_matches_column_width(self):
        assert validate_user_payload({**VALID, "firstName": "J" * MAX_NAME_LENGTH}) == []

        errors = validate_user_payload({**VALID, "lastName": "D" * (MAX_NAME_LENGTH + 1)})

        assert _fields(errors) == {"lastName"}

    def test_zero_age_is_valid(self):
        assert validate_user_payload({**VALID, "age": 0}) == []

    def test_unknown_field_rejected(self):
        errors = validate_user_payload({**VALID, "role": "admin"})

        assert _fields(errors) == {"role"}
        assert errors[0].type == "extra_forbidden"

    def test_email_kept_exactly_as_sent(self):
        request = parse_create_payload({**VALID, "email": "John.Doe@Example.COM"})

        assert request.to_command().email == "John.Doe@Example.COM"


class TestUpdatePayload:
    def test_empty_body_is_valid(self):
        assert validate_user_payload({}, partial=True) == []

    def test_single_field(self):
        assert validate_user_payload({"firstName": "Jonathan"}, partial=True) == []

    def test_rules_still_apply(self):
        errors = validate_user_payload({"email": "nope", "age": -5}, partial=True)

        assert _fields(errors) == {"email", "age"}

    def test_display_name_email_rejected(self):
        errors = validate_user_payload({"email": "Jane <jane.smith@example.com>"}, partial=True)

        assert _fields(errors) == {"email"}

    def test_unknown_field_rejected(self):
        errors = validate_user_payload({"id": "other"}, partial=True)

        assert _fields(errors) == {"id"}

    def test_to_command_keeps_omitted_fields_none(self):
        command = parse_update_payload({"lastName": "Smith"}).to_command("user-1")

        assert command.user_id == "user-1"
        assert command.last_name == "Smith"
        assert command.to_update_data().changes() == {"last_name": "Smith"}


def test_user_response_serialization():
    created = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
    user = User(
        id="0f8fad5b-d9cb-469f-a165-70867728950e",
        email="john.doe@example.com",
        first_name="John",
        last_name="Doe",
        age=30,
        created_at=created,
        updated_at=created,
    )

    body = UserResponse.from_entity(user).model_dump(mode="json", by_alias=True)

    assert set(body) == {"id", "email", "firstName", "lastName", "age", "createdAt", "updatedAt"}
    assert datetime.fromisoformat(body["createdAt"].replace("Z", "+00:00")) == created
