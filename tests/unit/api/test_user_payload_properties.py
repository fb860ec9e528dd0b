"""
Name: User Payload Property Tests

Responsibilities:
  - Any well-formed create body validates and reaches the command unchanged
  - Out-of-range ages, non-bare emails and unknown keys are always rejected
  - Any subset of valid fields is an acceptable update body
"""

import string

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from app.modules.user_management.application.commands.create_user import CreateUserCommand
from app.modules.user_management.presentation.api.schemas.user_schemas import (
    MAX_AGE,
    MAX_NAME_LENGTH,
    parse_create_payload,
    parse_update_payload,
    validate_user_payload,
)

pytestmark = pytest.mark.unit

KNOWN_KEYS = {"email", "firstName", "lastName", "age", "first_name", "last_name"}

emails = st.from_regex(r"[a-z0-9]{1,12}(\.[a-z0-9]{1,8})?@[a-z][a-z0-9]{0,10}\.(com|org|net|io)", fullmatch=True)
names = st.text(min_size=1, max_size=MAX_NAME_LENGTH)
ages = st.integers(min_value=0, max_value=MAX_AGE)

create_payloads = st.fixed_dictionaries({"email": emails, "firstName": names, "lastName": names, "age": ages})
update_payloads = st.fixed_dictionaries(
    {}, optional={"email": emails, "firstName": names, "lastName": names, "age": ages}
)

examples = settings(max_examples=100, deadline=None)


def _fields(errors):
    return {error.field for error in errors}


@examples
@given(payload=create_payloads)
def test_valid_create_body_reaches_command_unchanged(payload):
    assert validate_user_payload(payload) == []

    assert parse_create_payload(payload).to_command() == CreateUserCommand(
        email=payload["email"],
        first_name=payload["firstName"],
        last_name=payload["lastName"],
        age=payload["age"],
    )


@examples
@given(payload=update_payloads)
def test_any_subset_is_a_valid_update(payload):
    assert validate_user_payload(payload, partial=True) == []

    changes = parse_update_payload(payload).to_command("user-1").to_update_data().changes()
    assert set(changes) == {{"firstName": "first_name", "lastName": "last_name"}.get(key, key) for key in payload}


@examples
@given(
    payload=create_payloads,
    age=st.integers(max_value=-1) | st.integers(min_value=MAX_AGE + 1),
)
def test_out_of_range_age_rejected(payload, age):
    assert _fields(validate_user_payload({**payload, "age": age})) == {"age"}
    assert _fields(validate_user_payload({"age": age}, partial=True)) == {"age"}


@examples
@given(
    payload=create_payloads,
    prefix=st.text(alphabet=" \t\n", max_size=2),
    suffix=st.text(alphabet=" \t\n", max_size=2),
)
def test_padded_email_rejected(payload, prefix, suffix):
    email = f"{prefix}{payload['email']}{suffix}"
    errors = validate_user_payload({**payload, "email": email})

    if prefix or suffix:
        assert _fields(errors) == {"email"}
    else:
        assert errors == []


@examples
@given(
    payload=create_payloads,
    display_name=st.from_regex(r"[A-Za-z]{1,10}( [A-Za-z]{1,10})?", fullmatch=True),
)
def test_display_name_email_rejected(payload, display_name):
    email = f"{display_name} <{payload['email']}>"

    assert _fields(validate_user_payload({**payload, "email": email})) == {"email"}


@examples
@given(
    payload=create_payloads,
    key=st.text(alphabet=string.ascii_letters + "_", min_size=1, max_size=12).filter(
        lambda key: key not in KNOWN_KEYS
    ),
    value=st.none() | st.integers() | st.text(max_size=5),
)
def test_unknown_key_rejected(payload, key, value):
    errors = validate_user_payload({**payload, key: value})

    assert [(error.field, error.type) for error in errors] == [(key, "extra_forbidden")]
