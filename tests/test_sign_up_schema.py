"""
SignUpRequest tests - coercion and the order field failures are reported in.
"""

import pytest

from app.core.errors import ErrorKind, SignUpError
from app.schemas.user import SignUpRequest, coerce_to_str, parse_sign_up, text_length


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ""),
        ("plain", "plain"),
        (12, "12"),
        (True, "true"),
        (False, "false"),
        (1.0, "1"),
        (-3.0, "-3"),
        (1.5, "1.5"),
        (1e21, "1e+21"),
        ([], ""),
        (["x"], "x"),
        ([1, "a", None, [2, 3]], "1,a,,2,3"),
        ({"a": 1}, "[object Object]"),
        ({}, "[object Object]"),
    ],
)
def test_coerce_to_str(value, expected):
    assert coerce_to_str(value) == expected


def test_float_password_matches_its_integer_text(payload):
    payload["password"] = 1.0
    payload["confirmPassword"] = "1"
    assert parse_sign_up(payload).password == "1"


def test_empty_array_full_name_is_missing(payload):
    payload["full_name"] = []
    with pytest.raises(SignUpError) as err:
        parse_sign_up(payload)
    assert err.value.msg == "Field full_name is required"


def test_confirm_password_read_from_camel_case_key(payload):
    request = SignUpRequest.model_validate(payload)
    assert request.confirm_password == payload["confirmPassword"]
    assert request.failures() == []


def test_snake_case_confirm_password_is_ignored(payload):
    payload["confirm_password"] = payload.pop("confirmPassword")
    with pytest.raises(SignUpError) as err:
        parse_sign_up(payload)
    assert err.value.msg == "Passwords do not match"


@pytest.mark.parametrize(
    "value, expected",
    [("abc", 3), ("é", 1), ("😀", 2), ("a😀b", 4)],
)
def test_text_length_counts_utf16_units(value, expected):
    assert text_length(value) == expected


def test_full_name_limit_counts_astral_characters_twice(payload):
    payload["full_name"] = "😀" * 75
    assert parse_sign_up(payload).full_name == payload["full_name"]

    payload["full_name"] = "😀" * 75 + "a"
    with pytest.raises(SignUpError) as err:
        parse_sign_up(payload)
    assert err.value.msg == "Full name should not be more than 100 characters"


def test_nul_in_password_is_a_validation_failure(payload):
    payload["password"] = payload["confirmPassword"] = "abc\x00def"
    with pytest.raises(SignUpError) as err:
        parse_sign_up(payload)
    assert err.value.kind is ErrorKind.VALIDATION
    assert err.value.msg == "Password contains invalid characters"


def test_unknown_keys_are_ignored(payload):
    payload["is_admin"] = True
    request = parse_sign_up(payload)
    assert not hasattr(request, "is_admin")


def test_failures_listed_in_reporting_order():
    request = SignUpRequest.model_validate(
        {
            "full_name": "n" * 151,
            "phone": "1" * 51,
            "password": "secret",
            "confirmPassword": "other",
        }
    )
    messages = [failure.message for failure in request.failures()]
    assert messages == [
        "Field email is required",
        "Full name should not be more than 100 characters",
        "Invalid phone number",
        "Passwords do not match",
    ]


def test_parse_sign_up_raises_first_failure_with_full_list():
    with pytest.raises(SignUpError) as err:
        parse_sign_up({"password": "a", "confirmPassword": "b"})

    assert err.value.kind is ErrorKind.VALIDATION
    assert err.value.status_code == 400
    assert err.value.msg == "Field full_name is required"
    assert [f.field for f in err.value.failures] == ["full_name", "email", "phone", "confirmPassword"]


def test_boundary_lengths_pass(payload):
    payload["full_name"] = "f" * 150
    payload["email"] = "e" * 150
    payload["phone"] = "1" * 50
    assert parse_sign_up(payload).phone == "1" * 50


def test_mismatch_reported_even_when_fields_are_otherwise_valid(payload):
    payload["confirmPassword"] = payload["password"].upper()
    with pytest.raises(SignUpError) as err:
        parse_sign_up(payload)
    assert err.value.msg == "Passwords do not match"
