"""Unit tests for registration field validators."""

import pytest

from peerrate.domain.value.validation import (
    EMAIL,
    FIRST_NAME,
    NICKNAME,
    PASSWORD,
    REGISTRATION_CHECKS,
    first_failure,
    is_valid_email,
    is_valid_name,
    is_valid_nickname,
    is_valid_password,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("asdaASW", True),
        ("asdaASW12313!!", False),
        ("dave", True),
        ("a_b-c1", True),
        ("abc", False),
        ("thirteenchars", False),
    ],
)
def test_nickname(value, expected):
    assert is_valid_nickname(value) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Oleksii", True),
        ("Oleksii123", False),
        ("Al", False),
        ("Bob", True),
        ("Abcdefghijklmnopq", False),
    ],
)
def test_name(value, expected):
    assert is_valid_name(value) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Qwerty1123@#", True),
        ("Aaaasssdd", False),
        ("Ab1!", False),
        ("Abcdefgh1!xyzxyz1", False),
        ("abcdef1!", False),
        ("Abcdefg!", False),
        ("Abcdef12", False),
        ("Abc_ef12", True),
    ],
)
def test_password(value, expected):
    assert is_valid_password(value) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("validEmail@example.com", True),
        ("invalidEmail@.com", False),
        ("first.last@sub.example.org", True),
        ("no-at-sign.example.com", False),
        ("two@@example.com", False),
    ],
)
def test_email(value, expected):
    assert is_valid_email(value) is expected


def test_check_outcome_carries_field_and_message():
    outcome = NICKNAME.run("x")

    assert outcome.field == "nickname"
    assert not outcome.passed
    assert outcome.message == "incorrect nickname"
    assert EMAIL.run("a@b.io").passed


def test_registration_checks_run_in_form_order():
    assert [check.field for check in REGISTRATION_CHECKS] == [
        "firstname",
        "lastname",
        "nickname",
        "email",
        "password",
    ]


def test_first_failure_stops_at_earliest_bad_field():
    values = {
        "firstname": "Alice",
        "lastname": "Smith",
        "nickname": "!!",
        "email": "bad",
        "password": "bad",
    }

    outcome = first_failure(REGISTRATION_CHECKS, values)

    assert outcome.field == "nickname"


def test_first_failure_skips_absent_fields():
    assert first_failure((FIRST_NAME, PASSWORD), {"password": "Qwerty1123@#"}) is None
