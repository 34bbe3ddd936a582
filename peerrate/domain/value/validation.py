"""Field validators for registration and profile edits.

Each rule is a named check that yields a tagged outcome. A form is
validated by running its checks in order and stopping at the first
failure, so the error a user sees is deterministic.
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable

NICKNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{4,12}$")
NAME_PATTERN = re.compile(r"^[a-zA-Z]{3,16}$")
EMAIL_PATTERN = re.compile(
    r"^[^@\s<>()\[\],;:\"]+@"
    r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?)*$"
)
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 16


def is_valid_nickname(value: str) -> bool:
    return bool(NICKNAME_PATTERN.match(value))


def is_valid_name(value: str) -> bool:
    return bool(NAME_PATTERN.match(value))


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value))


def is_valid_password(value: str) -> bool:
    """Check password strength.

    Requires 6-16 characters with at least one uppercase letter,
    one digit and one non-alphanumeric character.
    """
    if not PASSWORD_MIN_LENGTH <= len(value) <= PASSWORD_MAX_LENGTH:
        return False
    return all(
        re.search(pattern, value) for pattern in (r"[A-Z]", r"\d", r"[\W_]")
    )


@dataclass(frozen=True)
class CheckOutcome:
    """Result of running one named check."""

    field: str
    passed: bool
    message: str | None = None


@dataclass(frozen=True)
class Check:
    """A named validation rule bound to a form field."""

    field: str
    message: str
    rule: Callable[[str], bool]

    def run(self, value: str) -> CheckOutcome:
        if self.rule(value):
            return CheckOutcome(field=self.field, passed=True)
        return CheckOutcome(field=self.field, passed=False, message=self.message)


FIRST_NAME = Check("firstname", "incorrect first name", is_valid_name)
LAST_NAME = Check("lastname", "incorrect last name", is_valid_name)
NICKNAME = Check("nickname", "incorrect nickname", is_valid_nickname)
EMAIL = Check("email", "incorrect email", is_valid_email)
PASSWORD = Check("password", "incorrect password", is_valid_password)

# Evaluation order for a new account
REGISTRATION_CHECKS: tuple[Check, ...] = (
    FIRST_NAME,
    LAST_NAME,
    NICKNAME,
    EMAIL,
    PASSWORD,
)


def first_failure(checks: Iterable[Check], values: dict[str, str]) -> CheckOutcome | None:
    """Run checks in order and return the first failing outcome.

    Checks whose field is absent from ``values`` are skipped, which lets
    partial profile edits reuse the same rules.

    Args:
        checks: Ordered checks to evaluate
        values: Field name to submitted value

    Returns:
        The first failed outcome, or None if every check passed
    """
    for check in checks:
        if check.field not in values:
            continue
        outcome = check.run(values[check.field])
        if not outcome.passed:
            return outcome
    return None
