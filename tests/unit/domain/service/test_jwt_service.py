"""Unit tests for JWTService as the identity resolver."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from peerrate.config import AuthSettings
from peerrate.domain.service import JWTService
from peerrate.domain.value import Nickname, Role
from peerrate.util.jwt import JWTError
from tests.conftest import make_user

SETTINGS = AuthSettings(jwt_secret="test-secret")


@pytest.fixture
def jwt_service():
    return JWTService(auth_settings=SETTINGS)


def test_token_round_trip(jwt_service):
    """A token carries the user's id, nickname and role."""
    user = make_user("alice", role=Role.ADMIN)

    payload = jwt_service.verify_token(jwt_service.create_token(user))

    assert payload.user_id == str(user.id)
    assert payload.nickname == "alice"
    assert payload.role == "admin"
    assert payload.exp > datetime.now(timezone.utc)


@pytest.mark.parametrize("prefix", ["", "Bearer ", "bearer "])
def test_resolve_nickname_accepts_bearer_prefix(jwt_service, prefix):
    token = jwt_service.create_token(make_user("alice"))

    assert jwt_service.resolve_nickname(prefix + token) == Nickname("alice")


@pytest.mark.parametrize("credential", [None, "", "   ", "Bearer ", "abc", "a.b"])
def test_resolve_rejects_missing_or_malformed(jwt_service, credential):
    with pytest.raises(JWTError):
        jwt_service.resolve_nickname(credential)


def test_resolve_rejects_foreign_signature(jwt_service):
    """A token signed with another secret is refused."""
    other = JWTService(auth_settings=AuthSettings(jwt_secret="other-secret"))
    token = other.create_token(make_user("alice"))

    with pytest.raises(JWTError, match="Invalid token"):
        jwt_service.resolve_nickname(token)


def test_resolve_rejects_expired_token(jwt_service):
    token = jwt.encode(
        {
            "user_id": "1",
            "nickname": "alice",
            "role": "user",
            "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
        },
        SETTINGS.jwt_secret,
        algorithm=SETTINGS.jwt_algorithm,
    )

    with pytest.raises(JWTError, match="expired"):
        jwt_service.resolve_nickname(token)


def test_resolve_rejects_token_without_nickname(jwt_service):
    token = jwt.encode(
        {"user_id": "1", "role": "user", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        SETTINGS.jwt_secret,
        algorithm=SETTINGS.jwt_algorithm,
    )

    with pytest.raises(JWTError, match="missing required claims"):
        jwt_service.resolve_nickname(token)
