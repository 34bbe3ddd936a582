"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from peerrate.domain.model import User
from peerrate.domain.value import Nickname, Role, UserId

T0 = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_user(
    nickname: str,
    *,
    rating: int = 0,
    rating_list: str = "",
    voted_at: datetime | None = None,
    role: Role = Role.USER,
) -> User:
    """Build a stored user for repository-level setup.

    The password hash is a placeholder; tests that log in should go
    through ``UserService.register`` instead.
    """
    return User(
        id=UserId(uuid4()),
        nickname=Nickname(nickname),
        first_name=nickname.capitalize(),
        last_name="Tester",
        email=f"{nickname}@example.com",
        password_hash="pbkdf2_sha256$1$salt$00",
        role=role,
        rating=rating,
        rating_list=rating_list,
        created_at=T0,
        updated_at=T0,
        voted_at=voted_at,
    )


class FakeClock:
    """Settable clock returning aware UTC datetimes."""

    def __init__(self, now: datetime = T0) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)
