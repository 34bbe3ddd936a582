"""In-memory user repository for testing."""

from datetime import datetime
from typing import Optional

from peerrate.domain.error import DuplicateUserError, PersistenceError
from peerrate.domain.model.user import User
from peerrate.domain.repository.user import UserRepository
from peerrate.domain.value import Nickname


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def _live(self, nickname: Nickname) -> Optional[User]:
        user = self._users.get(nickname.root)
        if user is None or user.is_deleted:
            return None
        return user

    async def find_by_nickname(self, nickname: Nickname) -> Optional[User]:
        """Find a user by nickname."""
        return self._live(nickname)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        for user in self._users.values():
            if user.email == email and not user.is_deleted:
                return user
        return None

    async def add(self, user: User) -> User:
        """Insert a new user."""
        if user.nickname.root in self._users or any(
            existing.email == user.email for existing in self._users.values()
        ):
            raise DuplicateUserError()
        self._users[user.nickname.root] = user
        return user

    async def update_profile(self, user: User) -> User:
        """Write profile fields of an existing user."""
        current = self._live(user.nickname)
        if current is None:
            raise PersistenceError(f"user {user.nickname} does not exist")
        updated = current.model_copy(
            update={
                "first_name": user.first_name,
                "last_name": user.last_name,
                "password_hash": user.password_hash,
                "information": user.information,
                "updated_at": user.updated_at,
            }
        )
        self._users[user.nickname.root] = updated
        return updated

    async def update_rating(self, user: User, expected_version: int) -> bool:
        """Conditionally write rating and ledger."""
        current = self._live(user.nickname)
        if current is None or current.version != expected_version:
            return False
        self._users[user.nickname.root] = current.model_copy(
            update={
                "rating": user.rating,
                "rating_list": user.rating_list,
                "version": expected_version + 1,
            }
        )
        return True

    async def update_voted_at(self, nickname: Nickname, voted_at: datetime) -> None:
        """Record the last vote time of a user."""
        current = self._live(nickname)
        if current is None:
            raise PersistenceError(f"user {nickname} does not exist")
        self._users[nickname.root] = current.model_copy(update={"voted_at": voted_at})

    async def soft_delete(self, nickname: Nickname, deleted_at: datetime) -> bool:
        """Mark a user as deleted."""
        current = self._live(nickname)
        if current is None:
            return False
        self._users[nickname.root] = current.model_copy(
            update={"deleted_at": deleted_at}
        )
        return True

    async def list_by_rating(self, offset: int, limit: int) -> list[User]:
        """List live users by rating, highest first."""
        live = [user for user in self._users.values() if not user.is_deleted]
        live.sort(key=lambda user: (-user.rating, user.nickname.root))
        return live[offset : offset + limit]
