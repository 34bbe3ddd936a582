"""User repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from peerrate.domain.model.user import User
from peerrate.domain.value import Nickname


class UserRepository(ABC):
    """Repository for the User aggregate.

    Every write touches exactly one user row. There are no cross-row
    transactions: callers updating two users issue two independent writes.
    Soft-deleted users are invisible to every lookup.
    """

    @abstractmethod
    async def find_by_nickname(self, nickname: Nickname) -> Optional[User]:
        """Find a user by nickname.

        Args:
            nickname: The user's nickname

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email.

        Args:
            email: Lower-cased email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, user: User) -> User:
        """Insert a newly registered user.

        Args:
            user: The user to insert

        Returns:
            The inserted user

        Raises:
            DuplicateUserError: If the nickname or email is already taken
        """
        pass

    @abstractmethod
    async def update_profile(self, user: User) -> User:
        """Write the profile fields of an existing user.

        Only names, password hash, information and ``updated_at`` are
        written; rating and ledger are left untouched.

        Args:
            user: The user carrying the new profile values

        Returns:
            The updated user

        Raises:
            PersistenceError: If the write fails
        """
        pass

    @abstractmethod
    async def update_rating(self, user: User, expected_version: int) -> bool:
        """Conditionally write rating and ledger of a user.

        The write applies only if the stored ``version`` still equals
        ``expected_version``; it then stores ``user.rating``,
        ``user.rating_list`` and ``expected_version + 1``.

        Args:
            user: The user carrying the new rating and encoded ledger
            expected_version: Version the caller read before mutating

        Returns:
            True if the row was written, False if another writer won

        Raises:
            PersistenceError: If the write fails
        """
        pass

    @abstractmethod
    async def update_voted_at(self, nickname: Nickname, voted_at: datetime) -> None:
        """Record when a user last cast a vote.

        Args:
            nickname: The voter
            voted_at: Time of the vote

        Raises:
            PersistenceError: If the write fails or the user is gone
        """
        pass

    @abstractmethod
    async def soft_delete(self, nickname: Nickname, deleted_at: datetime) -> bool:
        """Mark a user as deleted.

        Args:
            nickname: The user to delete
            deleted_at: Deletion time

        Returns:
            True if a user was deleted, False if none matched
        """
        pass

    @abstractmethod
    async def list_by_rating(self, offset: int, limit: int) -> list[User]:
        """List users ordered by rating, highest first.

        Ties are broken by nickname so pages are stable.

        Args:
            offset: Number of users to skip
            limit: Maximum number of users to return

        Returns:
            Users on the requested page
        """
        pass
