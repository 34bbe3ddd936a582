"""PostgreSQL implementation of User repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from peerrate.domain.error import DuplicateUserError, PersistenceError
from peerrate.domain.model import User
from peerrate.domain.repository import UserRepository
from peerrate.domain.value import Nickname
from peerrate.persistence.mappers import row_to_user, user_to_dict
from peerrate.persistence.tables import users_table

_live_users = users_table.c.deleted_at.is_(None)


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository.

    Rating and vote-time writes commit immediately so each one is an
    independent single-row update, not part of the request transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_nickname(self, nickname: Nickname) -> Optional[User]:
        """Find a user by nickname.

        Args:
            nickname: Nickname to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(
            users_table.c.nickname == nickname.root, _live_users
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email.

        Args:
            email: Email to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.email == email, _live_users)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def add(self, user: User) -> User:
        """Insert a new user.

        The insert runs in a savepoint so a unique violation leaves the
        request transaction usable.
        """
        stmt = users_table.insert().values(**user_to_dict(user))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise DuplicateUserError() from e
        return user

    async def update_profile(self, user: User) -> User:
        """Write profile fields of an existing user."""
        stmt = (
            users_table.update()
            .where(users_table.c.nickname == user.nickname.root, _live_users)
            .values(
                first_name=user.first_name,
                last_name=user.last_name,
                password_hash=user.password_hash,
                information=user.information,
                updated_at=user.updated_at,
            )
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise PersistenceError(f"error update user: {e}") from e
        if result.rowcount == 0:
            raise PersistenceError(f"user {user.nickname} does not exist")
        return user

    async def update_rating(self, user: User, expected_version: int) -> bool:
        """Conditionally write rating and ledger.

        Postgres re-checks the WHERE clause after waiting on a concurrent
        writer's row lock, so at most one of two racing writers matches.
        """
        stmt = (
            users_table.update()
            .where(
                users_table.c.nickname == user.nickname.root,
                users_table.c.version == expected_version,
                _live_users,
            )
            .values(
                rating=user.rating,
                rating_list=user.rating_list,
                version=expected_version + 1,
            )
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise PersistenceError(f"can't update user: {e}") from e
        return result.rowcount == 1

    async def update_voted_at(self, nickname: Nickname, voted_at: datetime) -> None:
        """Record the last vote time of a user."""
        stmt = (
            users_table.update()
            .where(users_table.c.nickname == nickname.root, _live_users)
            .values(voted_at=voted_at)
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise PersistenceError(f"can't update user: {e}") from e
        if result.rowcount == 0:
            raise PersistenceError(f"can't update user: {nickname} does not exist")

    async def soft_delete(self, nickname: Nickname, deleted_at: datetime) -> bool:
        """Mark a user as deleted."""
        stmt = (
            users_table.update()
            .where(users_table.c.nickname == nickname.root, _live_users)
            .values(deleted_at=deleted_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def list_by_rating(self, offset: int, limit: int) -> list[User]:
        """List live users by rating, highest first.

        Args:
            offset: Number of users to skip
            limit: Page size

        Returns:
            Users on the page
        """
        stmt = (
            select(users_table)
            .where(_live_users)
            .order_by(users_table.c.rating.desc(), users_table.c.nickname)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]
