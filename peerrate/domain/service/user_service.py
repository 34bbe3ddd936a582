"""User domain service."""

from uuid import uuid4

import logfire

from peerrate.config import AuthSettings
from peerrate.domain.error import (
    DuplicateUserError,
    InvalidCredentialsError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from peerrate.domain.model import User
from peerrate.domain.repository import UserRepository
from peerrate.domain.value import Nickname, Role, UserId
from peerrate.domain.value.validation import (
    FIRST_NAME,
    LAST_NAME,
    PASSWORD,
    REGISTRATION_CHECKS,
    first_failure,
)
from peerrate.util.clock import Clock, utc_now
from peerrate.util.password import hash_password, verify_password

from .base import Service

PROFILE_CHECKS = (FIRST_NAME, LAST_NAME, PASSWORD)


class UserService(Service):
    """Domain service for accounts and profiles."""

    def __init__(
        self,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (password work factor)
            clock: Source of the current time
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings
        self.clock = clock

    async def register(
        self,
        *,
        first_name: str,
        last_name: str,
        nickname: str,
        email: str,
        password: str,
        information: str = "",
    ) -> User:
        """Create a new account.

        Fields are checked in a fixed order (first name, last name,
        nickname, email, password) and the first failure is reported.

        Returns:
            The registered user

        Raises:
            ValidationError: If a field is malformed
            DuplicateUserError: If the nickname or email is taken
        """
        email = email.lower()
        with logfire.span("user_service.register", nickname=nickname):
            failure = first_failure(
                REGISTRATION_CHECKS,
                {
                    "firstname": first_name,
                    "lastname": last_name,
                    "nickname": nickname,
                    "email": email,
                    "password": password,
                },
            )
            if failure:
                logfire.info("Registration rejected", field=failure.field)
                raise ValidationError(failure.message)

            name = Nickname(nickname)
            if await self.user_repository.find_by_nickname(name) or (
                await self.user_repository.find_by_email(email)
            ):
                logfire.warn("Registration for existing user", nickname=nickname)
                raise DuplicateUserError()

            now = self.clock()
            user = User(
                id=UserId(uuid4()),
                nickname=name,
                first_name=first_name,
                last_name=last_name,
                email=email,
                password_hash=hash_password(
                    password, self.auth_settings.password_iterations
                ),
                information=information,
                role=Role.USER,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.add(user)
            logfire.info("User registered", nickname=nickname, user_id=str(saved.id))
            return saved

    async def authenticate(self, nickname: str, password: str) -> User:
        """Check a login attempt.

        Raises:
            NotFoundError: If no such user exists
            InvalidCredentialsError: If the password does not match
        """
        with logfire.span("user_service.authenticate", nickname=nickname):
            user = await self.get_by_nickname(Nickname(nickname))
            if not verify_password(password, user.password_hash):
                logfire.warn("Wrong password", nickname=nickname)
                raise InvalidCredentialsError()
            logfire.info("User authenticated", nickname=nickname)
            return user

    async def get_by_nickname(self, nickname: Nickname) -> User:
        """Get a live user by nickname.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_repository.find_by_nickname(nickname)
        if not user:
            logfire.warn("User not found", nickname=nickname.root)
            raise NotFoundError("user", nickname.root)
        return user

    async def find_by_nickname(self, nickname: Nickname) -> User | None:
        """Get a live user by nickname, or None."""
        return await self.user_repository.find_by_nickname(nickname)

    async def update_profile(
        self,
        nickname: Nickname,
        *,
        first_name: str | None = None,
        last_name: str | None = None,
        password: str | None = None,
        information: str | None = None,
    ) -> User:
        """Edit the caller's own profile.

        Only the fields given are changed; rating and ledger are never
        touched here.

        Raises:
            NotFoundError: If the user does not exist
            ValidationError: If a new value is malformed
        """
        with logfire.span("user_service.update_profile", nickname=nickname.root):
            user = await self.get_by_nickname(nickname)

            changes = {
                field: value
                for field, value in (
                    ("firstname", first_name),
                    ("lastname", last_name),
                    ("password", password),
                )
                if value
            }
            failure = first_failure(PROFILE_CHECKS, changes)
            if failure:
                logfire.info("Profile edit rejected", field=failure.field)
                raise ValidationError(failure.message)

            updated = user.model_copy(
                update={
                    "first_name": first_name or user.first_name,
                    "last_name": last_name or user.last_name,
                    "password_hash": hash_password(
                        password, self.auth_settings.password_iterations
                    )
                    if password
                    else user.password_hash,
                    "information": information or user.information,
                    "updated_at": self.clock(),
                }
            )
            saved = await self.user_repository.update_profile(updated)
            logfire.info("Profile updated", nickname=nickname.root)
            return saved

    async def delete(self, actor: Nickname, actor_role: Role, target: Nickname) -> None:
        """Soft-delete an account.

        Users may delete themselves; admins may delete anyone.

        Raises:
            NotAuthorizedError: If the actor may not delete the target
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "user_service.delete", actor=actor.root, target=target.root
        ):
            if actor != target and actor_role != Role.ADMIN:
                logfire.warn("Delete not allowed", actor=actor.root, target=target.root)
                raise NotAuthorizedError(actor.root, target.root)

            deleted = await self.user_repository.soft_delete(target, self.clock())
            if not deleted:
                raise NotFoundError("user", target.root)
            logfire.info("User deleted", target=target.root)

    async def list_page(self, page: int, page_size: int) -> list[User]:
        """List one page of users ordered by rating.

        Raises:
            ValidationError: If page is negative
        """
        if page < 0:
            raise ValidationError("page must not be negative")
        users = await self.user_repository.list_by_rating(page * page_size, page_size)
        logfire.info("Listed users", page=page, count=len(users))
        return users
