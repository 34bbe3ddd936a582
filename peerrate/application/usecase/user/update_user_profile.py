"""Update user profile use case."""

from datetime import datetime

from pydantic import BaseModel

from peerrate.application.usecase.base import BaseUseCase
from peerrate.domain.service import UserService
from peerrate.domain.value import Nickname


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request."""

    nickname: str  # From authenticated user
    firstname: str | None = None
    lastname: str | None = None
    password: str | None = None
    information: str | None = None


class UpdateUserProfileResponse(BaseModel):
    """Update user profile response."""

    nickname: str
    first_name: str
    last_name: str
    information: str
    updated_at: datetime


class UpdateUserProfileUseCase(BaseUseCase):
    """Use case for editing the caller's profile.

    Names, password and free-text information can change; nickname,
    email and rating cannot.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(
        self, request: UpdateUserProfileRequest
    ) -> UpdateUserProfileResponse:
        """Execute update user profile flow.

        Raises:
            NotFoundError: If the user does not exist
            ValidationError: If a new value is malformed
        """
        user = await self.user_service.update_profile(
            Nickname(request.nickname),
            first_name=request.firstname,
            last_name=request.lastname,
            password=request.password,
            information=request.information,
        )
        return UpdateUserProfileResponse(
            nickname=user.nickname.root,
            first_name=user.first_name,
            last_name=user.last_name,
            information=user.information,
            updated_at=user.updated_at,
        )
