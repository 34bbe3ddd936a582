"""Get user profile use case."""

from pydantic import BaseModel

from peerrate.adapter.cache import Cache, profile_key
from peerrate.application.usecase.base import BaseUseCase
from peerrate.domain.model import User
from peerrate.domain.service import UserService
from peerrate.domain.value import Nickname


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    nickname: str


class GetUserProfileResponse(BaseModel):
    """Get user profile response."""

    text: str
    cached: bool


def render_profile(user: User) -> str:
    return (
        f"User name: {user.first_name}\n"
        f"User lastname: {user.last_name}\n"
        f"User id: {user.id}"
    )


class GetUserProfileUseCase(BaseUseCase):
    """Use case for reading a user's public profile through the cache."""

    def __init__(self, user_service: UserService, cache: Cache) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            cache: Read-through cache
        """
        self.user_service = user_service
        self.cache = cache

    async def execute(
        self, request: GetUserProfileRequest
    ) -> GetUserProfileResponse | None:
        """Execute get user profile flow.

        Args:
            request: Request with nickname

        Returns:
            Rendered profile, or None if the user does not exist
        """
        try:
            nickname = Nickname(request.nickname)
        except ValueError:
            # No stored user can carry an invalid nickname
            return None

        async def load() -> str | None:
            user = await self.user_service.find_by_nickname(nickname)
            return render_profile(user) if user else None

        result = await self.cache.get_or_load(profile_key(nickname.root), load)
        if result is None:
            return None
        return GetUserProfileResponse(text=result.value, cached=result.hit)
