"""Get rating use case."""

from pydantic import BaseModel

from peerrate.adapter.cache import Cache, rating_key
from peerrate.domain.service import UserService
from peerrate.domain.value import Nickname

from peerrate.application.usecase.base import BaseUseCase


class GetRatingRequest(BaseModel):
    """Get rating request."""

    nickname: str


class GetRatingResponse(BaseModel):
    """Get rating response."""

    text: str
    cached: bool


class GetRatingUseCase(BaseUseCase):
    """Use case for reading a user's rating through the cache.

    Votes do not touch the cache, so a cached rating can lag a vote by
    up to one TTL.
    """

    def __init__(self, user_service: UserService, cache: Cache) -> None:
        """Initialize get rating use case.

        Args:
            user_service: User domain service
            cache: Read-through cache
        """
        self.user_service = user_service
        self.cache = cache

    async def execute(self, request: GetRatingRequest) -> GetRatingResponse | None:
        """Execute get rating flow.

        Args:
            request: Request with nickname

        Returns:
            Rendered rating, or None if the user does not exist

        Raises:
            CacheError: If a freshly loaded rating cannot be cached
        """
        try:
            nickname = Nickname(request.nickname)
        except ValueError:
            # No stored user can carry an invalid nickname
            return None

        async def load() -> str | None:
            user = await self.user_service.find_by_nickname(nickname)
            return f"user has {user.rating}" if user else None

        result = await self.cache.get_or_load(rating_key(nickname.root), load)
        if result is None:
            return None
        return GetRatingResponse(text=result.value, cached=result.hit)
