"""List users use case."""

from pydantic import BaseModel, Field

from peerrate.adapter.cache import Cache, listing_key
from peerrate.application.usecase.base import BaseUseCase
from peerrate.config import ListingSettings
from peerrate.domain.service import UserService


class ListUsersRequest(BaseModel):
    """List users request."""

    page: int = Field(default=0, ge=0)


class ListUsersResponse(BaseModel):
    """List users response."""

    text: str
    cached: bool


class ListUsersUseCase(BaseUseCase):
    """Use case for the paged leaderboard, served through the cache."""

    def __init__(
        self,
        user_service: UserService,
        cache: Cache,
        listing_settings: ListingSettings,
    ) -> None:
        """Initialize list users use case.

        Args:
            user_service: User domain service
            cache: Read-through cache
            listing_settings: Page size
        """
        self.user_service = user_service
        self.cache = cache
        self.listing_settings = listing_settings

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """Execute list users flow.

        Each line reads ``<nickname> - <email>``; a page past the end is
        an empty body.
        """

        async def load() -> str:
            users = await self.user_service.list_page(
                request.page, self.listing_settings.page_size
            )
            return "\n".join(f"{user.nickname} - {user.email}" for user in users)

        result = await self.cache.get_or_load(listing_key(request.page), load)
        return ListUsersResponse(text=result.value, cached=result.hit)
