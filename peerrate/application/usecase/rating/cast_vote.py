"""Cast vote use case."""

import logfire
from pydantic import BaseModel

from peerrate.adapter.cache import Cache, rating_key
from peerrate.adapter.error import CacheError
from peerrate.config import CacheSettings
from peerrate.domain.error import UnauthorizedError
from peerrate.domain.service import JWTService, VoteService
from peerrate.domain.value import VoteDirection
from peerrate.util.jwt import JWTError

from peerrate.application.usecase.base import BaseUseCase


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    credential: str | None  # Raw Authorization header value
    target: str  # Nickname being rated
    direction: VoteDirection


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    nickname: str
    rating: int

    @property
    def text(self) -> str:
        return f"user has {self.rating}"


class CastVoteUseCase(BaseUseCase):
    """Use case for rating another user up or down."""

    def __init__(
        self,
        jwt_service: JWTService,
        vote_service: VoteService,
        cache: Cache,
        cache_settings: CacheSettings,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            jwt_service: Resolves the caller from the credential
            vote_service: Vote domain service
            cache: Read-through cache
            cache_settings: Cache settings (invalidation switch)
        """
        self.jwt_service = jwt_service
        self.vote_service = vote_service
        self.cache = cache
        self.cache_settings = cache_settings

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Steps:
        1. Resolve the credential to the acting nickname
        2. Apply the vote through the vote service
        3. Optionally drop the target's cached rating

        Args:
            request: Cast vote request

        Returns:
            The target's new rating

        Raises:
            UnauthorizedError: If the credential cannot be resolved
            SenderNotFoundError: If the caller no longer exists
            VotingError: If the vote is rejected
            PersistenceError: If a write fails
        """
        try:
            voter = self.jwt_service.resolve_nickname(request.credential)
        except JWTError as e:
            raise UnauthorizedError(str(e)) from e

        target = request.target
        rating = await self.vote_service.cast_vote(voter, target, request.direction)

        if self.cache_settings.invalidate_on_vote:
            try:
                await self.cache.delete(rating_key(target))
            except CacheError as e:
                logfire.warn(
                    "Cached rating not invalidated", target=target, error=str(e)
                )

        return CastVoteResponse(nickname=target, rating=rating)
