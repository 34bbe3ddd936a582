"""Domain layer DI providers."""

from dishka import Scope, provide

from peerrate.config import AuthSettings, VotingSettings
from peerrate.domain.repository import UserRepository
from peerrate.domain.service import JWTService, UserService, VoteService
from peerrate.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, auth_settings=auth_settings
        )

    @provide
    def get_vote_service(
        self, user_repository: UserRepository, voting_settings: VotingSettings
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            user_repository=user_repository, voting_settings=voting_settings
        )
