"""Application layer DI providers."""

from dishka import Scope, provide

from peerrate.adapter.cache import Cache
from peerrate.application.usecase.auth import LoginUseCase, RegisterUseCase
from peerrate.application.usecase.rating import CastVoteUseCase, GetRatingUseCase
from peerrate.application.usecase.user import (
    DeleteUserUseCase,
    GetUserProfileUseCase,
    ListUsersUseCase,
    UpdateUserProfileUseCase,
)
from peerrate.config import CacheSettings, ListingSettings
from peerrate.domain.service import JWTService, UserService, VoteService
from peerrate.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(self, user_service: UserService) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    # Rating use cases
    @provide(scope=Scope.REQUEST)
    def get_get_rating_use_case(
        self, user_service: UserService, cache: Cache
    ) -> GetRatingUseCase:
        """Provide get rating use case."""
        return GetRatingUseCase(user_service=user_service, cache=cache)

    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        jwt_service: JWTService,
        vote_service: VoteService,
        cache: Cache,
        cache_settings: CacheSettings,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            jwt_service=jwt_service,
            vote_service=vote_service,
            cache=cache,
            cache_settings=cache_settings,
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_user_profile_use_case(
        self, user_service: UserService, cache: Cache
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service, cache=cache)

    @provide(scope=Scope.REQUEST)
    def get_update_user_profile_use_case(
        self, user_service: UserService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(self, user_service: UserService) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(
        self,
        user_service: UserService,
        cache: Cache,
        listing_settings: ListingSettings,
    ) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(
            user_service=user_service, cache=cache, listing_settings=listing_settings
        )
