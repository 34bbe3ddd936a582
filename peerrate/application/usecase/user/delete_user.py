"""Delete user use case."""

from pydantic import BaseModel

from peerrate.application.usecase.base import BaseUseCase
from peerrate.domain.error import NotFoundError
from peerrate.domain.service import UserService
from peerrate.domain.value import Nickname, Role


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    actor: str  # From authenticated user
    actor_role: Role
    target: str


class DeleteUserUseCase(BaseUseCase):
    """Use case for soft-deleting an account."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> None:
        """Execute delete flow.

        Raises:
            NotAuthorizedError: If the caller may not delete the target
            NotFoundError: If the target does not exist
        """
        try:
            target = Nickname(request.target)
        except ValueError:
            raise NotFoundError("user", request.target) from None
        await self.user_service.delete(
            Nickname(request.actor), request.actor_role, target
        )
