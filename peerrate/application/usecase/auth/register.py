"""Register use case."""

from pydantic import BaseModel

from peerrate.application.usecase.base import BaseUseCase
from peerrate.domain.service import UserService


class RegisterRequest(BaseModel):
    """Register request."""

    firstname: str = ""
    lastname: str = ""
    nickname: str = ""
    email: str = ""
    password: str = ""
    information: str = ""


class RegisterResponse(BaseModel):
    """Register response."""

    user_id: str
    nickname: str


class RegisterUseCase(BaseUseCase):
    """Use case for creating a new account."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration.

        Args:
            request: Submitted account fields

        Returns:
            The new user's id and nickname

        Raises:
            ValidationError: If a field is malformed
            DuplicateUserError: If nickname or email is taken
        """
        user = await self.user_service.register(
            first_name=request.firstname,
            last_name=request.lastname,
            nickname=request.nickname,
            email=request.email,
            password=request.password,
            information=request.information,
        )
        return RegisterResponse(user_id=str(user.id), nickname=user.nickname.root)
