"""Login use case."""

from pydantic import BaseModel

from peerrate.application.usecase.base import BaseUseCase
from peerrate.domain.error import ValidationError
from peerrate.domain.service import JWTService, UserService


class LoginRequest(BaseModel):
    """Login request."""

    nickname: str = ""
    password: str = ""


class LoginResponse(BaseModel):
    """Login response."""

    token: str


class LoginUseCase(BaseUseCase):
    """Use case for exchanging a nickname and password for a token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Require both nickname and password
        2. Check the password against the stored hash
        3. Issue a signed token

        Raises:
            ValidationError: If nickname or password is missing
            NotFoundError: If the user does not exist
            InvalidCredentialsError: If the password is wrong
        """
        if not request.nickname or not request.password:
            raise ValidationError("nickname or password not provided")

        user = await self.user_service.authenticate(request.nickname, request.password)
        return LoginResponse(token=self.jwt_service.create_token(user))
