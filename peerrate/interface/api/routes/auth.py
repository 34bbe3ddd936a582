"""Registration and login routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from peerrate.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from peerrate.domain.error import (
    DuplicateUserError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"], route_class=DishkaRoute)


@router.post("/register/", response_class=PlainTextResponse)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> PlainTextResponse:
    """Create a new account.

    Example:
        POST /register/
        {
            "firstname": "Alice",
            "lastname": "Smith",
            "nickname": "alice",
            "email": "alice@example.com",
            "password": "Secret1!"
        }

        Response: user added
    """
    try:
        await register_use_case.execute(request)
    except (ValidationError, DuplicateUserError) as e:
        logger.info(f"Registration failed for {request.nickname!r}: {e}")
        return PlainTextResponse(
            f"create user error: {e}", status_code=status.HTTP_400_BAD_REQUEST
        )
    return PlainTextResponse("user added")


@router.post("/log-in/", response_class=PlainTextResponse)
async def log_in(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> PlainTextResponse:
    """Exchange nickname and password for a token.

    The token is returned as the plain response body and is sent back in
    the ``Authorization`` header on protected routes.
    """
    try:
        response = await login_use_case.execute(request)
    except (ValidationError, NotFoundError, InvalidCredentialsError) as e:
        logger.info(f"Login failed for {request.nickname!r}: {e}")
        return PlainTextResponse(
            f"login error: {e}", status_code=status.HTTP_400_BAD_REQUEST
        )
    return PlainTextResponse(response.token)
