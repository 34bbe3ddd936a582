"""Profile routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from peerrate.adapter.error import CacheError
from peerrate.application.usecase.user import (
    DeleteUserRequest,
    DeleteUserUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
)
from peerrate.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from peerrate.domain.service import JWTService
from peerrate.domain.value import Role
from peerrate.util.jwt import JWTError, TokenPayload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["profile"], route_class=DishkaRoute)


class EditProfileAPIRequest(BaseModel):
    """API request for editing the caller's profile."""

    firstname: str | None = None
    lastname: str | None = None
    password: str | None = None
    information: str | None = None


def _unauthorized(e: JWTError) -> PlainTextResponse:
    return PlainTextResponse(
        f"unauthorized: {e}", status_code=status.HTTP_401_UNAUTHORIZED
    )


@router.get("/{nickname}/", response_class=PlainTextResponse)
async def get_profile(
    nickname: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> PlainTextResponse:
    """Get a user's profile.

    Example:
        GET /profile/alice/
        Authorization: Bearer <token>

        Response:
        User name: Alice
        User lastname: Smith
        User id: 123e4567-e89b-12d3-a456-426614174000
    """
    try:
        jwt_service.resolve(authorization)
    except JWTError as e:
        return _unauthorized(e)

    try:
        response = await get_user_profile_use_case.execute(
            GetUserProfileRequest(nickname=nickname)
        )
    except CacheError as e:
        return PlainTextResponse(
            f"redis error: {e}", status_code=status.HTTP_400_BAD_REQUEST
        )

    if response is None:
        return PlainTextResponse(
            f"user not found: {nickname}", status_code=status.HTTP_404_NOT_FOUND
        )
    return PlainTextResponse(response.text)


@router.post("/edit/", response_class=PlainTextResponse)
async def edit_profile(
    request: EditProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> PlainTextResponse:
    """Edit the caller's own profile.

    Nickname, email and rating cannot be changed here.
    """
    try:
        payload: TokenPayload = jwt_service.resolve(authorization)
    except JWTError as e:
        return _unauthorized(e)

    try:
        await update_user_profile_use_case.execute(
            UpdateUserProfileRequest(
                nickname=payload.nickname,
                firstname=request.firstname,
                lastname=request.lastname,
                password=request.password,
                information=request.information,
            )
        )
    except ValidationError as e:
        return PlainTextResponse(
            f"update user error: {e}", status_code=status.HTTP_400_BAD_REQUEST
        )
    except NotFoundError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_404_NOT_FOUND)
    except PersistenceError as e:
        logger.error(f"Profile update for {payload.nickname} failed: {e}")
        return PlainTextResponse(
            f"update user error: {e}", status_code=status.HTTP_400_BAD_REQUEST
        )
    return PlainTextResponse("user updated")


@router.post("/delete/{nickname}/", response_class=PlainTextResponse)
async def delete_profile(
    nickname: str,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> PlainTextResponse:
    """Delete an account. Users may delete themselves; admins anyone."""
    try:
        payload: TokenPayload = jwt_service.resolve(authorization)
    except JWTError as e:
        return _unauthorized(e)

    try:
        await delete_user_use_case.execute(
            DeleteUserRequest(
                actor=payload.nickname,
                actor_role=Role(payload.role),
                target=nickname,
            )
        )
    except NotAuthorizedError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_403_FORBIDDEN)
    except NotFoundError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_404_NOT_FOUND)
    return PlainTextResponse("user deleted")
