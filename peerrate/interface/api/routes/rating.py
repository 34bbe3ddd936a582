"""Rating routes.

Anyone can read a rating; changing one needs a token in the
``Authorization`` header.
"""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from fastapi.responses import PlainTextResponse

from peerrate.adapter.error import CacheError
from peerrate.application.usecase.rating import (
    CastVoteRequest,
    CastVoteUseCase,
    GetRatingRequest,
    GetRatingUseCase,
)
from peerrate.domain.error import PersistenceError, UnauthorizedError, VotingError
from peerrate.domain.value import VoteDirection

logger = logging.getLogger(__name__)

router = APIRouter(tags=["rating"], route_class=DishkaRoute)


@router.get("/rating/{nickname}/", response_class=PlainTextResponse)
async def get_rating(
    nickname: str,
    get_rating_use_case: FromDishka[GetRatingUseCase],
) -> PlainTextResponse:
    """Get a user's rating.

    Example:
        GET /rating/alice/

        Response: user has 2
    """
    try:
        response = await get_rating_use_case.execute(
            GetRatingRequest(nickname=nickname)
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


async def _cast_vote(
    use_case: CastVoteUseCase,
    credential: str | None,
    nickname: str,
    direction: VoteDirection,
) -> PlainTextResponse:
    # SenderNotFoundError is not mapped here and surfaces as a 500
    try:
        response = await use_case.execute(
            CastVoteRequest(credential=credential, target=nickname, direction=direction)
        )
    except UnauthorizedError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_401_UNAUTHORIZED)
    except (VotingError, PersistenceError) as e:
        logger.info(f"Vote on {nickname} rejected: {e}")
        return PlainTextResponse(
            f"cannot change rating of {nickname}: {e}",
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return PlainTextResponse(response.text)


@router.post("/profile/add-rating/{nickname}/", response_class=PlainTextResponse)
async def add_rating(
    nickname: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    authorization: str | None = Header(default=None),
) -> PlainTextResponse:
    """Vote a user up, or withdraw an earlier down vote.

    Example:
        POST /profile/add-rating/alice/
        Authorization: Bearer <token>

        Response: user has 1
    """
    return await _cast_vote(
        cast_vote_use_case, authorization, nickname, VoteDirection.UP
    )


@router.post("/profile/sub-rating/{nickname}/", response_class=PlainTextResponse)
async def sub_rating(
    nickname: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    authorization: str | None = Header(default=None),
) -> PlainTextResponse:
    """Vote a user down, or withdraw an earlier up vote."""
    return await _cast_vote(
        cast_vote_use_case, authorization, nickname, VoteDirection.DOWN
    )
