"""User listing routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from peerrate.adapter.error import CacheError
from peerrate.application.usecase.user import ListUsersRequest, ListUsersUseCase

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)

# Keeps the row offset inside a Postgres bigint
MAX_PAGE = 1_000_000_000


async def _list_page(page: int, use_case: ListUsersUseCase) -> PlainTextResponse:
    try:
        response = await use_case.execute(ListUsersRequest(page=page))
    except CacheError as e:
        return PlainTextResponse(
            f"redis error: {e}", status_code=status.HTTP_400_BAD_REQUEST
        )
    return PlainTextResponse(response.text)


@router.get("/", response_class=PlainTextResponse)
async def list_first_page(
    list_users_use_case: FromDishka[ListUsersUseCase],
) -> PlainTextResponse:
    """List the highest-rated users, one ``nickname - email`` per line."""
    return await _list_page(0, list_users_use_case)


@router.get("/{page}", response_class=PlainTextResponse)
async def list_page(
    page: str,
    list_users_use_case: FromDishka[ListUsersUseCase],
) -> PlainTextResponse:
    """List one page of users ordered by rating.

    Example:
        GET /users/1

        Response:
        dave - dave@example.com
        carol - carol@example.com
    """
    if not (page.isascii() and page.isdigit()) or int(page) > MAX_PAGE:
        return PlainTextResponse(
            f"bad page: {page}", status_code=status.HTTP_400_BAD_REQUEST
        )
    return await _list_page(int(page), list_users_use_case)
