"""Rating use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_rating import GetRatingRequest, GetRatingResponse, GetRatingUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetRatingRequest",
    "GetRatingResponse",
    "GetRatingUseCase",
]
