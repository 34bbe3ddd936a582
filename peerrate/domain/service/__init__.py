"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .ledger_codec import decode_ledger, encode_ledger
from .user_service import UserService
from .vote_service import VoteService, apply_vote

__all__ = [
    "JWTService",
    "Service",
    "UserService",
    "VoteService",
    "apply_vote",
    "decode_ledger",
    "encode_ledger",
]
