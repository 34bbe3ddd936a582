"""Domain model entities for peerrate."""

from peerrate.domain.model.user import User
from peerrate.domain.model.vote import VoteRecord

__all__ = [
    "User",
    "VoteRecord",
]
