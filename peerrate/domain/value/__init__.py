"""Domain value objects for peerrate."""

from peerrate.domain.value.identifiers import UserId
from peerrate.domain.value.types import Nickname, Role, VoteDirection

__all__ = [
    "UserId",
    "Nickname",
    "Role",
    "VoteDirection",
]
