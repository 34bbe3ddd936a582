"""User aggregate root.

A user owns a profile, a reputation rating and the ledger of votes other
users have cast on them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from peerrate.domain.model.common import DomainModel
from peerrate.domain.value import Nickname, Role, UserId
from peerrate.util.clock import utc_now


class User(DomainModel):
    """User aggregate root.

    ``rating_list`` holds the encoded vote ledger exactly as stored; it is
    decoded only by the voting engine. ``version`` increases with every
    rating write and guards concurrent ledger updates.
    """

    id: UserId
    nickname: Nickname
    first_name: str
    last_name: str
    email: str
    password_hash: str
    information: str = ""
    role: Role = Role.USER
    rating: int = 0  # May go negative
    rating_list: str = ""
    version: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    deleted_at: Optional[datetime] = None
    voted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
