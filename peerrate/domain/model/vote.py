"""Vote ledger entries.

Every user carries a ledger of the votes cast on them: at most one record
per voter, holding the sign of that voter's current vote.
"""

from datetime import datetime

from pydantic import ConfigDict, Field

from peerrate.domain.model.common import DomainModel
from peerrate.domain.value import Nickname, VoteDirection


class VoteRecord(DomainModel):
    """One voter's standing vote on a target user.

    Field aliases are the stored ledger keys.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    voter: Nickname = Field(alias="VotedNickname")
    sign: VoteDirection = Field(alias="VotedRating")
    cast_at: datetime = Field(alias="VotedDate")
