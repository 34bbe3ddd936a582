"""Domain value objects for peerrate.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum, IntEnum

from pydantic import field_validator

from peerrate.domain.value.common import RootValueObject


class VoteDirection(IntEnum):
    """Direction of a reputation vote.

    The integer value is the rating delta and the sign stored in the ledger.
    """

    UP = 1
    DOWN = -1


class Role(str, Enum):
    """Account role carried in issued tokens."""

    USER = "user"
    ADMIN = "admin"


class Nickname(RootValueObject[str]):
    """Unique public name of a user.

    Only the length is enforced here so that nicknames read back from
    storage or taken from a URL always load; the stricter registration
    format lives in ``peerrate.domain.value.validation``.
    """

    @field_validator("root")
    @classmethod
    def validate_length(cls, v: str) -> str:
        """Validate nickname is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Nickname must be 1-255 characters")
        return v
