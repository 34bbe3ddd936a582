"""Repository interfaces for the peerrate domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from peerrate.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
]
