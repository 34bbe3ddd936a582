"""Strongly typed identifiers for peerrate domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
