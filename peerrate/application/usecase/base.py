"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """One request/response interaction.

    Use cases take a pydantic request, call domain services and return a
    pydantic response; routes turn that response into plain text.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
