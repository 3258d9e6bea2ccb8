"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    A use case turns a pydantic request into domain calls and shapes the
    result into a pydantic response.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
