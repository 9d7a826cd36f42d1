"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One application operation: a validated request in, a response out.

    Use cases translate between API-shaped models and domain calls. Domain
    errors pass through untouched for the interface layer to render.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
