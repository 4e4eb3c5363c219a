"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Entry point the host layer calls with one request model.

    Extra positional arguments carry host capabilities (e.g. the session
    being admitted) that are not part of the request data.
    """

    @abstractmethod
    async def execute(self, request: RequestT, *capabilities: Any) -> ResponseT:
        pass
