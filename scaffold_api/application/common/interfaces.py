"""
Base interfaces for command and query handlers.

Usage:
    class SayHelloHandler(QueryHandler[HelloResponseDto]):
        def __init__(self, hello_service: HelloService):
            self._hello_service = hello_service

        async def execute(self, query: SayHelloRequestDto) -> HelloResponseDto:
            return HelloResponseDto.of(self._hello_service.say_hello(query.name))
"""
from abc import ABC, abstractmethod
from typing import Any, TypeVar, Generic

T = TypeVar("T")


class CommandHandler(ABC, Generic[T]):
    """Write operation"""

    @abstractmethod
    async def execute(self, command: Any) -> T:
        """Execute the command and return a result of type T"""
        ...


class QueryHandler(ABC, Generic[T]):
    """Read operation; `query` is optional for parameterless reads"""

    @abstractmethod
    async def execute(self, query: Any = None) -> T:
        """Execute the query and return a result of type T"""
        ...
