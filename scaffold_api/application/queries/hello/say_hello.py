"""SayHello - Greets the name from an already validated request."""

from scaffold_api.application.common.interfaces import QueryHandler
from scaffold_api.application.dto.hello import HelloResponseDto, SayHelloRequestDto
from scaffold_api.domain.services.hello_service import HelloService


class SayHelloHandler(QueryHandler[HelloResponseDto]):
    def __init__(self, hello_service: HelloService):
        self._hello_service = hello_service

    async def execute(self, query: SayHelloRequestDto) -> HelloResponseDto:
        return HelloResponseDto.of(self._hello_service.say_hello(query.name))
