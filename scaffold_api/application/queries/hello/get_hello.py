"""GetHello - Default greeting."""

from scaffold_api.application.common.interfaces import QueryHandler
from scaffold_api.application.dto.hello import HelloResponseDto
from scaffold_api.domain.services.hello_service import HelloService


class GetHelloHandler(QueryHandler[HelloResponseDto]):
    def __init__(self, hello_service: HelloService):
        self._hello_service = hello_service

    async def execute(self, query=None) -> HelloResponseDto:
        return HelloResponseDto.of(self._hello_service.get_hello_message())
