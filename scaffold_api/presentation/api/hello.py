"""Hello API Router - greeting endpoints."""

from fastapi import APIRouter
from dishka.integrations.fastapi import FromDishka, inject

from scaffold_api.application.dto.hello import HelloResponseDto, SayHelloRequestDto
from scaffold_api.application.queries.hello import GetHelloHandler, SayHelloHandler

router = APIRouter(prefix="/hello", tags=["hello"])


@router.get("", response_model=HelloResponseDto)
@inject
async def hello(handler: FromDishka[GetHelloHandler]):
    return await handler.execute()


@router.post("/say", response_model=HelloResponseDto)
@inject
async def say_hello(
    body: SayHelloRequestDto,
    handler: FromDishka[SayHelloHandler],
):
    """
    Greet the given name.

    An empty or missing name is rejected with 400 before the handler runs.
    """
    return await handler.execute(body)
