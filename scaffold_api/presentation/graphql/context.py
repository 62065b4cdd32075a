"""
GraphQL context.

Exposes the request-scoped dishka container (set by setup_dishka's
middleware) so resolvers can pull their dependencies from it.
"""

from typing import Any, TypeVar

from fastapi import Request
from strawberry.types import Info

T = TypeVar("T")

DISHKA_CONTAINER = "dishka_container"


async def get_context(request: Request) -> dict[str, Any]:
    return {"request": request, DISHKA_CONTAINER: request.state.dishka_container}


async def resolve(info: Info, dependency: type[T]) -> T:
    """Fetch a dependency from the current request's container."""
    return await info.context[DISHKA_CONTAINER].get(dependency)
