"""GraphQL layer - Strawberry schema mounted on FastAPI."""

from scaffold_api.presentation.graphql.schema import build_schema, create_graphql_router

__all__ = ["build_schema", "create_graphql_router"]
