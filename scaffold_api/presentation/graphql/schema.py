"""GraphQL application configuration."""

import logging
from typing import Optional

import strawberry
from graphql import GraphQLError
from strawberry.extensions import DisableIntrospection
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext, Info

from scaffold_api.application.common.validation import validate
from scaffold_api.application.dto.auth import SignUpArgsDto
from scaffold_api.application.queries.app import GetAppInfoHandler, GetHealthHandler
from scaffold_api.config.logging_config import correlation_id_var
from scaffold_api.config.settings import AppConfig
from scaffold_api.domain.exceptions import DomainError
from scaffold_api.presentation.graphql.context import get_context, resolve
from scaffold_api.presentation.graphql.resolvers import AuthResolver
from scaffold_api.presentation.graphql.types import (
    AppInfoType,
    HealthCheckType,
    SignUpInput,
    UserType,
)

logger = logging.getLogger(__name__)


@strawberry.type
class Query:
    @strawberry.field(description="Application name, version and welcome message")
    async def get_app_info(self, info: Info) -> AppInfoType:
        handler = await resolve(info, GetAppInfoHandler)
        return AppInfoType.from_dto(await handler.execute())

    @strawberry.field(description="Application health including database status")
    async def get_health(self, info: Info) -> HealthCheckType:
        handler = await resolve(info, GetHealthHandler)
        return HealthCheckType.from_dto(await handler.execute())


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Register a new user account")
    async def sign_up(self, info: Info, input: SignUpInput) -> UserType:
        args = validate(SignUpArgsDto, input.to_payload()).unwrap()
        resolver = await resolve(info, AuthResolver)
        return UserType.from_dto(await resolver.sign_up(args))


class AppSchema(strawberry.Schema):
    """Logs unexpected errors only and stamps every error with the correlation ID."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        correlation_id = correlation_id_var.get()
        for error in errors:
            if error.extensions is not None:
                error.extensions.setdefault("correlationId", correlation_id)
            if isinstance(error.original_error, DomainError):
                logger.debug(f"GraphQL domain error: {error.message}")
            else:
                logger.error(
                    f"GraphQL error: {error.message}",
                    exc_info=error.original_error,
                )


def build_schema(app_config: AppConfig) -> strawberry.Schema:
    # Introspection is disabled in production
    extensions = [DisableIntrospection()] if app_config.is_production else []
    return AppSchema(query=Query, mutation=Mutation, extensions=extensions)


def create_graphql_router(app_config: AppConfig) -> GraphQLRouter:
    return GraphQLRouter(
        build_schema(app_config),
        context_getter=get_context,
        graphql_ide=None if app_config.is_production else "graphiql",
    )
