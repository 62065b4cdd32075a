"""GraphQL resolvers - thin adapters between the schema and use cases."""

from scaffold_api.presentation.graphql.resolvers.auth import AuthResolver

__all__ = ["AuthResolver"]
