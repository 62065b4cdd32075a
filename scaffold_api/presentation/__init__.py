"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI REST routers
- graphql/: Strawberry schema, types and resolvers
- middleware.py: correlation ID propagation
"""
