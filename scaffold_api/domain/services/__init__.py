"""Pure domain services."""

from scaffold_api.domain.services.hello_service import HelloService

__all__ = ["HelloService"]
