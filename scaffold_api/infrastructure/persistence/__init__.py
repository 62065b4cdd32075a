"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports.
"""

from scaffold_api.infrastructure.persistence.prisma_user_repository import (
    PrismaUserRepository,
)

__all__ = ["PrismaUserRepository"]
