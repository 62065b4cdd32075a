"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- database.py: the process-wide Database (owns the Prisma client)
- persistence/: Prisma repository implementations
- security/: password hashing
"""

from scaffold_api.infrastructure.database import Database

__all__ = ["Database"]
