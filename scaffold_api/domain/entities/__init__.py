"""
ENTITIES - Business objects with identity
"""

from scaffold_api.domain.entities.user import User, UserRole, UserStatus

__all__ = [
    "User",
    "UserRole",
    "UserStatus",
]
