"""Security adapters."""

from scaffold_api.infrastructure.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)

__all__ = ["BcryptPasswordHasher"]
