"""
PORTS - Interfaces that infrastructure implements

- repositories/      → Data persistence interfaces
- password_hasher.py → Password hashing interface
- health_probe.py    → Backing-service health interface
"""

from scaffold_api.domain.ports.health_probe import HealthProbe
from scaffold_api.domain.ports.password_hasher import PasswordHasher
from scaffold_api.domain.ports.repositories import UserRepository

__all__ = ["HealthProbe", "PasswordHasher", "UserRepository"]
