"""
User Entity - A registered account.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class UserRole(str, Enum):
    """User roles defining permission levels within the system"""

    ADMIN = "ADMIN"
    USER = "USER"


class UserStatus(str, Enum):
    """User account status indicating the current state of the user account"""

    REGISTERED = "REGISTERED"
    ACTIVE = "ACTIVE"
    BANNED = "BANNED"
    INACTIVE = "INACTIVE"


@dataclass
class User:
    id: str
    email: str
    user_name: str
    password_hash: str
    status: UserStatus
    role: UserRole
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        if not self.email or "@" not in self.email:
            raise ValueError(f"Invalid user email: {self.email}")
        if not self.user_name:
            raise ValueError("User name cannot be empty")
