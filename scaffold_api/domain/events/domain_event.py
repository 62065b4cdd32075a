"""
DomainEvent - Base contract every concrete event kind must satisfy.

Usage:
    @dataclass(frozen=True)
    class UserRegistered(DomainEvent):
        name: ClassVar[str] = "user.registered"
        user_id: str
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import ClassVar


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DomainEvent(ABC):
    # Constant per event kind, used for identification and routing
    name: ClassVar[str]
    created_at: datetime = field(default_factory=_utcnow, kw_only=True)

    def __post_init__(self):
        if type(self) is DomainEvent:
            raise TypeError("DomainEvent is abstract; subclass it with a name")
        if not isinstance(getattr(type(self), "name", None), str) or not type(self).name:
            raise TypeError(f"{type(self).__name__} must define a non-empty class-level name")
