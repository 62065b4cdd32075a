"""
DOMAIN EVENTS - Records of something that happened in the domain.

Only the contract lives here; nothing publishes or subscribes yet.
"""

from scaffold_api.domain.events.domain_event import DomainEvent

__all__ = ["DomainEvent"]
