"""
Health Probe Port - Reports whether a backing service is reachable.
Implementation: scaffold_api/infrastructure/database.py
"""

from abc import ABC, abstractmethod


class HealthProbe(ABC):
    @abstractmethod
    async def health_check(self) -> dict[str, str]:
        """Return {"status": "ok" | "error", "message": ...}; never raises."""
