"""
Database module - owns the single ORM client shared by the whole process.

`Database` is constructed explicitly and handed out by the DI container at
APP scope, so every repository in every request works against the same
client. Tests pass a fake client instead of patching anything global.
"""

import logging
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from scaffold_api.config.settings import DatabaseConfig
from scaffold_api.domain.ports.health_probe import HealthProbe

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)


class Database(HealthProbe):
    def __init__(self, client: "Prisma | Any"):
        self._client = client

    @classmethod
    def from_config(cls, config: DatabaseConfig) -> "Database":
        # Generated by `prisma generate`; imported here so the package imports without it
        from prisma import Prisma

        options: dict[str, Any] = {
            "log_queries": config.logging,
            "connect_timeout": timedelta(seconds=config.connect_timeout),
        }
        if config.url:
            options["datasource"] = {"url": config.url}
        return cls(Prisma(**options))

    @property
    def client(self) -> "Prisma | Any":
        return self._client

    def is_connected(self) -> bool:
        return self._client.is_connected()

    async def connect(self) -> None:
        if self.is_connected():
            return
        try:
            await self._client.connect()
        except Exception as e:
            logger.error(f"Failed to connect to database: {e}")
            raise
        logger.info("Database connection established")

    async def disconnect(self) -> None:
        if not self.is_connected():
            return
        try:
            await self._client.disconnect()
        except Exception as e:
            logger.error(f"Error while disconnecting from database: {e}")
            return
        logger.info("Database connection closed")

    async def health_check(self) -> dict[str, str]:
        try:
            await self._client.query_raw("SELECT 1")
        except Exception as e:
            return {"status": "error", "message": str(e) or "Database health check failed"}
        return {"status": "ok", "message": "Database connection is healthy"}
