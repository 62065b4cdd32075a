"""
GetHealth - Application health including database reachability.

The overall status stays "ok" when the database is down; the database entry
carries its own status so orchestrators can tell liveness from readiness.
"""

from datetime import datetime, timezone

from scaffold_api import __app_name__, __version__
from scaffold_api.application.common.interfaces import QueryHandler
from scaffold_api.application.dto.app_info import DatabaseHealthDto, HealthCheckDto
from scaffold_api.config.logging_config import correlation_id_var
from scaffold_api.domain.ports.health_probe import HealthProbe


class GetHealthHandler(QueryHandler[HealthCheckDto]):
    def __init__(self, database: HealthProbe):
        self._database = database

    async def execute(self, query=None) -> HealthCheckDto:
        database = await self._database.health_check()
        return HealthCheckDto(
            status="ok",
            timestamp=datetime.now(timezone.utc).isoformat(),
            database=DatabaseHealthDto(**database),
            name=__app_name__,
            version=__version__,
            correlation_id=correlation_id_var.get(),
        )
