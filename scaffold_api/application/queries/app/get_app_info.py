"""
GetAppInfo / GetAppSettings - Static application metadata.
"""

from scaffold_api import __app_name__, __version__
from scaffold_api.application.common.interfaces import QueryHandler
from scaffold_api.application.dto.app_info import AppInfoDto, AppSettingsDto
from scaffold_api.config.logging_config import correlation_id_var
from scaffold_api.config.settings import AppConfig

WELCOME_MESSAGE = "Welcome to the scaffold API"


class GetAppInfoHandler(QueryHandler[AppInfoDto]):
    async def execute(self, query=None) -> AppInfoDto:
        return AppInfoDto(
            message=WELCOME_MESSAGE,
            name=__app_name__,
            version=__version__,
            correlation_id=correlation_id_var.get(),
        )


class GetAppSettingsHandler(QueryHandler[AppSettingsDto]):
    def __init__(self, app_config: AppConfig):
        self._app_config = app_config

    async def execute(self, query=None) -> AppSettingsDto:
        return AppSettingsDto(
            name=__app_name__,
            version=__version__,
            environment=self._app_config.environment,
        )
