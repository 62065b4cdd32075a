"""Application info queries."""

from scaffold_api.application.queries.app.get_app_info import (
    GetAppInfoHandler,
    GetAppSettingsHandler,
)
from scaffold_api.application.queries.app.get_health import GetHealthHandler

__all__ = ["GetAppInfoHandler", "GetAppSettingsHandler", "GetHealthHandler"]
