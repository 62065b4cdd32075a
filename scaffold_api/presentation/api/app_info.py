"""Application API Router - info, health and settings."""

from fastapi import APIRouter
from dishka.integrations.fastapi import FromDishka, inject

from scaffold_api.application.dto.app_info import (
    AppInfoDto,
    AppSettingsDto,
    HealthCheckDto,
)
from scaffold_api.application.queries.app import (
    GetAppInfoHandler,
    GetAppSettingsHandler,
    GetHealthHandler,
)

router = APIRouter(prefix="/app", tags=["application"])


@router.get("", response_model=AppInfoDto)
@inject
async def get_app_info(handler: FromDishka[GetAppInfoHandler]):
    return await handler.execute()


@router.get("/health", response_model=HealthCheckDto)
@inject
async def get_health(handler: FromDishka[GetHealthHandler]):
    """Health check including database reachability."""
    return await handler.execute()


@router.get("/settings", response_model=AppSettingsDto)
@inject
async def get_settings(handler: FromDishka[GetAppSettingsHandler]):
    return await handler.execute()
