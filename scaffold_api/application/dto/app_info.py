"""Application info and health DTOs."""

from typing import Literal

from pydantic import BaseModel


class AppInfoDto(BaseModel):
    message: str
    name: str
    version: str
    correlation_id: str


class AppSettingsDto(BaseModel):
    name: str
    version: str
    environment: str


class DatabaseHealthDto(BaseModel):
    status: Literal["ok", "error"]
    message: str


class HealthCheckDto(BaseModel):
    status: str
    timestamp: str
    database: DatabaseHealthDto
    name: str
    version: str
    correlation_id: str
