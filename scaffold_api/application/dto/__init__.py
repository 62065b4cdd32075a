"""
DTOs - Data Transfer Objects

- hello.py    → SayHelloRequestDto, HelloResponseDto
- auth.py     → SignUpInputDto, SignUpArgsDto
- user.py     → UserDto
- app_info.py → AppInfoDto, HealthCheckDto

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from scaffold_api.application.dto.hello import HelloResponseDto, SayHelloRequestDto
from scaffold_api.application.dto.auth import SignUpArgsDto, SignUpInputDto
from scaffold_api.application.dto.user import UserDto
from scaffold_api.application.dto.app_info import (
    AppInfoDto,
    AppSettingsDto,
    DatabaseHealthDto,
    HealthCheckDto,
)

__all__ = [
    "HelloResponseDto",
    "SayHelloRequestDto",
    "SignUpArgsDto",
    "SignUpInputDto",
    "UserDto",
    "AppInfoDto",
    "AppSettingsDto",
    "DatabaseHealthDto",
    "HealthCheckDto",
]
