"""Strawberry object and input types."""

from datetime import datetime

import strawberry

from scaffold_api.application.dto.app_info import AppInfoDto, HealthCheckDto
from scaffold_api.application.dto.user import UserDto
from scaffold_api.domain.entities.user import UserRole, UserStatus

strawberry.enum(UserRole, description="User roles defining permission levels within the system")
strawberry.enum(
    UserStatus,
    description="User account status indicating the current state of the user account",
)


@strawberry.input(name="SignUpInput")
class SignUpInput:
    email: str
    user_name: str
    password: str

    def to_payload(self) -> dict[str, str]:
        """Raw payload for SignUpArgsDto validation (aliases are camelCase)."""
        return {
            "input": {
                "email": self.email,
                "userName": self.user_name,
                "password": self.password,
            }
        }


@strawberry.type(name="User", description="Register user data")
class UserType:
    id: str = strawberry.field(description="User unique identifier")
    email: str = strawberry.field(description="User email address")
    user_name: str = strawberry.field(description="User name")
    status: UserStatus = strawberry.field(description="User status")
    role: UserRole = strawberry.field(description="User role")
    created_at: datetime = strawberry.field(description="User account creation date")
    updated_at: datetime = strawberry.field(description="User account last update date")

    @classmethod
    def from_dto(cls, dto: UserDto) -> "UserType":
        return cls(
            id=dto.id,
            email=dto.email,
            user_name=dto.user_name,
            status=dto.status,
            role=dto.role,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


@strawberry.type(name="AppInfo")
class AppInfoType:
    message: str
    name: str
    version: str
    correlation_id: str

    @classmethod
    def from_dto(cls, dto: AppInfoDto) -> "AppInfoType":
        return cls(**dto.model_dump())


@strawberry.type(name="DatabaseHealth")
class DatabaseHealthType:
    status: str
    message: str


@strawberry.type(name="HealthCheck")
class HealthCheckType:
    status: str
    timestamp: str
    database: DatabaseHealthType
    name: str
    version: str
    correlation_id: str

    @classmethod
    def from_dto(cls, dto: HealthCheckDto) -> "HealthCheckType":
        return cls(
            status=dto.status,
            timestamp=dto.timestamp,
            database=DatabaseHealthType(
                status=dto.database.status, message=dto.database.message
            ),
            name=dto.name,
            version=dto.version,
            correlation_id=dto.correlation_id,
        )
