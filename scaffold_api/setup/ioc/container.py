"""
Dishka DI Container Setup.

- Registers all dependencies (config, database, repositories, handlers, resolvers)
- Maps abstract interfaces to concrete implementations
- Manages lifecycle (Scope.APP = singleton, Scope.REQUEST = per-request)

Flow:
  Container → provides → PrismaUserRepository → to → RegisterUserHandler → to → AuthResolver
                                  ↓
                          uses the APP-scoped Database

Providers passed to create_container() after the defaults override them,
which is how tests swap in a fake Database or use case.
"""

from typing import AsyncIterable

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from scaffold_api.application.commands.auth import (
    RegisterUserHandler,
    RegisterUserUseCase,
)
from scaffold_api.application.queries.app import (
    GetAppInfoHandler,
    GetAppSettingsHandler,
    GetHealthHandler,
)
from scaffold_api.application.queries.hello import GetHelloHandler, SayHelloHandler
from scaffold_api.config.settings import (
    AppConfig,
    DatabaseConfig,
    get_app_config,
    get_database_config,
)
from scaffold_api.domain.ports.health_probe import HealthProbe
from scaffold_api.domain.ports.password_hasher import PasswordHasher
from scaffold_api.domain.ports.repositories import UserRepository
from scaffold_api.domain.services.hello_service import HelloService
from scaffold_api.infrastructure.database import Database
from scaffold_api.infrastructure.persistence import PrismaUserRepository
from scaffold_api.infrastructure.security import BcryptPasswordHasher
from scaffold_api.presentation.graphql.resolvers import AuthResolver


class ConfigProvider(Provider):
    """Configuration read once per process."""

    @provide(scope=Scope.APP)
    def get_app_config(self) -> AppConfig:
        return get_app_config()

    @provide(scope=Scope.APP)
    def get_database_config(self) -> DatabaseConfig:
        return get_database_config()


class DatabaseProvider(Provider):
    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_database(self, config: DatabaseConfig) -> AsyncIterable[Database]:
        """
        Provide the Database (singleton, app-scoped).

        - Scope.APP = created ONCE, shared across all requests
        - connected on first resolution, disconnected when the container closes
        """
        database = Database.from_config(config)
        await database.connect()
        yield database
        await database.disconnect()

    @provide(scope=Scope.APP)
    def get_health_probe(self, database: Database) -> HealthProbe:
        return database


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers services, repositories, handlers and resolvers.
    """

    # ==================== SERVICES ====================

    @provide(scope=Scope.APP)
    def get_hello_service(self) -> HelloService:
        return HelloService()

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        return BcryptPasswordHasher()

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, database: Database) -> UserRepository:
        """
        - Return type is ABSTRACT (UserRepository)
        - Implementation is CONCRETE (PrismaUserRepository)
        """
        return PrismaUserRepository(database)

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_get_hello_handler(self, hello_service: HelloService) -> GetHelloHandler:
        return GetHelloHandler(hello_service)

    @provide(scope=Scope.REQUEST)
    def get_say_hello_handler(self, hello_service: HelloService) -> SayHelloHandler:
        return SayHelloHandler(hello_service)

    @provide(scope=Scope.REQUEST)
    def get_app_info_handler(self) -> GetAppInfoHandler:
        return GetAppInfoHandler()

    @provide(scope=Scope.REQUEST)
    def get_app_settings_handler(self, app_config: AppConfig) -> GetAppSettingsHandler:
        return GetAppSettingsHandler(app_config)

    @provide(scope=Scope.REQUEST)
    def get_health_handler(self, database: HealthProbe) -> GetHealthHandler:
        return GetHealthHandler(database)

    @provide(scope=Scope.REQUEST)
    def get_register_user_use_case(
        self, user_repository: UserRepository, password_hasher: PasswordHasher
    ) -> RegisterUserUseCase:
        return RegisterUserHandler(user_repository, password_hasher)

    # ==================== RESOLVERS ====================

    @provide(scope=Scope.REQUEST)
    def get_auth_resolver(self, register_user: RegisterUserUseCase) -> AuthResolver:
        return AuthResolver(register_user)


def create_container(*overrides: Provider) -> AsyncContainer:
    """
    Create and configure the DI container.

    Call this ONCE at app startup; `overrides` replace earlier registrations.
    """
    return make_async_container(
        ConfigProvider(), DatabaseProvider(), AppProvider(), *overrides
    )
