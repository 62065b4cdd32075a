"""Dishka DI container setup."""

from scaffold_api.setup.ioc.container import (
    AppProvider,
    ConfigProvider,
    DatabaseProvider,
    create_container,
)

__all__ = ["AppProvider", "ConfigProvider", "DatabaseProvider", "create_container"]
