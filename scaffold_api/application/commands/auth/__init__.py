"""Auth commands."""

from scaffold_api.application.commands.auth.register_user import (
    RegisterUserHandler,
    RegisterUserUseCase,
)

__all__ = ["RegisterUserHandler", "RegisterUserUseCase"]
