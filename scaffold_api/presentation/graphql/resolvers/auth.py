"""
AuthResolver - forwards signUp to the registration use case.

Input arrives already validated. The use case's result and errors pass
through untouched; mapping errors to responses belongs to the transport.
"""

from scaffold_api.application.commands.auth import RegisterUserUseCase
from scaffold_api.application.dto.auth import SignUpArgsDto
from scaffold_api.application.dto.user import UserDto


class AuthResolver:
    def __init__(self, register_user: RegisterUserUseCase):
        self._register_user = register_user

    async def sign_up(self, args: SignUpArgsDto) -> UserDto:
        return await self._register_user.execute(args)
