"""
Bcrypt Password Hasher - implements PasswordHasher.

bcrypt is CPU-bound, so hashing runs in a worker thread to keep the event
loop free.
"""

import asyncio

import bcrypt

from scaffold_api.domain.ports.password_hasher import PasswordHasher

DEFAULT_SALT_ROUNDS = 12


class BcryptPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = DEFAULT_SALT_ROUNDS):
        self._rounds = rounds

    async def hash(self, password: str) -> str:
        hashed = await asyncio.to_thread(
            bcrypt.hashpw, password.encode("utf-8"), bcrypt.gensalt(rounds=self._rounds)
        )
        return hashed.decode("utf-8")

    async def verify(self, password: str, password_hash: str) -> bool:
        return await asyncio.to_thread(
            bcrypt.checkpw, password.encode("utf-8"), password_hash.encode("utf-8")
        )
