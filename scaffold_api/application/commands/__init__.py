"""
Commands - Write operations (CQRS pattern).

- auth/ → RegisterUserUseCase, RegisterUserHandler
"""
