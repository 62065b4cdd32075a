"""
Tests for AuthResolver delegation.

Run with: pytest tests/test_auth_resolver.py -v
"""

import asyncio

import pytest

from scaffold_api.application.dto.auth import SignUpArgsDto
from scaffold_api.domain.exceptions import EmailAlreadyExistsError
from scaffold_api.presentation.graphql.resolvers import AuthResolver

from fakes import StubRegisterUser, make_user_dto


def _args() -> SignUpArgsDto:
    return SignUpArgsDto.model_validate(
        {"input": {"email": "ada@example.com", "userName": "ada", "password": "Secret1!"}}
    )


class TestSignUp:
    def test_returns_use_case_result_unchanged(self):
        user = make_user_dto()
        use_case = StubRegisterUser(result=user)
        args = _args()

        result = asyncio.run(AuthResolver(use_case).sign_up(args))

        assert result is user
        assert len(use_case.calls) == 1
        assert use_case.calls[0] is args

    def test_use_case_error_propagates_unchanged(self):
        error = EmailAlreadyExistsError("ada@example.com")
        use_case = StubRegisterUser(error=error)

        with pytest.raises(EmailAlreadyExistsError) as exc_info:
            asyncio.run(AuthResolver(use_case).sign_up(_args()))

        assert exc_info.value is error
        assert len(use_case.calls) == 1
