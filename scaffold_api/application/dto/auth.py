"""Auth DTOs for the signUp mutation."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from scaffold_api.application.dto.rules import Email, Password, UserName


class SignUpInputDto(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: Email = Field(description="Email address, stored lower-cased")
    user_name: UserName = Field(description="Unique user name")
    password: Password = Field(description="Plain text password, hashed before storage")


class SignUpArgsDto(BaseModel):
    input: SignUpInputDto
