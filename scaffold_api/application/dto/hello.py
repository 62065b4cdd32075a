"""Hello DTOs for API request/response."""

from pydantic import BaseModel, ConfigDict, Field

from scaffold_api.application.dto.rules import NonEmptyStr


class SayHelloRequestDto(BaseModel):
    name: NonEmptyStr = Field(description="Name to greet", examples=["Ada"])


class HelloResponseDto(BaseModel):
    model_config = ConfigDict(frozen=True)

    msg: str = Field(description="Hello message response", examples=["Hello, World!"])

    @classmethod
    def of(cls, message: str) -> "HelloResponseDto":
        """Build from a trusted internal message; no validation runs."""
        return cls.model_construct(msg=message)
