"""
Reusable field rules for DTOs.

Each rule is a pure check with a stable code. `Email`, `UserName`, `Password`
and `NonEmptyStr` compose them into annotated string types:

    class SignUpInputDto(BaseModel):
        email: Email
        password: Password
"""

import re
from dataclasses import dataclass
from typing import Annotated, Any, Callable

from pydantic import AfterValidator, BeforeValidator
from pydantic_core import PydanticCustomError

from scaffold_api.application.common.validation import FIELD_RULES_ERROR

PASSWORD_SPECIALS = ".-_@!#$"


@dataclass(frozen=True)
class Rule:
    code: str
    message: str
    check: Callable[[str], bool]


def matches(pattern: str) -> Callable[[str], bool]:
    compiled = re.compile(pattern)
    return lambda value: compiled.search(value) is not None


NOT_EMPTY = Rule("not_empty", "should not be empty", lambda value: value != "")
IS_EMAIL = Rule(
    "is_email",
    "Email must be a valid email address",
    matches(r"^[^\s@]+@(?:[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?\.)+[A-Za-z]{2,}$"),
)
USER_NAME_CHARS = Rule(
    "allowed_chars",
    "Username can only contain alphanumeric characters and the special characters: . - _",
    matches(r"^[a-zA-Z0-9._-]+$"),
)
PASSWORD_LENGTH = Rule(
    "length",
    "Password must be between 6 and 16 characters long",
    lambda value: 6 <= len(value) <= 16,
)
PASSWORD_UPPERCASE = Rule(
    "has_uppercase",
    "Password must contain at least one uppercase letter (A-Z)",
    matches(r"[A-Z]"),
)
PASSWORD_DIGIT = Rule(
    "has_digit", "Password must contain at least one number (0-9)", matches(r"\d")
)
PASSWORD_SPECIAL = Rule(
    "has_special",
    f"Password must contain at least one special character ({PASSWORD_SPECIALS})",
    matches(r"[.\-_@!#$]"),
)
PASSWORD_CHARS = Rule(
    "allowed_chars",
    "Password can only contain alphanumeric characters and these special characters: "
    f"{PASSWORD_SPECIALS}",
    matches(r"^[a-zA-Z0-9.\-_@!#$]+$"),
)


def check(*rules: Rule, stop_after_empty: bool = True) -> AfterValidator:
    """
    Run every rule against the value and report all failures at once.

    With stop_after_empty, an empty value only reports `not_empty`.
    """

    def _validate(value: str) -> str:
        if stop_after_empty and NOT_EMPTY in rules and value == "":
            failing = [NOT_EMPTY]
        else:
            failing = [rule for rule in rules if not rule.check(value)]
        if failing:
            raise PydanticCustomError(
                FIELD_RULES_ERROR,
                "; ".join(rule.message for rule in failing),
                {"failures": [(rule.code, rule.message) for rule in failing]},
            )
        return value

    return AfterValidator(_validate)


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def _strip_lower(value: Any) -> Any:
    return value.strip().lower() if isinstance(value, str) else value


NonEmptyStr = Annotated[str, check(NOT_EMPTY)]
Email = Annotated[str, BeforeValidator(_strip_lower), check(NOT_EMPTY, IS_EMAIL)]
UserName = Annotated[str, BeforeValidator(_strip), check(NOT_EMPTY, USER_NAME_CHARS)]
Password = Annotated[
    str,
    BeforeValidator(_strip),
    check(
        NOT_EMPTY,
        PASSWORD_LENGTH,
        PASSWORD_UPPERCASE,
        PASSWORD_DIGIT,
        PASSWORD_SPECIAL,
        PASSWORD_CHARS,
    ),
]
