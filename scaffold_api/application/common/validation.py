"""
Validation pipeline.

`validate()` turns an untyped payload into either a typed DTO or the full list
of violations, without raising. Field rules live in `application.dto.rules`;
when one field breaks several rules each one becomes its own Violation.
"""

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Optional, Sequence, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel

from scaffold_api.domain.exceptions import RequestValidationError, Violation

M = TypeVar("M", bound=BaseModel)

# Error type raised by field rules; ctx["failures"] holds (rule, message) pairs
FIELD_RULES_ERROR = "field_rules"

# pydantic's built-in error types, renamed to our rule codes
_PYDANTIC_RULES = {
    "string_type": "is_string",
    "model_type": "is_object",
    "model_attributes_type": "is_object",
    "dict_type": "is_object",
    "missing": "missing",
}


def _location(loc: Sequence[Any], strip_prefix: Sequence[str]) -> str:
    # Field names are reported in their camelCase wire spelling, however they were sent
    parts = [to_camel(part) if isinstance(part, str) and "_" in part else str(part) for part in loc]
    if parts and parts[0] in strip_prefix:
        parts = parts[1:]
    return ".".join(parts)


def violations_from_errors(
    errors: Iterable[dict[str, Any]], strip_prefix: Sequence[str] = ("body",)
) -> list[Violation]:
    """Flatten pydantic/FastAPI error dicts into Violations."""
    violations: list[Violation] = []
    for error in errors:
        field = _location(error.get("loc", ()), strip_prefix)
        ctx = error.get("ctx") or {}
        if error.get("type") == FIELD_RULES_ERROR and "failures" in ctx:
            violations.extend(
                Violation(field=field, rule=rule, message=message)
                for rule, message in ctx["failures"]
            )
            continue
        error_type = error.get("type", "invalid")
        violations.append(
            Violation(
                field=field,
                rule=_PYDANTIC_RULES.get(error_type, error_type),
                message=error.get("msg", "Invalid value"),
            )
        )
    return violations


@dataclass(frozen=True)
class ValidationResult(Generic[M]):
    value: Optional[M] = None
    violations: tuple[Violation, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.violations

    def unwrap(self) -> M:
        """Return the validated value or raise RequestValidationError."""
        if self.violations:
            raise RequestValidationError(list(self.violations))
        return self.value


def validate(model: type[M], payload: Any) -> ValidationResult[M]:
    try:
        return ValidationResult(value=model.model_validate(payload))
    except ValidationError as exc:
        return ValidationResult(
            violations=tuple(violations_from_errors(exc.errors(), strip_prefix=()))
        )
