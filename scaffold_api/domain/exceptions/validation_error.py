"""
RequestValidationError - Raised when input fails field validation.
Maps to: HTTP 400 Bad Request
"""

from dataclasses import asdict, dataclass

from scaffold_api.domain.exceptions.base import DomainError


@dataclass(frozen=True)
class Violation:
    field: str  # dotted location, e.g. "input.password"
    rule: str
    message: str


class RequestValidationError(DomainError):
    """Carries every failing field, not just the first."""

    code = "VALIDATION_ERROR"
    status_code = 400

    def __init__(self, violations: list[Violation], message: str = "Validation failed"):
        super().__init__(
            message, extensions={"errors": [asdict(v) for v in violations]}
        )
        self.violations = list(violations)

    @property
    def fields(self) -> set[str]:
        return {v.field for v in self.violations}
