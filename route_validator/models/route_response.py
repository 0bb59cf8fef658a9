from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List
from route_validator.core.enums import ResponseKey
from route_validator.validation.base import ValidationError, ValidationResult


@dataclass
class RouteResponse:
    """
    Response handed back to the request layer

    Carries the ordered validation errors of a route request. A response with
    errors never carries a route.
    """
    errors: List[ValidationError] = field(default_factory=list)

    def add_error(self, error: ValidationError) -> "RouteResponse":
        self.errors.append(error)
        return self

    def add_errors(self, errors: Iterable[ValidationError]) -> "RouteResponse":
        self.errors.extend(errors)
        return self

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def get_errors(self) -> List[ValidationError]:
        return self.errors

    @classmethod
    def from_validation_result(cls, result: ValidationResult) -> "RouteResponse":
        return cls(errors=list(result.errors))

    def to_dict(self) -> Dict[str, Any]:
        return {
            ResponseKey.VALID.value: not self.has_errors(),
            ResponseKey.ERRORS.value: [error.to_dict() for error in self.errors],
        }
