"""Validator for per-point attribute lists (SRP: validates cardinality against the point count)"""
from typing import Any, Callable, Dict, Optional, Set
from route_validator.core.enums import HeadingPolicy, RequestField
from route_validator.validation.base import BaseValidator, ValidationResult, ValidationError
from route_validator.validation.enums import ValidationErrorType, ContextKey
from route_validator.validation.parameter_validators.heading_validator import HeadingValidator
from route_validator.validation.parameter_validators.curbside_validator import CurbsideValidator


AllowedLengths = Callable[[int], Set[int]]


class AlignedAttributeValidator(BaseValidator):
    """
    Validates an optional list aligned to the request points by index.

    The list is skipped when absent (None). When present its length must be in
    allowed_lengths(point_count); only then is each element passed to the
    element validator, so element errors always refer to a well-aligned list.
    """

    def __init__(
        self,
        parameter_name: str,
        display_name: str,
        count_error_type: ValidationErrorType,
        allowed_lengths: AllowedLengths,
        element_validator: Optional[BaseValidator] = None
    ):
        """
        Initialize aligned attribute validator.

        Args:
            parameter_name: Name of the request field holding the list
            display_name: Plural noun used in error messages (e.g. "headings")
            count_error_type: Error type emitted on a length mismatch
            allowed_lengths: Maps the point count to the set of accepted list lengths
            element_validator: Optional validator applied to each element
        """
        self._parameter_name = parameter_name
        self._display_name = display_name
        self._count_error_type = count_error_type
        self._allowed_lengths = allowed_lengths
        self._element_validator = element_validator

    @property
    def parameter_name(self) -> str:
        return self._parameter_name

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate attribute list.

        Args:
            value: Attribute list or None when absent
            context: Must hold the number of points under ContextKey.POINT_COUNT

        Returns:
            ValidationResult with validation status

        Raises:
            ValueError: If the point count is missing from the context
        """
        result = ValidationResult()

        if value is None:
            return result

        point_count = (context or {}).get(ContextKey.POINT_COUNT.value)
        if point_count is None:
            raise ValueError(
                f"{type(self).__name__} requires the point count under context key "
                f"'{ContextKey.POINT_COUNT.value}'"
            )

        actual = len(value)
        allowed = self._allowed_lengths(point_count)
        if actual not in allowed:
            expected = sorted(length for length in allowed if length > 0)
            points_noun = "point" if point_count == 1 else "points"
            error = ValidationError(
                error_type=self._count_error_type,
                message=(
                    f"Number of {self._display_name} ({actual}) must be "
                    f"{' or '.join(str(length) for length in expected)} for {point_count} {points_noun}"
                ),
                parameter_name=self._parameter_name,
                details={"expected": expected, "actual": actual}
            )
            result.add_error(error)
            return result

        if self._element_validator is not None:
            for i, element in enumerate(value):
                element_result = self._element_validator.validate(element, {ContextKey.INDEX.value: i})
                result.merge(element_result)

        return result


def heading_lengths(policy: HeadingPolicy) -> AllowedLengths:
    """
    Accepted heading counts for a heading policy.

    An empty list counts as absent. Under SINGLE_OR_PER_POINT a single heading
    applies to the first point only.
    """
    if policy == HeadingPolicy.PER_POINT:
        return lambda point_count: {0, point_count}
    return lambda point_count: {0, 1, point_count}


def per_point_lengths(point_count: int) -> Set[int]:
    """Exactly one value per point"""
    return {point_count}


def headings_validator(policy: HeadingPolicy = HeadingPolicy.SINGLE_OR_PER_POINT) -> AlignedAttributeValidator:
    """Aligned validator for the headings field"""
    return AlignedAttributeValidator(
        parameter_name=RequestField.HEADINGS.value,
        display_name="headings",
        count_error_type=ValidationErrorType.HEADING_COUNT_MISMATCH,
        allowed_lengths=heading_lengths(policy),
        element_validator=HeadingValidator()
    )


def curbsides_validator() -> AlignedAttributeValidator:
    """Aligned validator for the curbsides field"""
    return AlignedAttributeValidator(
        parameter_name=RequestField.CURBSIDES.value,
        display_name="curbsides",
        count_error_type=ValidationErrorType.CURBSIDE_COUNT_MISMATCH,
        allowed_lengths=per_point_lengths,
        element_validator=CurbsideValidator()
    )


def point_hints_validator() -> AlignedAttributeValidator:
    """Aligned validator for the point_hints field"""
    return AlignedAttributeValidator(
        parameter_name=RequestField.POINT_HINTS.value,
        display_name="point hints",
        count_error_type=ValidationErrorType.POINT_HINT_COUNT_MISMATCH,
        allowed_lengths=per_point_lengths
    )
