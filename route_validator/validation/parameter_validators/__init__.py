"""Parameter validators for individual request fields"""
from route_validator.validation.parameter_validators.points_validator import PointsValidator
from route_validator.validation.parameter_validators.bounds_validator import BoundsValidator
from route_validator.validation.parameter_validators.heading_validator import HeadingValidator
from route_validator.validation.parameter_validators.curbside_validator import CurbsideValidator
from route_validator.validation.parameter_validators.aligned_attribute_validator import (
    AlignedAttributeValidator,
    heading_lengths,
    per_point_lengths,
    headings_validator,
    curbsides_validator,
    point_hints_validator,
)

__all__ = [
    "PointsValidator",
    "BoundsValidator",
    "HeadingValidator",
    "CurbsideValidator",
    "AlignedAttributeValidator",
    "heading_lengths",
    "per_point_lengths",
    "headings_validator",
    "curbsides_validator",
    "point_hints_validator",
]
