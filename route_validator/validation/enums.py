"""Validation enums for type-safe validation"""
from enum import Enum


class ValidationErrorType(Enum):
    """Types of validation errors"""
    MISSING_POINTS = "missing_points"
    NULL_POINT = "null_point"
    OUT_OF_BOUNDS = "out_of_bounds"
    HEADING_COUNT_MISMATCH = "heading_count_mismatch"
    HEADING_OUT_OF_RANGE = "heading_out_of_range"
    CURBSIDE_COUNT_MISMATCH = "curbside_count_mismatch"
    INVALID_CURBSIDE_VALUE = "invalid_curbside_value"
    POINT_HINT_COUNT_MISMATCH = "point_hint_count_mismatch"
    INVALID_TYPE = "invalid_type"


class ContextKey(Enum):
    """Keys of the validation context dictionary"""
    EXTENT = "extent"
    POINT_COUNT = "point_count"
    INDEX = "index"
