"""API request/response models using Pydantic for type safety and validation in Flask"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class RouteRequestSchema(BaseModel):
    """
    Route validation request model.

    Only the container shape is checked here: each field must be a list.
    Elements are passed through untouched so that coordinates are parsed by
    RouteRequest.from_dict and headings, curbsides and bounds are reported by
    RouteRequestValidator with their field and index.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "points": [[52.52, 13.40], {"lat": 52.51, "lon": 13.38}],
                "headings": [90.0, None],
                "curbsides": ["right", "any"],
                "point_hints": ["Unter den Linden", ""]
            }
        }
    )

    points: List[Any] = Field(
        default_factory=list,
        description="Waypoints as [lat, lon] pairs or {lat, lon} objects; null marks a missing point"
    )
    headings: Optional[List[Any]] = Field(
        default=None,
        description="Headings in degrees clockwise from north, null for no preference"
    )
    curbsides: Optional[List[Any]] = Field(
        default=None,
        description="Curbside per point: left, right, any or unspecified"
    )
    point_hints: Optional[List[Any]] = Field(
        default=None,
        description="Free-text hint per point, e.g. a street name"
    )

    def to_payload(self) -> Dict[str, Any]:
        """Convert to the dictionary shape read by RouteRequest.from_dict"""
        return self.model_dump()


class ValidationErrorSchema(BaseModel):
    """Single attributed validation error"""
    type: str = Field(..., description="Validation error type")
    message: str = Field(..., description="Human-readable error message")
    field: Optional[str] = Field(default=None, description="Request field that failed validation")
    index: Optional[int] = Field(default=None, description="0-based index of the offending element")
    details: Dict[str, Any] = Field(default_factory=dict, description="Expected/actual values")


class RouteValidationResponse(BaseModel):
    """Route validation response model"""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "valid": False,
                "errors": [
                    {
                        "type": "heading_count_mismatch",
                        "message": "Number of headings (2) must be 1 or 3 for 3 points",
                        "field": "headings",
                        "index": None,
                        "details": {"expected": [1, 3], "actual": 2}
                    }
                ]
            }
        }
    )

    valid: bool = Field(..., description="Whether the request passed validation")
    errors: List[ValidationErrorSchema] = Field(default_factory=list, description="Ordered validation errors")


class ExtentResponse(BaseModel):
    """Geographic extent of the served graph"""
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float


class ErrorResponse(BaseModel):
    """
    Standard error response model for type safety.

    Returned by endpoint error handler on malformed requests or processing errors.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Cannot parse 'points[1]': point must be a [lat, lon] pair, got 3 values",
                "error_type": "RequestParsingError"
            }
        }
    )

    error: str = Field(..., description="Error message")
    error_type: Optional[str] = Field(default=None, description="Error type/class name")
