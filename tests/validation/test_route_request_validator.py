"""Tests for RouteRequestValidator: check order, error attribution and boundary behavior"""
import math
import random
import pytest

from route_validator.core import Curbside, HeadingPolicy
from route_validator.geometry import GeographicExtent, NodeCoordinateStore, Waypoint
from route_validator.models import RouteRequest
from route_validator.validation import (
    RouteRequestValidator,
    ValidationErrorType,
    ContextKey,
    validate_route_request,
)


def make_extent(min_lat: float, min_lon: float, max_lat: float, max_lon: float) -> GeographicExtent:
    """Build an extent from a minimal graph with two corner nodes"""
    store = NodeCoordinateStore()
    store.set_node(0, min_lat, min_lon)
    store.set_node(1, max_lat, max_lon)
    return GeographicExtent.from_node_access(store)


def make_request(*coords, **attributes) -> RouteRequest:
    points = [None if c is None else Waypoint(*c) for c in coords]
    return RouteRequest(points=points, **attributes)


def first_message(result) -> str:
    return result.errors[0].message.lower()


@pytest.fixture
def validator():
    return RouteRequestValidator()


@pytest.fixture
def extent():
    return make_extent(-5, -5, 5, 5)


def run(validator, request, extent):
    return validator.validate(request, {ContextKey.EXTENT.value: extent})


class TestPointPresence:
    """Empty requests are rejected and nothing else is checked"""

    def test_request_without_points_is_rejected(self, validator):
        """Test that a request with no points fails with a message about points"""
        result = run(validator, RouteRequest(), make_extent(-10, -10, 10, 10))

        assert not result.is_valid
        assert len(result.errors) == 1
        assert "point" in first_message(result)
        assert result.errors[0].error_type == ValidationErrorType.MISSING_POINTS

    def test_empty_request_stops_before_attribute_checks(self, validator, extent):
        """Test that attribute lists are not checked when there are no points"""
        request = RouteRequest(headings=[1.0, 2.0], curbsides=["left"], point_hints=["a", "b", "c"])

        result = run(validator, request, extent)

        assert [e.error_type for e in result.errors] == [ValidationErrorType.MISSING_POINTS]

    def test_empty_request_does_not_need_extent(self, validator):
        """Test that the structural tier runs before the extent is looked up"""
        result = validator.validate(RouteRequest(), {})

        assert result.errors[0].error_type == ValidationErrorType.MISSING_POINTS


class TestNullPoints:
    """Null point slots are reported with their index"""

    def test_null_point_in_middle(self, validator):
        """Test that a null point in the middle is detected with its index"""
        request = make_request((0.0, 0.0), None, (1.0, 1.0))

        result = run(validator, request, make_extent(-5, -5, 5, 5))

        assert not result.is_valid
        message = first_message(result)
        assert "null" in message and "point" in message
        assert result.errors[0].index == 1

    @pytest.mark.parametrize("null_index", [0, 1, 2])
    def test_null_point_at_any_position(self, validator, extent, null_index):
        """Test that null detection works for first, middle and last slot"""
        coords = [(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)]
        coords[null_index] = None

        result = run(validator, make_request(*coords), extent)

        assert [e.index for e in result.errors] == [null_index]
        assert result.errors[0].error_type == ValidationErrorType.NULL_POINT

    def test_all_null_points_are_reported(self, validator, extent):
        """Test that scanning continues after the first null slot"""
        request = make_request(None, (0.0, 0.0), None, None)

        result = run(validator, request, extent)

        assert [e.index for e in result.errors] == [0, 2, 3]
        for error in result.errors:
            assert "null" in error.message.lower()
            assert "point" in error.message.lower()

    def test_null_points_stop_further_checks(self, validator, extent):
        """Test that bounds and attribute checks do not run when a slot is null"""
        request = make_request(None, (50.0, 50.0), headings=[1.0, 2.0, 3.0], point_hints=["x"])

        result = run(validator, request, extent)

        assert [e.error_type for e in result.errors] == [ValidationErrorType.NULL_POINT]


class TestBounds:
    """Points must lie inside the graph extent, boundary included"""

    def test_point_outside_graph_bounds(self, validator):
        """Test that a point far outside the extent is rejected with its index"""
        request = make_request((0.0, 0.0), (50.0, 50.0))

        result = run(validator, request, make_extent(-2, -2, 2, 2))

        assert not result.is_valid
        message = first_message(result)
        assert "bound" in message or "outside" in message
        assert result.errors[0].index == 1
        assert result.errors[0].details == {"lat": 50.0, "lon": 50.0}

    def test_every_point_outside_is_reported(self, validator, extent):
        """Test that bounds errors accumulate over all points"""
        request = make_request((10.0, 0.0), (0.0, 0.0), (0.0, -10.0), (-6.0, 6.0))

        result = run(validator, request, extent)

        assert [e.index for e in result.errors] == [0, 2, 3]
        assert all(e.error_type == ValidationErrorType.OUT_OF_BOUNDS for e in result.errors)

    @pytest.mark.parametrize("lat, lon", [
        (-5.0, -5.0), (5.0, 5.0), (-5.0, 5.0), (5.0, -5.0),
        (-5.0, 0.0), (5.0, 0.0), (0.0, -5.0), (0.0, 5.0),
    ])
    def test_points_on_boundary_are_accepted(self, validator, extent, lat, lon):
        """Test that containment is inclusive on all four sides"""
        result = run(validator, make_request((lat, lon)), extent)

        assert result.is_valid

    @pytest.mark.parametrize("lat, lon", [
        (-5.000001, 0.0), (5.000001, 0.0), (0.0, -5.000001), (0.0, 5.000001),
    ])
    def test_points_just_outside_boundary_are_rejected(self, validator, extent, lat, lon):
        """Test each side just beyond the boundary"""
        result = run(validator, make_request((lat, lon)), extent)

        assert [e.error_type for e in result.errors] == [ValidationErrorType.OUT_OF_BOUNDS]

    def test_nan_coordinates_are_outside(self, validator, extent):
        """Test that a point with NaN coordinates is never inside"""
        result = run(validator, make_request((math.nan, 0.0)), extent)

        assert result.errors[0].error_type == ValidationErrorType.OUT_OF_BOUNDS

    def test_missing_extent_raises(self, validator):
        """Test that validating points without an extent is a caller error"""
        with pytest.raises(ValueError) as exc_info:
            validator.validate(make_request((0.0, 0.0)), {})

        assert "extent" in str(exc_info.value)


class TestHeadings:
    """Heading count and range checks"""

    def test_heading_count_mismatch(self, validator, extent):
        """Test that 2 headings for 3 points are rejected with expected and actual counts"""
        request = make_request((0.0, 0.0), (1.0, 1.0), (2.0, 2.0), headings=[45.0, 90.0])

        result = run(validator, request, extent)

        assert not result.is_valid
        error = result.errors[0]
        assert "heading" in error.message.lower()
        assert error.error_type == ValidationErrorType.HEADING_COUNT_MISMATCH
        assert error.details == {"expected": [1, 3], "actual": 2}
        assert "1 or 3" in error.message
        assert "(2)" in error.message

    def test_heading_per_point_accepted(self, validator, extent):
        """Test that one heading per point is accepted"""
        request = make_request((0.0, 0.0), (1.0, 1.0), headings=[0.0, 359.999])

        assert run(validator, request, extent).is_valid

    def test_single_heading_for_several_points_accepted_by_default(self, validator, extent):
        """Test that a single departure heading is accepted under the default policy"""
        request = make_request((0.0, 0.0), (1.0, 1.0), (2.0, 2.0), headings=[90.0])

        assert validator.heading_policy == HeadingPolicy.SINGLE_OR_PER_POINT
        assert run(validator, request, extent).is_valid

    def test_single_heading_for_several_points_rejected_by_per_point_policy(self, extent):
        """Test that the per-point policy requires exactly one heading per point"""
        validator = RouteRequestValidator(HeadingPolicy.PER_POINT)
        request = make_request((0.0, 0.0), (1.0, 1.0), (2.0, 2.0), headings=[90.0])

        result = run(validator, request, extent)

        assert result.errors[0].error_type == ValidationErrorType.HEADING_COUNT_MISMATCH
        assert result.errors[0].details == {"expected": [3], "actual": 1}

    def test_per_point_policy_accepts_full_list(self, extent):
        validator = RouteRequestValidator(HeadingPolicy.PER_POINT)
        request = make_request((0.0, 0.0), (1.0, 1.0), headings=[10.0, 20.0])

        assert run(validator, request, extent).is_valid

    def test_empty_heading_list_is_treated_as_absent(self, validator, extent):
        request = make_request((0.0, 0.0), (1.0, 1.0), headings=[])

        assert run(validator, request, extent).is_valid

    def test_too_many_headings_rejected(self, validator, extent):
        request = make_request((0.0, 0.0), (1.0, 1.0), headings=[1.0, 2.0, 3.0])

        result = run(validator, request, extent)

        assert result.errors[0].details == {"expected": [1, 2], "actual": 3}

    def test_negative_heading_rejected(self, validator, extent):
        """Test that -45 degrees is outside [0, 360)"""
        request = make_request((0.0, 0.0), (1.0, 1.0), headings=[-45.0, 90.0])

        result = run(validator, request, extent)

        assert not result.is_valid
        assert result.errors[0].error_type == ValidationErrorType.HEADING_OUT_OF_RANGE
        assert result.errors[0].index == 0

    def test_heading_above_range_rejected(self, validator, extent):
        """Test that 400 degrees is rejected and the message names the heading"""
        request = make_request((0.0, 0.0), (1.0, 1.0), headings=[90.0, 400.0])

        result = run(validator, request, extent)

        assert not result.is_valid
        message = first_message(result)
        assert "heading" in message or "azimuth" in message
        assert result.errors[0].index == 1
        assert result.errors[0].details == {"value": 400.0}

    @pytest.mark.parametrize("heading", [0.0, 359.999, 180.0, math.nan])
    def test_valid_heading_values(self, validator, extent, heading):
        """Test lower bound, values below 360 and the NaN sentinel"""
        request = make_request((0.0, 0.0), headings=[heading])

        assert run(validator, request, extent).is_valid

    @pytest.mark.parametrize("heading", [360.0, -0.001, -45.0, 400.0, math.inf, -math.inf])
    def test_invalid_heading_values(self, validator, extent, heading):
        """Test that 360 itself is excluded along with other out-of-range values"""
        request = make_request((0.0, 0.0), headings=[heading])

        result = run(validator, request, extent)

        assert [e.error_type for e in result.errors] == [ValidationErrorType.HEADING_OUT_OF_RANGE]

    def test_every_out_of_range_heading_is_reported(self, validator, extent):
        request = make_request((0.0, 0.0), (1.0, 1.0), (2.0, 2.0), headings=[-1.0, 10.0, 360.0])

        result = run(validator, request, extent)

        assert [e.index for e in result.errors] == [0, 2]

    def test_range_not_checked_when_count_is_wrong(self, validator, extent):
        """Test that element checks only run on a well-aligned list"""
        request = make_request((0.0, 0.0), (1.0, 1.0), (2.0, 2.0), headings=[400.0, 500.0])

        result = run(validator, request, extent)

        assert [e.error_type for e in result.errors] == [ValidationErrorType.HEADING_COUNT_MISMATCH]

    def test_non_numeric_heading_reported(self, validator, extent):
        request = make_request((0.0, 0.0), headings=["north"])

        result = run(validator, request, extent)

        assert result.errors[0].error_type == ValidationErrorType.INVALID_TYPE
        assert "heading" in first_message(result)


class TestCurbsides:
    """Curbside count and vocabulary checks"""

    def test_curbside_count_mismatch_with_random_points(self, validator):
        """Test that N-1 curbsides for a random number of random points are rejected"""
        rng = random.Random(12345)
        point_count = rng.randint(3, 6)
        points = [
            Waypoint(round(rng.uniform(-8, 8), 4), round(rng.uniform(-8, 8), 4))
            for _ in range(point_count)
        ]
        curbsides = [rng.choice(["left", "right", "any"]) for _ in range(point_count - 1)]
        request = RouteRequest(points=points, curbsides=curbsides)

        result = run(validator, request, make_extent(-10, -10, 10, 10))

        assert not result.is_valid, f"{len(curbsides)} curbsides for {len(points)} points"
        assert "curbside" in first_message(result)
        assert result.errors[0].details == {"expected": [point_count], "actual": point_count - 1}

    def test_single_curbside_for_several_points_rejected(self, validator, extent):
        """Test that curbsides have no single-value shorthand"""
        request = make_request((0.0, 0.0), (1.0, 1.0), curbsides=["left"])

        result = run(validator, request, extent)

        assert result.errors[0].error_type == ValidationErrorType.CURBSIDE_COUNT_MISMATCH

    def test_empty_curbside_list_rejected(self, validator, extent):
        request = make_request((0.0, 0.0), curbsides=[])

        result = run(validator, request, extent)

        assert result.errors[0].error_type == ValidationErrorType.CURBSIDE_COUNT_MISMATCH

    def test_all_curbside_values_accepted(self, validator, extent):
        request = make_request(
            (0.0, 0.0), (1.0, 1.0), (2.0, 2.0), (3.0, 3.0),
            curbsides=["left", "right", "any", "unspecified"]
        )

        assert run(validator, request, extent).is_valid

    def test_curbside_enum_members_accepted(self, validator, extent):
        request = make_request((0.0, 0.0), (1.0, 1.0), curbsides=[Curbside.LEFT, Curbside.ANY])

        assert run(validator, request, extent).is_valid

    def test_unknown_curbside_value_reported_with_index(self, validator, extent):
        request = make_request((0.0, 0.0), (1.0, 1.0), curbsides=["left", "sideways"])

        result = run(validator, request, extent)

        error = result.errors[0]
        assert error.error_type == ValidationErrorType.INVALID_CURBSIDE_VALUE
        assert error.index == 1
        assert "curbside" in error.message.lower()
        assert "sideways" in error.message

    @pytest.mark.parametrize("value", ["LEFT", "", None, 1])
    def test_curbside_vocabulary_is_closed(self, validator, extent, value):
        request = make_request((0.0, 0.0), curbsides=[value])

        result = run(validator, request, extent)

        assert [e.error_type for e in result.errors] == [ValidationErrorType.INVALID_CURBSIDE_VALUE]


class TestPointHints:
    """Point hint count checks"""

    def test_more_hints_than_points(self, validator):
        """Test that 4 hints for 2 points are rejected"""
        request = make_request(
            (0.0, 0.0), (1.0, 1.0),
            point_hints=["Rue Sherbrooke", "Avenue du Parc", "Rue Peel", "Boulevard Rosemont"]
        )

        result = run(validator, request, make_extent(-10, -10, 10, 10))

        assert not result.is_valid
        assert "hint" in first_message(result)

    def test_fewer_hints_than_points(self, validator):
        """Test that 2 hints for 5 random points are rejected"""
        rng = random.Random(67890)
        points = [
            Waypoint(round(rng.uniform(-5, 5), 3), round(rng.uniform(-5, 5), 3))
            for _ in range(5)
        ]
        request = RouteRequest(points=points, point_hints=["Rue Ontario", "Rue Saint-Denis"])

        result = run(validator, request, make_extent(-10, -10, 10, 10))

        assert not result.is_valid
        assert "hint" in first_message(result)
        assert result.errors[0].error_type == ValidationErrorType.POINT_HINT_COUNT_MISMATCH
        assert result.errors[0].details == {"expected": [5], "actual": 2}

    def test_one_hint_per_point_accepted(self, validator, extent):
        request = make_request((0.0, 0.0), (1.0, 1.0), point_hints=["", "Main Street"])

        assert run(validator, request, extent).is_valid


class TestAccumulation:
    """Non-structural errors accumulate in check order"""

    def test_independent_errors_are_all_reported_in_order(self, validator, extent):
        request = make_request(
            (0.0, 0.0), (50.0, 0.0),
            headings=[10.0, 400.0],
            curbsides=["left"],
            point_hints=["a", "b", "c"]
        )

        result = run(validator, request, extent)

        assert [e.error_type for e in result.errors] == [
            ValidationErrorType.OUT_OF_BOUNDS,
            ValidationErrorType.HEADING_OUT_OF_RANGE,
            ValidationErrorType.CURBSIDE_COUNT_MISMATCH,
            ValidationErrorType.POINT_HINT_COUNT_MISMATCH,
        ]
        assert [e.parameter_name for e in result.errors] == [
            "points", "headings", "curbsides", "point_hints"
        ]

    def test_fully_specified_request_is_valid(self, validator, extent):
        request = make_request(
            (0.0, 0.0), (1.0, 1.0), (-5.0, 5.0),
            headings=[math.nan, 90.0, 0.0],
            curbsides=["right", "any", "unspecified"],
            point_hints=["Main Street", "", "Station Road"]
        )

        result = run(validator, request, extent)

        assert result.is_valid
        assert result.errors == []

    def test_validation_does_not_mutate_request(self, validator, extent):
        request = make_request((0.0, 0.0), (9.0, 9.0), headings=[1.0], curbsides=["left", "up"])
        before = request.to_dict()

        run(validator, request, extent)
        run(validator, request, extent)

        assert request.to_dict() == before

    def test_validator_is_reusable_across_extents(self, validator):
        request = make_request((3.0, 3.0))

        assert run(validator, request, make_extent(-5, -5, 5, 5)).is_valid
        assert not run(validator, request, make_extent(-2, -2, 2, 2)).is_valid

    def test_non_request_value_rejected(self, validator, extent):
        result = run(validator, {"points": []}, extent)

        assert result.errors[0].error_type == ValidationErrorType.INVALID_TYPE


class TestValidateRouteRequestFunction:
    """Tests for the validate_route_request convenience function"""

    def test_valid_request(self):
        result = validate_route_request(make_request((0.0, 0.0)), make_extent(-1, -1, 1, 1))

        assert result.is_valid

    def test_heading_policy_is_applied(self):
        request = make_request((0.0, 0.0), (0.5, 0.5), headings=[90.0])
        extent = make_extent(-1, -1, 1, 1)

        assert validate_route_request(request, extent).is_valid
        assert not validate_route_request(request, extent, HeadingPolicy.PER_POINT).is_valid
