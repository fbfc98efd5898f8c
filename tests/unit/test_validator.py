"""
Unit tests for the input Validator.

Covers point structure/type/range checks (including the ordering of the
structural and numeric checks), config validation and the options guard.
"""

from types import SimpleNamespace

import pytest

from gebeta_maps.core.errors import ValidationError
from gebeta_maps.core.validator import Validator
from gebeta_maps.models.geo import GeoPoint


@pytest.fixture
def validator() -> Validator:
    return Validator()


# ---------------------------------------------------------------------------
# validate_lat_lng
# ---------------------------------------------------------------------------


class TestValidateLatLng:

    @pytest.mark.parametrize(
        "point",
        [
            {"latitude": 1, "longitude": 1},
            {"latitude": -1, "longitude": 1},
            {"latitude": 1, "longitude": -1},
            {"latitude": -1.1, "longitude": -1.1},
            {"latitude": 0, "longitude": 0},
            {"latitude": 90, "longitude": 180},
            {"latitude": -90, "longitude": -180},
            GeoPoint(8.987685259188599, 38.764792722654455),
            SimpleNamespace(latitude=9.05, longitude=38.68),
        ],
    )
    def test_valid_points_pass(self, validator, point):
        assert validator.validate_lat_lng(point) is None

    @pytest.mark.parametrize(
        "point, message",
        [
            (None, "Invalid LatLng object"),
            ("not an object", "Invalid LatLng object"),
            (42, "Invalid LatLng object"),
            (True, "Invalid LatLng object"),
            # Containers get past the structural check
            ([{"latitude": 1, "longitude": 1}], "Latitude and longitude must be numbers"),
            ([], "Latitude and longitude must be numbers"),
            ({}, "Latitude and longitude must be numbers"),
            ({"longitude": 1}, "Latitude and longitude must be numbers"),
            ({"latitude": 1}, "Latitude and longitude must be numbers"),
            ({"latitude": "1", "longitude": 1}, "Latitude and longitude must be numbers"),
            ({"latitude": 1, "longitude": "1"}, "Latitude and longitude must be numbers"),
            ({"latitude": True, "longitude": 1}, "Latitude and longitude must be numbers"),
            ({"latitude": 91, "longitude": 1}, "Latitude must be between -90 and 90"),
            ({"latitude": -90.5, "longitude": 1}, "Latitude must be between -90 and 90"),
            ({"latitude": 1, "longitude": 181}, "Longitude must be between -180 and 180"),
            ({"latitude": 1, "longitude": -180.01}, "Longitude must be between -180 and 180"),
        ],
    )
    def test_invalid_points_raise(self, validator, point, message):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate_lat_lng(point)

        assert exc_info.value.message == message
        assert exc_info.value.code == "VALIDATION_ERROR"
        assert exc_info.value.status == 400

    def test_type_check_runs_before_range_check(self, validator):
        """A non-numeric latitude with an out-of-range longitude reports the type."""
        with pytest.raises(ValidationError, match="must be numbers"):
            validator.validate_lat_lng({"latitude": "x", "longitude": 500})

    def test_latitude_checked_before_longitude(self, validator):
        with pytest.raises(ValidationError, match="Latitude must be between"):
            validator.validate_lat_lng({"latitude": 100, "longitude": 500})


# ---------------------------------------------------------------------------
# validate_config
# ---------------------------------------------------------------------------


class TestValidateConfig:

    @pytest.mark.parametrize(
        "config",
        [
            {"api_key": "foo-key"},
            {"api_key": "foo-key", "timeout": 10},
            {"api_key": "foo-key", "timeout": 2.5},
            {"api_key": "foo-key", "timeout": None},
            {"api_key": "foo-key", "timeout": 0},
            SimpleNamespace(api_key="foo-key", timeout=5000),
        ],
    )
    def test_valid_config_passes(self, validator, config):
        assert validator.validate_config(config) is None

    @pytest.mark.parametrize("config", [{}, {"api_key": ""}, {"api_key": None}, None])
    def test_missing_api_key_raises(self, validator, config):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate_config(config)

        assert exc_info.value.message == "API key is required"

    @pytest.mark.parametrize("timeout", ["not a number", [1000], True])
    def test_non_numeric_timeout_raises(self, validator, timeout):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate_config({"api_key": "foo-key", "timeout": timeout})

        assert exc_info.value.message == "Timeout must be a number"

    def test_api_key_checked_before_timeout(self, validator):
        with pytest.raises(ValidationError, match="API key is required"):
            validator.validate_config({"timeout": "slow"})


# ---------------------------------------------------------------------------
# validate_options
# ---------------------------------------------------------------------------


class TestValidateOptions:

    def test_allowed_options_pass(self, validator):
        assert validator.validate_options({"foo": "bar", "baz": "qux"}, ["foo", "baz"]) is None

    def test_empty_options_pass(self, validator):
        assert validator.validate_options({}, []) is None

    def test_single_invalid_option(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate_options({"foo": "bar", "invalid": "value"}, ["foo", "baz"])

        assert exc_info.value.message == "Invalid options: invalid"

    def test_every_invalid_option_is_listed(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate_options({"a": 1, "foo": 2, "b": 3}, ("foo",))

        assert exc_info.value.message == "Invalid options: a, b"
        assert exc_info.value.details == {"invalid_options": ["a", "b"]}

    def test_non_string_option_keys_are_reported(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate_options({1: "x", "foo": 2, None: 3}, ["foo"])

        assert exc_info.value.message == "Invalid options: 1, None"
        assert exc_info.value.details == {"invalid_options": [1, None]}
