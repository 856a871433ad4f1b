"""Tests for coordinate and location parsing."""

from __future__ import annotations

import pytest

from rover_sites.models import DMSAngle, GeoPoint
from rover_sites.parsers.base import (
    MalformedCoordinate,
    MalformedLocationPair,
    ParseError,
)
from rover_sites.parsers.coordinates import (
    decimal_to_dms,
    format_dms,
    is_decimal_coordinate,
    is_dms_coordinate,
    parse_coordinate,
    parse_dms,
    parse_location,
)


# ── Decimal notation ─────────────────────────────────────────────────────


class TestDecimalCoordinates:
    @pytest.mark.parametrize("text, expected", [
        ("135.9", 135.9),
        ("-12.5", -12.5),
        ("+7", 7.0),
        (".5", 0.5),
        ("0", 0.0),
        ("12", 12.0),
        ("1359", 1359.0),
        ("  -33.8688 ", -33.8688),
    ])
    def test_value_unchanged(self, text, expected):
        assert parse_coordinate(text) == expected

    def test_bare_integer_is_not_dms(self):
        # "1359" must never be read as 13°59'
        assert not is_dms_coordinate("1359")
        assert is_decimal_coordinate("1359")

    @pytest.mark.parametrize("text, expected", [
        ("14.5684°S", -14.5684),
        ("175.472636°E", 175.472636),
        ("175.47 E", 175.47),
        ("45N", 45.0),
        ("12.5°", 12.5),
        ("-12.5°", -12.5),
    ])
    def test_hemisphere_decimal(self, text, expected):
        assert parse_coordinate(text) == pytest.approx(expected)


# ── DMS notation ─────────────────────────────────────────────────────────


class TestDMSCoordinates:
    def test_reference_example(self):
        assert parse_coordinate("135°54'0\" E") == pytest.approx(135.9)

    @pytest.mark.parametrize("text, expected", [
        ("51°30'N", 51.5),
        ("0°08'W", -8 / 60),
        ("48°51'N", 48 + 51 / 60),
        ("2°21'E", 2 + 21 / 60),
        ("5°4'48\"S", -5.08),
        ("18°39'N", 18.65),
        ("226°12'E", 226.2),
        ("51 30 15", 51 + 30 / 60 + 15 / 3600),
        ("51° 30' 15\" N", 51 + 30 / 60 + 15 / 3600),
        ("51°30.5'N", 51 + 30.5 / 60),
        ("-51 30", -51.5),
        ("+51 30", 51.5),
        ("51°30'n", 51.5),
        ("51°30'15''N", 51 + 30 / 60 + 15 / 3600),
        ("51° 30' 15 '' N", 51 + 30 / 60 + 15 / 3600),
    ])
    def test_dms_values(self, text, expected):
        assert parse_coordinate(text) == pytest.approx(expected)

    def test_missing_direction_is_positive(self):
        assert parse_coordinate("12°30'") == pytest.approx(12.5)

    @pytest.mark.parametrize("text", ["51°30'N", "0°08'E", "12 30 0 N", "179°59'59\"E"])
    def test_north_east_non_negative(self, text):
        assert parse_coordinate(text) >= 0

    @pytest.mark.parametrize("text", ["51°30'S", "0°08'W", "12 30 0 S", "0°0'0\"W"])
    def test_south_west_non_positive(self, text):
        assert parse_coordinate(text) <= 0

    def test_detection(self):
        assert is_dms_coordinate("51°30'N")
        assert is_dms_coordinate("51 30")
        assert not is_dms_coordinate("51.5")
        assert not is_dms_coordinate("14.5684°S")

    def test_parse_dms_fields(self):
        angle = parse_dms("5°4'48\"S")
        assert angle == DMSAngle(degrees=5, minutes=4, seconds=48, direction="S")

    def test_parse_dms_reports_bad_field(self):
        with pytest.raises(MalformedCoordinate) as excinfo:
            parse_dms("51 3x")
        assert excinfo.value.field == "3x"
        assert excinfo.value.position == 1

    def test_parse_dms_rejects_extra_fields(self):
        with pytest.raises(MalformedCoordinate, match="got 4 field"):
            parse_dms("51 30 15 20")


# ── Malformed coordinates ────────────────────────────────────────────────


class TestMalformedCoordinates:
    @pytest.mark.parametrize("text", [
        "1234xyz",
        "",
        "abc",
        "N",
        "51°30'N extra",
        "1 2 3 4",
        "12.5.3",
        "nan",
        "inf",
    ])
    def test_rejected(self, text):
        with pytest.raises(MalformedCoordinate):
            parse_coordinate(text)

    def test_malformed_is_parse_error(self):
        with pytest.raises(ParseError):
            parse_coordinate("1234xyz")
        with pytest.raises(ValueError):
            parse_coordinate("1234xyz")

    def test_minutes_out_of_range(self):
        with pytest.raises(MalformedCoordinate, match="below 60"):
            parse_coordinate("51°75'N")

    def test_double_apostrophe_needs_seconds(self):
        with pytest.raises(MalformedCoordinate):
            parse_coordinate("51°30''N")

    def test_seconds_out_of_range(self):
        with pytest.raises(MalformedCoordinate, match="below 60"):
            parse_coordinate("51°30'61\"N")

    def test_sign_conflicts_with_direction(self):
        with pytest.raises(MalformedCoordinate, match="conflicts"):
            parse_coordinate("-51°30'N")

    def test_axis_mismatch(self):
        with pytest.raises(MalformedCoordinate, match="not valid for latitude"):
            parse_coordinate("0°08'W", axis="latitude")
        with pytest.raises(MalformedCoordinate, match="not valid for longitude"):
            parse_coordinate("51°30'N", axis="longitude")

    def test_axis_without_direction(self):
        assert parse_coordinate("-12.5", axis="latitude") == -12.5


# ── Decimal → DMS ────────────────────────────────────────────────────────


class TestDecimalToDMS:
    def test_latitude(self):
        assert decimal_to_dms(51.5) == DMSAngle(degrees=51, minutes=30, seconds=0, direction="N")

    def test_negative_longitude(self):
        angle = decimal_to_dms(-8 / 60, longitude=True)
        assert angle.degrees == 0
        assert angle.minutes == 8
        assert angle.seconds == pytest.approx(0, abs=1e-6)
        assert angle.direction == "W"

    def test_seconds_never_reach_sixty(self):
        angle = decimal_to_dms(10.99999999999)
        assert angle.seconds < 60
        assert angle.minutes < 60

    def test_format(self):
        assert format_dms(DMSAngle(degrees=51, minutes=30, seconds=0, direction="N")) == "51°30'0\"N"
        assert format_dms(DMSAngle(degrees=5, minutes=4, seconds=48.25)) == "5°4'48.25\""
        assert format_dms(DMSAngle(degrees=5, minutes=4, seconds=0, negative=True)) == "-5°4'0\""

    @pytest.mark.parametrize("value, longitude", [
        (51.5, False),
        (-33.868820, False),
        (-0.127758, True),
        (137.441700, True),
        (354.4734, True),
        (0.0, False),
    ])
    def test_round_trip(self, value, longitude):
        text = format_dms(decimal_to_dms(value, longitude=longitude))
        assert parse_coordinate(text) == pytest.approx(value, abs=1e-6)


# ── Locations ────────────────────────────────────────────────────────────


class TestParseLocation:
    def test_london(self):
        point = parse_location("(51°30'N, 0°08'W)")
        assert point.latitude == pytest.approx(51.5)
        assert point.longitude == pytest.approx(-8 / 60)

    def test_without_parentheses(self):
        assert parse_location("12.5, -7") == GeoPoint(latitude=12.5, longitude=-7.0)

    def test_mixed_notation(self):
        point = parse_location("(5°4'48\"S, 137.85)")
        assert point.latitude == pytest.approx(-5.08)
        assert point.longitude == pytest.approx(137.85)

    @pytest.mark.parametrize("text", [
        "(51°30'N 0°08'W)",
        "(1, 2, 3)",
        "()",
        "(51°30'N, 0°08'W",
        "51°30'N, 0°08'W)",
    ])
    def test_malformed_pair(self, text):
        with pytest.raises(MalformedLocationPair):
            parse_location(text)

    def test_malformed_half(self):
        with pytest.raises(MalformedCoordinate):
            parse_location("(51°30'N, 1234xyz)")

    def test_latitude_out_of_range(self):
        with pytest.raises(MalformedCoordinate, match="latitude"):
            parse_location("(95, 0)")

    def test_swapped_axes(self):
        with pytest.raises(MalformedCoordinate):
            parse_location("(0°08'W, 51°30'N)")
