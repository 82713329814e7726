"""Tests for the immutable value objects."""

from dataclasses import FrozenInstanceError

import pytest

from coordconv.axis import Axis, Hemisphere
from coordconv.converter import ConversionOptions
from coordconv.degree_value import DegreeValue
from coordconv.precision import PrecisionSettings
from coordconv.triples import DMSTriple, DMTriple


class TestDegreeValue:

    @pytest.mark.parametrize(
        "degrees,axis,letter",
        [
            (48.816662, Axis.LATITUDE, "N"),
            (-33.9, Axis.LATITUDE, "S"),
            (-123.508873, Axis.LONGITUDE, "W"),
            (0.0, Axis.LONGITUDE, "E"),
        ],
        ids=["north", "south", "west", "zero-east"],
    )
    def test_hemisphere_letter(self, degrees: float, axis: Axis, letter: str) -> None:
        assert DegreeValue(degrees, axis).letter == letter

    @pytest.mark.parametrize(
        "degrees,axis",
        [(90.0001, Axis.LATITUDE), (-180.5, Axis.LONGITUDE), (float("nan"), Axis.LATITUDE)],
        ids=["lat-over", "lon-under", "nan"],
    )
    def test_invalid_construction(self, degrees: float, axis: Axis) -> None:
        with pytest.raises(ValueError):
            DegreeValue(degrees, axis)

    def test_frozen(self) -> None:
        value = DegreeValue.latitude(10.0)

        with pytest.raises(FrozenInstanceError):
            value.degrees = 11.0  # type: ignore[misc]

    def test_equality_and_hash(self) -> None:
        assert DegreeValue.latitude(10.0) == DegreeValue.latitude(10.0)
        assert DegreeValue.latitude(10.0) != DegreeValue.longitude(10.0)
        assert len({DegreeValue.latitude(10.0), DegreeValue.latitude(10.0)}) == 1

    def test_negative_zero_is_negative_hemisphere(self) -> None:
        assert DegreeValue.latitude(-0.0).hemisphere is Hemisphere.NEGATIVE


class TestTriples:

    def test_dm_frozen(self) -> None:
        triple = DMTriple(1, 2.0, Hemisphere.POSITIVE, Axis.LATITUDE)

        with pytest.raises(FrozenInstanceError):
            triple.minutes = 3.0  # type: ignore[misc]

    def test_dms_frozen(self) -> None:
        triple = DMSTriple(1, 2, 3.0, Hemisphere.POSITIVE, Axis.LATITUDE)

        with pytest.raises(FrozenInstanceError):
            triple.seconds = 4.0  # type: ignore[misc]

    def test_sign(self) -> None:
        assert DMSTriple(1, 2, 3.0, Hemisphere.NEGATIVE, Axis.LONGITUDE).sign == -1
        assert DMTriple(1, 2.0, Hemisphere.POSITIVE, Axis.LONGITUDE).sign == 1

    def test_validity(self) -> None:
        assert DMSTriple(180, 0, 0.0, Hemisphere.NEGATIVE, Axis.LONGITUDE).is_valid()
        assert not DMSTriple(90, 0, 0.5, Hemisphere.POSITIVE, Axis.LATITUDE).is_valid()
        assert not DMTriple(10, 60.0, Hemisphere.POSITIVE, Axis.LATITUDE).is_valid()


class TestSettings:

    def test_precision_settings_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            PrecisionSettings().dd = 3  # type: ignore[misc]

    def test_conversion_options_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            ConversionOptions(decimals=2).decimals = 3  # type: ignore[misc]


class TestAxis:

    @pytest.mark.parametrize(
        "name,axis",
        [("lat", Axis.LATITUDE), ("Latitude", Axis.LATITUDE), ("lng", Axis.LONGITUDE), ("LON", Axis.LONGITUDE)],
    )
    def test_parse(self, name: str, axis: Axis) -> None:
        assert Axis.parse(name) is axis

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError):
            Axis.parse("altitude")

    def test_bounds_and_letters(self) -> None:
        assert Axis.LATITUDE.bound == 90.0
        assert Axis.LONGITUDE.bound == 180.0
        assert Axis.LATITUDE.letters == ("N", "S")
        assert Axis.LONGITUDE.hemisphere_for("w") is Hemisphere.NEGATIVE

    def test_wrong_axis_letter(self) -> None:
        with pytest.raises(KeyError):
            Axis.LATITUDE.hemisphere_for("E")
