"""Tests for shared infrastructure: value types, angles, units, ellipsoids, engine."""

import logging
import math

import numpy as np
import pytest

from common.angles import normalize_longitude
from common.errors import GeodesyError, InvalidArgumentError
from common.logging_config import get_logger, set_level
from common.types import GeodeticPoint, GeorefDecodeResult, GnomonicReverseResult
from common.units import Q_, as_degrees, as_meters
from geospatial.coordinate_models import EllipsoidParameters, WGS84Ellipsoid
from geospatial.geodesic_engine import KarneyGeodesicEngine


class TestNormalizeLongitude:

    @pytest.mark.parametrize("lon,expected", [
        (0.0, 0.0),
        (-180.0, -180.0),
        (180.0, -180.0),
        (190.0, -170.0),
        (-190.0, 170.0),
        (540.0, -180.0),
        (-725.0, -5.0),
        (179.5, 179.5),
    ])
    def test_reduces_to_half_open_range(self, lon, expected) -> None:
        assert normalize_longitude(lon) == pytest.approx(expected)

    def test_in_range_value_is_untouched(self) -> None:
        assert normalize_longitude(-1e-20) == -1e-20

    def test_nan_passes_through(self) -> None:
        assert math.isnan(normalize_longitude(math.nan))


class TestGeodeticPoint:

    def test_rejects_latitude_out_of_range(self) -> None:
        with pytest.raises(InvalidArgumentError):
            GeodeticPoint(90.5, 0.0)

    def test_allows_nan(self) -> None:
        point = GeodeticPoint(math.nan, 0.0)
        assert not point.is_valid

    def test_normalized(self) -> None:
        assert GeodeticPoint(42.0, 288.0).normalized() == GeodeticPoint(42.0, -72.0)

    def test_from_quantities(self) -> None:
        point = GeodeticPoint.from_quantities(Q_(np.pi / 4, 'radian'), Q_(-30, 'degree'))
        assert point.latitude == pytest.approx(45.0)
        assert point.longitude == pytest.approx(-30.0)

    def test_unpacks(self) -> None:
        lat, lon = GeodeticPoint(1.0, 2.0)
        assert (lat, lon) == (1.0, 2.0)


class TestResults:

    def test_reverse_result_unpacks_four_fields(self) -> None:
        result = GnomonicReverseResult(1.0, 2.0, 3.0, 0.5, iterations=4)
        assert tuple(result) == (1.0, 2.0, 3.0, 0.5)
        assert result.converged

    def test_decode_result_unpacks(self) -> None:
        lat, lon, prec = GeorefDecodeResult(1.0, 2.0, 3)
        assert prec == 3


class TestErrors:

    def test_hierarchy(self) -> None:
        assert issubclass(InvalidArgumentError, GeodesyError)
        assert issubclass(GeodesyError, ValueError)


class TestUnits:

    def test_as_degrees(self) -> None:
        assert as_degrees(12.5) == 12.5
        assert as_degrees(Q_(30, 'arcminute')) == pytest.approx(0.5)

    def test_as_degrees_rejects_lengths(self) -> None:
        with pytest.raises(ValueError, match="Expected an angle"):
            as_degrees(Q_(1, 'meter'))

    def test_as_meters(self) -> None:
        assert as_meters(Q_(2.5, 'km')) == pytest.approx(2500.0)
        with pytest.raises(ValueError, match="Expected a length"):
            as_meters(Q_(1, 'degree'))


class TestEllipsoid:

    def test_wgs84(self) -> None:
        assert WGS84Ellipsoid.a == 6_378_137.0
        assert WGS84Ellipsoid.f == pytest.approx(1 / 298.257223563)
        assert WGS84Ellipsoid.b == pytest.approx(6_356_752.314245, abs=1e-6)

    def test_from_name(self) -> None:
        grs80 = EllipsoidParameters.from_name("GRS80")
        assert grs80.a == pytest.approx(6_378_137.0)
        assert grs80.f == pytest.approx(1 / 298.257222101, rel=1e-9)
        assert grs80.name == "GRS80"

    def test_unknown_name(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Unknown ellipsoid"):
            EllipsoidParameters.from_name("not-an-ellipsoid")

    def test_sphere(self) -> None:
        sphere = EllipsoidParameters.sphere(1000.0)
        assert sphere.f == 0.0
        assert sphere.e2 == 0.0

    def test_rejects_non_positive_radius(self) -> None:
        with pytest.raises(InvalidArgumentError):
            EllipsoidParameters(a=0.0, f=0.0, name="bad")


class TestKarneyGeodesicEngine:

    def test_inverse_along_equator(self) -> None:
        engine = KarneyGeodesicEngine()
        result = engine.inverse(0.0, 0.0, 0.0, 1.0)
        assert result.azimuth_start == pytest.approx(90.0)
        assert result.distance == pytest.approx(6_378_137.0 * math.pi / 180, rel=1e-12)
        assert 0 < result.geodesic_scale < 1

    def test_line_at_start(self) -> None:
        engine = KarneyGeodesicEngine()
        position = engine.line(30.0, 40.0, 45.0).position(0.0)
        assert position.latitude == pytest.approx(30.0)
        assert position.longitude == pytest.approx(40.0)
        assert position.reduced_length == pytest.approx(0.0, abs=1e-9)
        assert position.geodesic_scale == pytest.approx(1.0)

    def test_uses_configured_ellipsoid(self) -> None:
        engine = KarneyGeodesicEngine(EllipsoidParameters.from_name("GRS80"))
        assert engine.equatorial_radius == pytest.approx(6_378_137.0)
        assert engine.ellipsoid.name == "GRS80"


class TestLogging:

    def test_get_logger_is_idempotent(self) -> None:
        first = get_logger("geospatial.test_logger")
        second = get_logger("geospatial.test_logger")
        assert first is second
        assert len(second.handlers) == 1

    def test_set_level(self) -> None:
        logger = get_logger("georef.test_level")
        set_level(logging.DEBUG)
        assert logger.level == logging.DEBUG
        set_level(logging.INFO)
        assert logger.level == logging.INFO
