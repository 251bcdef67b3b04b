"""
Geodesic Engine Contract and GeographicLib Adapter.

The gnomonic projection is built entirely on two geodesic primitives:
the inverse problem (two points -> azimuths, reduced length m12 and
geodesic scale M12) and a steppable geodesic line (origin + azimuth ->
position, azimuth, m12 and M12 at any arc length). This module defines
that contract and implements it with the `geographiclib` package.

Scientific Context
------------------
Domain: Geodesy, differential geometry on curved surfaces
Model: Geodesics on an ellipsoid of revolution

Reduced length m12 measures how a small change of azimuth at the first
point displaces the second point; geodesic scale M12 measures how
nearby geodesics that start parallel converge. On a sphere of radius R,
m12 = R sin(s/R) and M12 = cos(s/R).

Implementation
--------------
`pyproj.Geod` wraps the same algorithms but does not expose m12 and M12
or a geodesic line object, so the adapter uses `geographiclib` directly.

References
----------
- Karney, C.F.F. (2013). Algorithms for geodesics. Journal of Geodesy, 87(1), 43-55.
- GeographicLib: https://geographiclib.sourceforge.io/
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from geographiclib.geodesic import Geodesic

from common.logging_config import get_logger
from geospatial.coordinate_models import EllipsoidParameters, WGS84Ellipsoid

logger = get_logger(__name__)


@dataclass(frozen=True)
class GeodesicInverseResult:
    """Solution of the inverse geodesic problem.

    Attributes
    ----------
    azimuth_start : float
        Azimuth at the first point, degrees clockwise from north.
    azimuth_end : float
        Forward azimuth at the second point, degrees.
    reduced_length : float
        Reduced length m12, in units of the equatorial radius.
    geodesic_scale : float
        Geodesic scale M12 (dimensionless).
    distance : float
        Arc length s12 between the points.
    """
    azimuth_start: float
    azimuth_end: float
    reduced_length: float
    geodesic_scale: float
    distance: float


@dataclass(frozen=True)
class GeodesicPosition:
    """State of a geodesic line at a given arc length."""
    latitude: float
    longitude: float
    azimuth: float
    reduced_length: float
    geodesic_scale: float


class GeodesicLineAdapter(ABC):
    """A geodesic from a fixed origin with a fixed initial azimuth."""

    @abstractmethod
    def position(self, distance: float) -> GeodesicPosition:
        """Advance along the line to arc length `distance` from the origin."""
        pass


class GeodesicEngine(ABC):
    """Abstract geodesic engine consumed by the gnomonic projection.

    Implementations must be safe to share between threads once
    constructed.
    """

    @property
    @abstractmethod
    def equatorial_radius(self) -> float:
        """Equatorial radius a of the ellipsoid."""
        pass

    @property
    @abstractmethod
    def flattening(self) -> float:
        """Flattening f of the ellipsoid."""
        pass

    @abstractmethod
    def inverse(
        self,
        lat1: float,
        lon1: float,
        lat2: float,
        lon2: float
    ) -> GeodesicInverseResult:
        """Solve the inverse problem between two points (degrees)."""
        pass

    @abstractmethod
    def line(self, lat1: float, lon1: float, azimuth: float) -> GeodesicLineAdapter:
        """Build a geodesic line from a point with an initial azimuth (degrees)."""
        pass


class _KarneyGeodesicLine(GeodesicLineAdapter):

    _OUTMASK = (
        Geodesic.LATITUDE | Geodesic.LONGITUDE | Geodesic.AZIMUTH |
        Geodesic.REDUCEDLENGTH | Geodesic.GEODESICSCALE
    )

    def __init__(self, line):
        self._line = line

    def position(self, distance: float) -> GeodesicPosition:
        result = self._line.Position(distance, self._OUTMASK)
        return GeodesicPosition(
            latitude=result['lat2'],
            longitude=result['lon2'],
            azimuth=result['azi2'],
            reduced_length=result['m12'],
            geodesic_scale=result['M12']
        )


class KarneyGeodesicEngine(GeodesicEngine):
    """Geodesic engine backed by GeographicLib (Karney's algorithms).

    Parameters
    ----------
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).

    Examples
    --------
    >>> engine = KarneyGeodesicEngine()
    >>> engine.inverse(0.0, 0.0, 0.0, 1.0).azimuth_start
    90.0
    """

    _INVERSE_OUTMASK = (
        Geodesic.AZIMUTH | Geodesic.DISTANCE |
        Geodesic.REDUCEDLENGTH | Geodesic.GEODESICSCALE
    )
    _LINE_CAPS = (
        Geodesic.LATITUDE | Geodesic.LONGITUDE | Geodesic.AZIMUTH |
        Geodesic.DISTANCE_IN | Geodesic.REDUCEDLENGTH | Geodesic.GEODESICSCALE
    )

    def __init__(self, ellipsoid: EllipsoidParameters = WGS84Ellipsoid):
        self._ellipsoid = ellipsoid
        if ellipsoid is WGS84Ellipsoid:
            self._geod = Geodesic.WGS84
        else:
            self._geod = Geodesic(ellipsoid.a, ellipsoid.f)
        logger.info(
            f"Geodesic engine initialized with {ellipsoid.name} "
            f"(a={ellipsoid.a}, f={ellipsoid.f:.12g})"
        )

    @property
    def ellipsoid(self) -> EllipsoidParameters:
        return self._ellipsoid

    @property
    def equatorial_radius(self) -> float:
        return self._ellipsoid.a

    @property
    def flattening(self) -> float:
        return self._ellipsoid.f

    def inverse(self, lat1, lon1, lat2, lon2) -> GeodesicInverseResult:
        result = self._geod.Inverse(lat1, lon1, lat2, lon2, self._INVERSE_OUTMASK)
        return GeodesicInverseResult(
            azimuth_start=result['azi1'],
            azimuth_end=result['azi2'],
            reduced_length=result['m12'],
            geodesic_scale=result['M12'],
            distance=result['s12']
        )

    def line(self, lat1, lon1, azimuth) -> GeodesicLineAdapter:
        return _KarneyGeodesicLine(self._geod.Line(lat1, lon1, azimuth, self._LINE_CAPS))
