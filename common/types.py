"""
Value Types for Gnomonic Projection and Georef Encoding.

This module defines the dataclasses passed between the projection, the
georef codec and their callers. All angles are in DEGREES; planar
coordinates are in units of the ellipsoid's equatorial radius (meters for
the usual ellipsoids).

NaN Payloads
------------
Numerical edge cases are reported as NaN fields rather than exceptions:
- a gnomonic forward result beyond the injective region has NaN x, y;
- a gnomonic reverse result that failed to converge is all NaN;
- a georef decode of the "INVALID" sentinel has NaN latitude/longitude.

Each result type carries a property for callers that prefer not to test
for NaN themselves. All results unpack like tuples, e.g.
``x, y, azi, rk = projection.forward(...)``.
"""

from dataclasses import dataclass, astuple
from typing import Iterator, Optional
import numpy as np

from common.angles import normalize_longitude
from common.errors import InvalidArgumentError
from common.units import as_degrees


@dataclass(frozen=True)
class GeodeticPoint:
    """A latitude/longitude pair on the reference ellipsoid.

    Attributes
    ----------
    latitude : float
        Geodetic latitude in degrees. Range: [-90, 90], or NaN.
    longitude : float
        Longitude in degrees. Stored as given; use `normalized()` to
        reduce it to [-180, 180).

    Examples
    --------
    >>> GeodeticPoint(42.0, 288.0).normalized()
    GeodeticPoint(latitude=42.0, longitude=-72.0)
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        """Validate latitude range."""
        if abs(self.latitude) > 90:
            raise InvalidArgumentError(
                f"Latitude {self.latitude}d not in [-90d, 90d]",
                value=self.latitude
            )

    @classmethod
    def from_quantities(cls, latitude, longitude) -> 'GeodeticPoint':
        """Build a point from angles that may be pint quantities (e.g. radians)."""
        return cls(as_degrees(latitude), as_degrees(longitude))

    @property
    def is_valid(self) -> bool:
        """False if either coordinate is NaN."""
        return not (np.isnan(self.latitude) or np.isnan(self.longitude))

    def normalized(self) -> 'GeodeticPoint':
        return GeodeticPoint(self.latitude, normalize_longitude(self.longitude))

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))


@dataclass(frozen=True)
class GnomonicPoint:
    """Planar gnomonic coordinates relative to a projection origin.

    Only meaningful together with the origin that produced it.
    """
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))


@dataclass(frozen=True)
class GnomonicForwardResult:
    """Result of a forward gnomonic transform.

    Attributes
    ----------
    x, y : float
        Planar coordinates. NaN when the target lies beyond the region
        where the projection is injective.
    azimuth : float
        Azimuth of the geodesic at the target point, degrees.
    scale : float
        Reciprocal of the azimuthal scale (the geodesic scale M12).
        Non-positive values mean the projection broke down.
    """
    x: float
    y: float
    azimuth: float
    scale: float

    @property
    def is_defined(self) -> bool:
        return self.scale > 0

    @property
    def point(self) -> GnomonicPoint:
        return GnomonicPoint(self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))


@dataclass(frozen=True)
class GnomonicReverseResult:
    """Result of a reverse gnomonic transform.

    Attributes
    ----------
    latitude, longitude : float
        Recovered geodetic position in degrees. NaN on non-convergence.
    azimuth : float
        Azimuth of the geodesic at the recovered point, degrees.
    scale : float
        Reciprocal of the azimuthal scale at the recovered point.
    iterations : int
        Number of geodesic line evaluations performed. Not part of the
        tuple unpacking.
    """
    latitude: float
    longitude: float
    azimuth: float
    scale: float
    iterations: int = 0

    @property
    def converged(self) -> bool:
        return not np.isnan(self.latitude)

    @property
    def point(self) -> GeodeticPoint:
        return GeodeticPoint(self.latitude, self.longitude)

    def __iter__(self) -> Iterator[float]:
        return iter((self.latitude, self.longitude, self.azimuth, self.scale))


@dataclass(frozen=True)
class GeorefDecodeResult:
    """Result of decoding a georef string.

    Attributes
    ----------
    latitude, longitude : float
        Decoded position in degrees (cell center or south-west corner).
        NaN when the input was the "INVALID" sentinel.
    precision : int, optional
        Precision level implied by the string length; None for the
        sentinel.
    """
    latitude: float
    longitude: float
    precision: Optional[int]

    @property
    def is_valid(self) -> bool:
        return not np.isnan(self.latitude)

    def __iter__(self) -> Iterator:
        return iter(astuple(self))
