"""
Reference Ellipsoid Models.

This module defines the ellipsoid parameters handed to the geodesic engine.
The gnomonic projection is defined on whichever ellipsoid the engine uses;
its planar coordinates are in the units of the equatorial radius.

Named ellipsoids are resolved through `pyproj`'s ellipsoid table, so any
name PROJ knows ("WGS84", "GRS80", "clrk66", "sphere", ...) is accepted.

References
----------
- NIMA TR8350.2: WGS84 parameters
- PROJ ellipsoid list: https://proj.org/usage/ellipsoids.html
"""

from dataclasses import dataclass

from pyproj import Geod, get_ellps_map

from common.constants import GeodeticConstants
from common.errors import InvalidArgumentError


@dataclass(frozen=True)
class EllipsoidParameters:
    """Parameters defining a reference ellipsoid.

    Attributes
    ----------
    a : float
        Semi-major axis (equatorial radius) in meters.
    f : float
        Flattening: f = (a - b) / a. Zero for a sphere; negative for a
        prolate ellipsoid.
    name : str
        Identifier for the ellipsoid.

    Derived Parameters
    ------------------
    b : float
        Semi-minor axis (polar radius) in meters.
    e2 : float
        First eccentricity squared: e² = (a² - b²) / a²
    """
    a: float
    f: float
    name: str

    def __post_init__(self):
        if not self.a > 0:
            raise InvalidArgumentError(
                f"Equatorial radius {self.a} is not positive", value=self.a
            )
        if not self.f < 1:
            raise InvalidArgumentError(
                f"Flattening {self.f} is not less than 1", value=self.f
            )

    @property
    def b(self) -> float:
        """Semi-minor axis in meters."""
        return self.a * (1 - self.f)

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return self.f * (2 - self.f)

    @classmethod
    def from_name(cls, name: str) -> 'EllipsoidParameters':
        """Look up a named ellipsoid in PROJ's table.

        Parameters
        ----------
        name : str
            PROJ ellipsoid identifier, e.g. "WGS84" or "GRS80".

        Returns
        -------
        EllipsoidParameters

        Raises
        ------
        InvalidArgumentError
            If PROJ does not know the name.
        """
        if name not in get_ellps_map():
            raise InvalidArgumentError(f"Unknown ellipsoid {name}", value=name)
        geod = Geod(ellps=name)
        return cls(a=float(geod.a), f=float(geod.f), name=name)

    @classmethod
    def sphere(cls, radius: float) -> 'EllipsoidParameters':
        """A sphere of the given radius."""
        return cls(a=radius, f=0.0, name=f"sphere(R={radius})")


# WGS84 ellipsoid - the default reference for this system
WGS84Ellipsoid = EllipsoidParameters(
    a=GeodeticConstants.EARTH_SEMI_MAJOR_AXIS.value,
    f=GeodeticConstants.EARTH_FLATTENING.value,
    name="WGS84"
)
