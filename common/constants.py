"""
Geodetic Constants for Gnomonic Projection and Georef Encoding.

This module provides the reference constants used by the projection and
grid-reference code, each with its uncertainty bound and source.

References
----------
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- Georef grid: NGA, "Grids and Reference Systems" (georef.pdf)
- Gnomonic on the ellipsoid: Karney, C.F.F. (2013). Algorithms for
  geodesics. Journal of Geodesy, 87(1), 43-55, Section 8.
"""

from dataclasses import dataclass
from typing import Final
import numpy as np


@dataclass(frozen=True)
class Constant:
    """A constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class GeodeticConstants:
    """Registry of constants used throughout the system.

    Earth Geometry (WGS84)
    ----------------------
    The default reference ellipsoid for the geodesic engine.

    Georef Grid
    -----------
    Fixed dimensions of the World Geographic Reference System.

    Gnomonic Policy
    ---------------
    Defaults for the iterative inverse of the gnomonic projection.
    These are compatibility values, not derived quantities.
    """

    # =========================================================================
    # WGS84 Ellipsoid Parameters
    # Reference: NIMA TR8350.2, Third Edition, 2000
    # =========================================================================

    EARTH_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )

    EARTH_FLATTENING: Final[Constant] = Constant(
        value=1.0 / 298.257223563,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2",
        description="Flattening of WGS84 ellipsoid: f = (a - b) / a"
    )

    # =========================================================================
    # Georef Grid
    # =========================================================================

    GEOREF_TILE_SIZE: Final[Constant] = Constant(
        value=15.0,
        uncertainty=0.0,
        unit="degree",
        source="NGA georef",
        description="Edge of a georef tile (two-letter cell)"
    )

    GEOREF_MINUTES_PER_DEGREE: Final[Constant] = Constant(
        value=60.0,
        uncertainty=0.0,
        unit="arcminute/degree",
        source="NGA georef",
        description="Radix of the first digit group of a georef"
    )

    # =========================================================================
    # Gnomonic Inverse Policy
    # =========================================================================

    GNOMONIC_MAX_ITERATIONS: Final[Constant] = Constant(
        value=10,
        uncertainty=0.0,
        unit="dimensionless",
        source="GeographicLib Gnomonic",
        description="Newton iteration cap for the reverse gnomonic transform"
    )

    GNOMONIC_TOLERANCE_FACTOR: Final[Constant] = Constant(
        value=0.01,
        uncertainty=0.0,
        unit="dimensionless",
        source="GeographicLib Gnomonic",
        description="Multiplier on sqrt(machine epsilon) for the step tolerance"
    )

    MACHINE_EPSILON: Final[float] = float(np.finfo(np.float64).eps)
