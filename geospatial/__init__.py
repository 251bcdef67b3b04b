"""
Geospatial Module for the gnomonic projection.

This module provides:
- Reference ellipsoid parameters (named ellipsoids resolved through pyproj)
- The geodesic engine contract and its GeographicLib implementation
- The ellipsoidal gnomonic projection (forward and reverse)
"""

from geospatial.coordinate_models import (
    EllipsoidParameters,
    WGS84Ellipsoid,
)

from geospatial.geodesic_engine import (
    GeodesicEngine,
    GeodesicLineAdapter,
    GeodesicInverseResult,
    GeodesicPosition,
    KarneyGeodesicEngine,
)

from geospatial.gnomonic import (
    ConvergenceState,
    GnomonicConfig,
    GnomonicProjection,
)

__all__ = [
    # Ellipsoids
    "EllipsoidParameters",
    "WGS84Ellipsoid",
    # Geodesic engine
    "GeodesicEngine",
    "GeodesicLineAdapter",
    "GeodesicInverseResult",
    "GeodesicPosition",
    "KarneyGeodesicEngine",
    # Projection
    "ConvergenceState",
    "GnomonicConfig",
    "GnomonicProjection",
]
