"""Shared pytest fixtures for the gnomonic projection and georef tests.

Provides projections on WGS84 and on a sphere, plus a recording geodesic
engine that logs every arc length the reverse transform evaluates.

SPHERE:
    On a sphere of radius R the gnomonic projection has closed forms:
    rho = R tan(s/R) and M12 = cos(s/R). Tests use it to check the
    ellipsoidal code against textbook values.
"""

from typing import List

import pytest

from geospatial.coordinate_models import EllipsoidParameters
from geospatial.geodesic_engine import (
    GeodesicLineAdapter,
    GeodesicPosition,
    KarneyGeodesicEngine,
)
from geospatial.gnomonic import GnomonicProjection

SPHERE_RADIUS = 6_371_000.0


# =============================================================================
# RECORDING ENGINE
# =============================================================================


class _RecordingLine(GeodesicLineAdapter):

    def __init__(self, inner: GeodesicLineAdapter, calls: List[float]) -> None:
        self._inner = inner
        self._calls = calls

    def position(self, distance: float) -> GeodesicPosition:
        self._calls.append(distance)
        return self._inner.position(distance)


class RecordingEngine(KarneyGeodesicEngine):
    """WGS84 engine that records the arc lengths passed to line positions."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: List[float] = []

    def line(self, lat1, lon1, azimuth) -> GeodesicLineAdapter:
        return _RecordingLine(super().line(lat1, lon1, azimuth), self.calls)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture(scope="session")
def wgs84_projection() -> GnomonicProjection:
    """Gnomonic projection on WGS84 with default iteration policy."""
    return GnomonicProjection()


@pytest.fixture(scope="session")
def sphere_projection() -> GnomonicProjection:
    """Gnomonic projection on a sphere of radius 6371 km."""
    return GnomonicProjection(
        KarneyGeodesicEngine(EllipsoidParameters.sphere(SPHERE_RADIUS))
    )


@pytest.fixture
def recording_engine() -> RecordingEngine:
    return RecordingEngine()
