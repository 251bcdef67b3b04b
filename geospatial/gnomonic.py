"""
Gnomonic Projection on the Ellipsoid.

This module implements the ellipsoidal generalization of the gnomonic
(central) projection. On a sphere the gnomonic projection maps great
circles to straight lines, with planar radius rho = R tan(s/R). On the
ellipsoid the same construction is expressed with geodesic quantities:

    rho = m12 / M12

where m12 is the reduced length and M12 the geodesic scale of the
geodesic from the origin to the target. The planar direction is the
initial azimuth of that geodesic. Geodesics through the origin map
exactly to straight lines, and all other geodesics map approximately
to straight lines.

Scientific Context
------------------
Domain: Cartography, mathematical geodesy
Model: Azimuthal projection defined by geodesic quantities

Region of Validity
------------------
The projection is defined while M12 > 0, i.e. roughly within a quarter
meridian of the origin. Outside that region the forward transform
returns NaN for x and y (azimuth and scale are still reported), and the
reverse transform does not converge and returns NaN for everything.
These are ordinary outcomes, not errors.

Reverse Transform
-----------------
The reverse transform solves rho(s) = m12(s)/M12(s) for the arc length s
along the geodesic with azimuth atan2(x, y) by Newton's method, using
d(m12/M12)/ds = 1/M12². Beyond rho = a it solves the reciprocal relation
1/rho = M12/m12 instead, with d(M12/m12)/ds = -1/m12², which is better
conditioned near the edge of the valid region. Once a step falls below
the tolerance, the line is evaluated one more time at the updated arc
length so that the reported position matches the accepted step.

References
----------
- Karney, C.F.F. (2013). Algorithms for geodesics. Journal of Geodesy,
  87(1), 43-55, Section 8.
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof.
  Paper 1395, pp. 164-168.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple, Union
import numpy as np
from numpy.typing import ArrayLike, NDArray

import pint

from common.constants import GeodeticConstants
from common.errors import InvalidArgumentError
from common.logging_config import get_logger
from common.types import (
    GeodeticPoint,
    GnomonicForwardResult,
    GnomonicReverseResult,
)
from common.units import as_meters
from geospatial.geodesic_engine import GeodesicEngine, KarneyGeodesicEngine

logger = get_logger(__name__)


@dataclass(frozen=True)
class GnomonicConfig:
    """Iteration policy for the reverse transform.

    Attributes
    ----------
    max_iterations : int
        Maximum number of geodesic line evaluations.
    tolerance_factor : float
        Convergence is declared once |ds| < tolerance_factor *
        sqrt(machine epsilon) * a.

    Notes
    -----
    The defaults reproduce GeographicLib's Gnomonic class; changing them
    changes which far-off points are reported as non-convergent.
    """
    max_iterations: int = int(GeodeticConstants.GNOMONIC_MAX_ITERATIONS.value)
    tolerance_factor: float = GeodeticConstants.GNOMONIC_TOLERANCE_FACTOR.value

    def __post_init__(self):
        if self.max_iterations < 1:
            raise InvalidArgumentError(
                f"max_iterations must be at least 1, got {self.max_iterations}",
                value=self.max_iterations
            )
        if not self.tolerance_factor > 0:
            raise InvalidArgumentError(
                f"tolerance_factor must be positive, got {self.tolerance_factor}",
                value=self.tolerance_factor
            )

    @property
    def tolerance(self) -> float:
        """Relative step tolerance (multiply by a for an arc length)."""
        return self.tolerance_factor * np.sqrt(GeodeticConstants.MACHINE_EPSILON)


class ConvergenceState(Enum):
    """Progress of the reverse-transform Newton iteration.

    ITERATING -> FINAL_STEP once a step falls below tolerance; the next
    line evaluation refreshes the position at the accepted arc length and
    moves to DONE. Exhausting the iteration cap while ITERATING is a
    failure.
    """
    ITERATING = auto()
    FINAL_STEP = auto()
    DONE = auto()


class GnomonicProjection:
    """Ellipsoidal gnomonic projection about an arbitrary origin.

    The origin is passed to each call, so one instance serves any number
    of origins. Instances hold no mutable state and may be shared.

    Parameters
    ----------
    engine : GeodesicEngine, optional
        Source of geodesic calculations (default: GeographicLib on WGS84).
    config : GnomonicConfig, optional
        Iteration policy for `reverse`.

    Examples
    --------
    >>> proj = GnomonicProjection()
    >>> x, y, azi, rk = proj.forward(48.0, 2.0, 49.0, 3.0)
    >>> lat, lon, azi, rk = proj.reverse(48.0, 2.0, x, y)
    >>> round(lat, 10), round(lon, 10)
    (49.0, 3.0)
    """

    def __init__(
        self,
        engine: Optional[GeodesicEngine] = None,
        config: Optional[GnomonicConfig] = None
    ):
        self._engine = engine if engine is not None else KarneyGeodesicEngine()
        self._config = config if config is not None else GnomonicConfig()

    @property
    def engine(self) -> GeodesicEngine:
        return self._engine

    @property
    def config(self) -> GnomonicConfig:
        return self._config

    @property
    def equatorial_radius(self) -> float:
        return self._engine.equatorial_radius

    @property
    def flattening(self) -> float:
        return self._engine.flattening

    def forward(
        self,
        lat0: float,
        lon0: float,
        lat: float,
        lon: float
    ) -> GnomonicForwardResult:
        """Project a geodetic point onto the gnomonic plane.

        Parameters
        ----------
        lat0, lon0 : float
            Projection origin in degrees.
        lat, lon : float
            Point to project in degrees.

        Returns
        -------
        GnomonicForwardResult
            (x, y, azimuth, scale). x and y are NaN when scale <= 0, i.e.
            the point lies beyond the region where the projection is
            injective.
        """
        geo = self._engine.inverse(lat0, lon0, lat, lon)
        rk = geo.geodesic_scale
        if rk <= 0:
            logger.debug(
                f"Gnomonic forward undefined: M12={rk:.6g} from "
                f"({lat0}, {lon0}) to ({lat}, {lon})"
            )
            return GnomonicForwardResult(np.nan, np.nan, geo.azimuth_end, rk)

        rho = geo.reduced_length / rk
        azi0 = np.radians(geo.azimuth_start)
        return GnomonicForwardResult(
            x=float(rho * np.sin(azi0)),
            y=float(rho * np.cos(azi0)),
            azimuth=geo.azimuth_end,
            scale=rk
        )

    def reverse(
        self,
        lat0: float,
        lon0: float,
        x: float,
        y: float
    ) -> GnomonicReverseResult:
        """Recover the geodetic point for gnomonic coordinates.

        Parameters
        ----------
        lat0, lon0 : float
            Projection origin in degrees.
        x, y : float
            Planar coordinates, in units of the equatorial radius.

        Returns
        -------
        GnomonicReverseResult
            (latitude, longitude, azimuth, scale). All four are NaN if the
            iteration did not converge within `config.max_iterations`
            geodesic evaluations, which is expected for points far outside
            the valid region.
        """
        a = self._engine.equatorial_radius
        azi0 = float(np.degrees(np.arctan2(x, y)))
        rho = float(np.hypot(x, y))
        s = a * float(np.arctan(rho / a))
        little = rho <= a
        if not little:
            rho = 1 / rho

        line = self._engine.line(lat0, lon0, azi0)
        threshold = self._config.tolerance * a
        state = ConvergenceState.ITERATING
        position = None
        count = 0

        while count < self._config.max_iterations:
            position = line.position(s)
            count += 1
            if state is ConvergenceState.FINAL_STEP:
                state = ConvergenceState.DONE
                break
            m = position.reduced_length
            M = position.geodesic_scale
            # little: solve rho(s) = rho with drho(s)/ds = 1/M^2
            # else: solve 1/rho(s) = 1/rho with d(1/rho(s))/ds = -1/m^2
            ds = (m / M - rho) * M * M if little else (rho - M / m) * m * m
            s -= ds
            # NaN steps also stop the iteration; the position is then NaN
            if not abs(ds) >= threshold:
                state = ConvergenceState.FINAL_STEP

        if state is ConvergenceState.ITERATING:
            logger.debug(
                f"Gnomonic reverse did not converge in {count} steps for "
                f"({x}, {y}) about ({lat0}, {lon0})"
            )
            return GnomonicReverseResult(np.nan, np.nan, np.nan, np.nan, count)

        return GnomonicReverseResult(
            latitude=position.latitude,
            longitude=position.longitude,
            azimuth=position.azimuth,
            scale=position.geodesic_scale,
            iterations=count
        )

    def try_reverse(
        self,
        lat0: float,
        lon0: float,
        x: float,
        y: float
    ) -> Optional[GnomonicReverseResult]:
        """Like `reverse`, but returns None instead of a NaN payload."""
        result = self.reverse(lat0, lon0, x, y)
        return result if result.converged else None

    def forward_point(
        self,
        origin: GeodeticPoint,
        target: GeodeticPoint
    ) -> GnomonicForwardResult:
        """`forward` taking validated point objects."""
        return self.forward(origin.latitude, origin.longitude,
                            target.latitude, target.longitude)

    def reverse_point(
        self,
        origin: GeodeticPoint,
        x: Union[float, pint.Quantity],
        y: Union[float, pint.Quantity]
    ) -> GnomonicReverseResult:
        """`reverse` taking a point object; x and y may be length quantities.

        Quantities are converted to meters, which assumes the engine's
        equatorial radius is in meters.
        """
        return self.reverse(origin.latitude, origin.longitude,
                            as_meters(x), as_meters(y))

    def forward_batch(
        self,
        lat0: float,
        lon0: float,
        lats: ArrayLike,
        lons: ArrayLike
    ) -> Tuple[NDArray[np.float64], ...]:
        """Project arrays of points about one origin.

        Parameters
        ----------
        lat0, lon0 : float
            Projection origin in degrees.
        lats, lons : array_like
            Points in degrees; broadcast against each other.

        Returns
        -------
        Tuple[ndarray, ndarray, ndarray, ndarray]
            (x, y, azimuth, scale) arrays of the broadcast shape.
        """
        lats, lons = np.broadcast_arrays(
            np.asarray(lats, dtype=np.float64),
            np.asarray(lons, dtype=np.float64)
        )
        out = np.empty((4,) + lats.shape, dtype=np.float64)
        for idx in np.ndindex(lats.shape):
            out[(slice(None),) + idx] = tuple(
                self.forward(lat0, lon0, lats[idx], lons[idx])
            )
        return out[0], out[1], out[2], out[3]

    def reverse_batch(
        self,
        lat0: float,
        lon0: float,
        xs: ArrayLike,
        ys: ArrayLike
    ) -> Tuple[NDArray[np.float64], ...]:
        """Recover arrays of points about one origin.

        Returns
        -------
        Tuple[ndarray, ndarray, ndarray, ndarray]
            (latitude, longitude, azimuth, scale) arrays; NaN where the
            iteration did not converge.
        """
        xs, ys = np.broadcast_arrays(
            np.asarray(xs, dtype=np.float64),
            np.asarray(ys, dtype=np.float64)
        )
        out = np.empty((4,) + xs.shape, dtype=np.float64)
        for idx in np.ndindex(xs.shape):
            out[(slice(None),) + idx] = tuple(
                self.reverse(lat0, lon0, xs[idx], ys[idx])
            )
        return out[0], out[1], out[2], out[3]
