"""
Angle helpers shared by the projection and grid-reference code.
"""

import numpy as np


def normalize_longitude(lon_deg: float) -> float:
    """Reduce a longitude to the half-open range [-180, 180).

    Values already in range are returned unchanged so that no precision
    is lost. NaN is passed through.

    Parameters
    ----------
    lon_deg : float
        Longitude in degrees, any real value.

    Returns
    -------
    float
        Equivalent longitude in [-180, 180).
    """
    lon = float(lon_deg)
    if -180.0 <= lon < 180.0:
        return lon
    lon = float(np.remainder(lon + 180.0, 360.0)) - 180.0
    # remainder can round up to exactly 360 for tiny negative inputs
    if lon >= 180.0:
        lon -= 360.0
    return lon
