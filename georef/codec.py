"""
Georef Encoding and Decoding.

The World Geographic Reference System divides the globe into 15-degree
tiles named by two letters (longitude column, latitude row, counted from
180W and 90S), each tile into 1-degree cells named by two more letters,
and each cell into minutes and decimal fractions of a minute written as
two equal-length digit groups (longitude digits, then latitude digits).

Precision Levels
----------------
-  -1: 15 degrees, e.g. NK
-   0: 1 degree, e.g. NKLN
-   2: 1 minute, e.g. NKLN2438
-   3: 0.1 minute, e.g. NKLN244389
-   ...
-  11: 1e-9 minute, e.g. NKLN2444639999938946600000

Precision 1 is not representable (a single digit cannot hold minutes)
and is promoted to 2. A georef of precision p >= 0 has 4 + 2p
characters; a georef of precision -1 has 2.

Sentinel
--------
NaN coordinates encode as "INVALID", and any string beginning with
"INV" (in any case) decodes to NaN.

References
----------
- https://en.wikipedia.org/wiki/Georef
- NGA, georef.pdf (Grids and Reference Systems)
"""

import numpy as np

import pint

from common.angles import normalize_longitude
from common.constants import GeodeticConstants
from common.errors import InvalidArgumentError
from common.logging_config import get_logger
from common.types import GeodeticPoint, GeorefDecodeResult
from common.units import Q_
from georef.alphabets import (
    BASE,
    BASE_LEN,
    DEGREES,
    DIGITS,
    INVALID,
    LAT_ORIGIN,
    LAT_TILES,
    LON_ORIGIN,
    LON_TILES,
    MAX_LAT,
    MAX_PREC,
    MINUTE_TENS,
    MINUTES,
    TILE,
)

logger = get_logger(__name__)


def normalize_precision(prec: int) -> int:
    """Clamp a precision level into [-1, 11], promoting 1 to 2."""
    prec = max(-1, min(MAX_PREC, int(prec)))
    if prec == 1:
        prec += 1
    return prec


def georef_length(prec: int) -> int:
    """Length of a georef string of the given (normalized) precision."""
    return BASE_LEN + 2 * prec if prec >= 0 else BASE_LEN - 2


def cell_size(prec: int) -> pint.Quantity:
    """Edge length of a georef cell as an angular quantity.

    Parameters
    ----------
    prec : int
        Precision level; normalized as in `forward`.

    Returns
    -------
    pint.Quantity
        15 degree for -1, 1 degree for 0, 10^(2-prec) arcminute otherwise.

    Examples
    --------
    >>> cell_size(0)
    <Quantity(1, 'degree')>
    """
    prec = normalize_precision(prec)
    if prec < 0:
        return Q_(TILE, 'degree')
    if prec == 0:
        return Q_(1, 'degree')
    return Q_(1, 'arcminute') / BASE ** (prec - 2)


def _lookup(alphabet: str, char: str) -> int:
    # case-insensitive; -1 when absent
    return alphabet.find(char.upper()) if len(char) == 1 else -1


def forward(lat: float, lon: float, prec: int) -> str:
    """Encode a geodetic position as a georef string.

    Parameters
    ----------
    lat : float
        Latitude in degrees, [-90, 90].
    lon : float
        Longitude in degrees, any value; reduced to [-180, 180).
    prec : int
        Precision level, see the module docstring. Values outside
        [-1, 11] are clamped and 1 becomes 2.

    Returns
    -------
    str
        The uppercase georef of the cell containing the position, or
        "INVALID" if either coordinate is NaN.

    Raises
    ------
    InvalidArgumentError
        If latitude is outside [-90, 90].
    """
    if abs(lat) > 90:
        raise InvalidArgumentError(
            f"Latitude {lat}d not in [-90d, 90d]", value=lat
        )
    if np.isnan(lat) or np.isnan(lon):
        return INVALID

    lon = normalize_longitude(lon)
    if np.isnan(lon):
        # infinite longitude
        return INVALID
    prec = normalize_precision(prec)

    ilon = int(np.floor(lon))
    ilat = min(int(np.floor(lat)), MAX_LAT)
    lon -= ilon
    lat -= ilat

    chars = [''] * georef_length(prec)
    chars[0] = LON_TILES[ilon // TILE - LON_ORIGIN]
    chars[1] = LAT_TILES[ilat // TILE - LAT_ORIGIN]
    if prec >= 0:
        chars[2] = DEGREES[ilon % TILE]
        chars[3] = DEGREES[ilat % TILE]
        if prec > 0:
            # A fraction of exactly 1 arises from lon = -tiny or lat = 90
            if lon == 1:
                lon -= GeodeticConstants.MACHINE_EPSILON / 2
            if lat == 1:
                lat -= GeodeticConstants.MACHINE_EPSILON / 2
            mult = BASE ** (prec - 2) * MINUTES
            x = int(np.floor(mult * lon))
            y = int(np.floor(mult * lat))
            for c in reversed(range(prec)):
                chars[BASE_LEN + c] = DIGITS[x % BASE]
                x //= BASE
                chars[BASE_LEN + c + prec] = DIGITS[y % BASE]
                y //= BASE
    return ''.join(chars)


def reverse(georef: str, centerp: bool = True) -> GeorefDecodeResult:
    """Decode a georef string.

    Parameters
    ----------
    georef : str
        The georef; letter case is ignored.
    centerp : bool
        If True (the default) return the center of the cell, otherwise
        its south-west corner.

    Returns
    -------
    GeorefDecodeResult
        (latitude, longitude, precision). For strings starting with
        "INV" the coordinates are NaN and precision is None.

    Raises
    ------
    InvalidArgumentError
        If the string is too short, contains a letter outside the
        relevant alphabet, has a malformed digit suffix, or a minutes
        value of 60 or more.
    """
    if georef[:3].upper() == INVALID[:3]:
        return GeorefDecodeResult(np.nan, np.nan, None)

    length = len(georef)
    if length < BASE_LEN - 2:
        raise InvalidArgumentError(
            f"Georef must have at least 2 characters {georef}",
            value=georef, source=georef
        )
    prec = (length - 2) // 2 - 1

    k = _lookup(LON_TILES, georef[0])
    if k < 0:
        raise InvalidArgumentError(
            f"Bad longitude tile letter {georef[0]} in georef {georef}",
            value=georef[0], source=georef
        )
    lon1 = k + LON_ORIGIN
    k = _lookup(LAT_TILES, georef[1])
    if k < 0:
        raise InvalidArgumentError(
            f"Bad latitude tile letter {georef[1]} in georef {georef}",
            value=georef[1], source=georef
        )
    lat1 = k + LAT_ORIGIN
    unit = 1

    if length > 2:
        unit *= TILE
        k = _lookup(DEGREES, georef[2])
        if k < 0:
            raise InvalidArgumentError(
                f"Bad longitude degree letter {georef[2]} in georef {georef}",
                value=georef[2], source=georef
            )
        lon1 = lon1 * TILE + k
        if length < BASE_LEN:
            raise InvalidArgumentError(
                f"Missing latitude degree letter in georef {georef}",
                value=georef, source=georef
            )
        k = _lookup(DEGREES, georef[3])
        if k < 0:
            raise InvalidArgumentError(
                f"Bad latitude degree letter {georef[3]} in georef {georef}",
                value=georef[3], source=georef
            )
        lat1 = lat1 * TILE + k

        if length > BASE_LEN:
            suffix = georef[BASE_LEN:]
            if any(c not in DIGITS for c in suffix):
                raise InvalidArgumentError(
                    f"Non digits in trailing portion of georef {suffix} {georef}",
                    value=suffix, source=georef
                )
            if length % 2:
                raise InvalidArgumentError(
                    f"Georef must end with an even number of digits {suffix}",
                    value=suffix, source=georef
                )
            if prec == 1:
                raise InvalidArgumentError(
                    f"Georef needs at least 4 digits for minutes {suffix}",
                    value=suffix, source=georef
                )
            for i in range(prec):
                m = BASE if i else MINUTE_TENS
                unit *= m
                x = DIGITS.index(georef[BASE_LEN + i])
                y = DIGITS.index(georef[BASE_LEN + i + prec])
                if not (i or (x < m and y < m)):
                    raise InvalidArgumentError(
                        f"Minutes terms in georef must be less than 60, "
                        f"{suffix} is not a valid minutes value",
                        value=suffix, source=georef
                    )
                lon1 = m * lon1 + x
                lat1 = m * lat1 + y

    if centerp:
        unit *= 2
        lat1 = 2 * lat1 + 1
        lon1 = 2 * lon1 + 1
    return GeorefDecodeResult(
        latitude=(TILE * lat1) / unit,
        longitude=(TILE * lon1) / unit,
        precision=prec
    )


class GeorefCodec:
    """Namespace for georef conversions, mirroring the module functions.

    The codec is stateless; all methods are static.

    Examples
    --------
    >>> GeorefCodec.forward(57.64, 10.4, 2)
    'NKLN2438'
    >>> GeorefCodec.reverse('nkln2438', centerp=False).precision
    2
    """

    normalize_precision = staticmethod(normalize_precision)
    cell_size = staticmethod(cell_size)
    forward = staticmethod(forward)
    reverse = staticmethod(reverse)

    @staticmethod
    def forward_point(point: GeodeticPoint, prec: int) -> str:
        """`forward` taking a point object."""
        return forward(point.latitude, point.longitude, prec)

    @staticmethod
    def forward_many(lats, lons, prec: int) -> list:
        """Encode sequences of positions; NaN entries give "INVALID"."""
        lats, lons = np.broadcast_arrays(
            np.asarray(lats, dtype=np.float64),
            np.asarray(lons, dtype=np.float64)
        )
        codes = [forward(lat, lon, prec) for lat, lon in zip(lats.ravel(), lons.ravel())]
        invalid = codes.count(INVALID)
        if invalid:
            logger.debug(f"{invalid} of {len(codes)} positions encoded as {INVALID}")
        return codes
