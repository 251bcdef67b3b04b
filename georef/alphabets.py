"""
Lookup alphabets and grid dimensions of the World Geographic Reference System.

The letters I and O are omitted from every alphabet to avoid confusion
with the digits 1 and 0. These are module-level constants: built once
at import and never mutated, so they can be shared freely.
"""

from typing import Final

from common.constants import GeodeticConstants

# Longitude tiles: 24 letters for 360 degrees in 15-degree columns
LON_TILES: Final[str] = "ABCDEFGHJKLMNPQRSTUVWXYZ"

# Latitude tiles: 12 letters for 180 degrees in 15-degree rows
LAT_TILES: Final[str] = "ABCDEFGHJKLM"

# One-degree cells within a tile, used for both axes
DEGREES: Final[str] = "ABCDEFGHJKLMNPQ"

DIGITS: Final[str] = "0123456789"

TILE: Final[int] = int(GeodeticConstants.GEOREF_TILE_SIZE.value)
LON_ORIGIN: Final[int] = -180 // TILE
LAT_ORIGIN: Final[int] = -90 // TILE
MAX_LAT: Final[int] = 89       # highest integer-degree row; lat = 90 folds into it
BASE: Final[int] = 10          # radix of sub-minute digits
MINUTE_TENS: Final[int] = 6    # radix of the first digit of each coordinate
MINUTES: Final[int] = int(GeodeticConstants.GEOREF_MINUTES_PER_DEGREE.value)
BASE_LEN: Final[int] = 4       # letters in a georef of precision >= 0
MAX_PREC: Final[int] = 11
INVALID: Final[str] = "INVALID"
