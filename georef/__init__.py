"""
Georef Module: World Geographic Reference System strings.

Pure arithmetic and string handling; independent of the geodesic engine.
"""

from georef.codec import (
    GeorefCodec,
    cell_size,
    forward,
    georef_length,
    normalize_precision,
    reverse,
)

__all__ = [
    "GeorefCodec",
    "cell_size",
    "forward",
    "georef_length",
    "normalize_precision",
    "reverse",
]
