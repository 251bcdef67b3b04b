"""
Common utilities and infrastructure for the gnomonic projection and georef code.

This package provides foundational components used across all modules:
- Reference constants with provenance
- Unit registry for angular quantities
- Value types for points and transform results
- Error hierarchy
- Logging infrastructure
"""

from common.constants import GeodeticConstants
from common.angles import normalize_longitude
from common.errors import GeodesyError, InvalidArgumentError
from common.units import ureg, Q_, as_degrees
from common.types import (
    GeodeticPoint,
    GnomonicPoint,
    GnomonicForwardResult,
    GnomonicReverseResult,
    GeorefDecodeResult,
)
from common.logging_config import get_logger

__all__ = [
    "GeodeticConstants",
    "normalize_longitude",
    "GeodesyError",
    "InvalidArgumentError",
    "ureg",
    "Q_",
    "as_degrees",
    "GeodeticPoint",
    "GnomonicPoint",
    "GnomonicForwardResult",
    "GnomonicReverseResult",
    "GeorefDecodeResult",
    "get_logger",
]
