"""
Error types for the geodetic conversion code.

Structural and input-validation problems raise these synchronously.
Numerical-domain outcomes (a gnomonic point outside the invertible region,
a reverse transform that does not converge) are reported as NaN payloads
instead and never raise.
"""

from typing import Any, Optional


class GeodesyError(ValueError):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(GeodesyError):
    """Malformed or out-of-domain input.

    Attributes
    ----------
    value : Any
        The offending value or substring.
    source : str, optional
        The complete input the value was taken from, where relevant.
    """

    def __init__(self, message: str, value: Any = None, source: Optional[str] = None):
        super().__init__(message)
        self.value = value
        self.source = source
