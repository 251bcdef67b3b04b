"""
Unit Registry for Angular and Length Quantities.

This module provides the shared `pint` unit registry. Georef cell sizes
are reported as quantities so callers can express them in degrees,
arcminutes or arcseconds without hand-written factors, and angles
supplied as quantities are converted to plain degrees at the API edge.

Example Usage
-------------
>>> from common.units import Q_
>>> Q_(15, 'degree') * 2
<Quantity(30, 'degree')>
"""

from typing import Union

import pint
from pint import UnitRegistry as PintUnitRegistry

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity


def as_degrees(value: Union[float, pint.Quantity]) -> float:
    """Return an angle as a bare number of degrees.

    Parameters
    ----------
    value : float or pint.Quantity
        A bare number is taken to be in degrees already.

    Returns
    -------
    float
        The angle in degrees.

    Raises
    ------
    ValueError
        If a quantity without angular dimensionality is given.
    """
    if isinstance(value, pint.Quantity):
        try:
            return float(value.to(ureg.degree).magnitude)
        except pint.DimensionalityError as e:
            raise ValueError(
                f"Expected an angle, got {value.units}"
            ) from e
    return float(value)


def as_meters(value: Union[float, pint.Quantity]) -> float:
    """Return a length as a bare number of meters (bare numbers pass through)."""
    if isinstance(value, pint.Quantity):
        try:
            return float(value.to(ureg.meter).magnitude)
        except pint.DimensionalityError as e:
            raise ValueError(
                f"Expected a length, got {value.units}"
            ) from e
    return float(value)
