"""
NORAD two-line elements and SGP4/SDP4 propagation.

``getelm`` needs a leapseconds kernel to convert the element epoch. The
geophysical constants normally come from a text kernel such as
``geophysical.ker``; ``getgeophs`` reads them from the kernel pool.
"""

import spiceypy as spice

from spicebridge.domain.exceptions import ValidationError
from spicebridge.domain.models.geometry import TLEGeophysicalConstants, TwoLineElements
from spicebridge.domain.models.units import EphemerisTime
from spicebridge.domain.models.vectors import StateVector
from spicebridge.infrastructure.spice.decorators import spice_call
from spicebridge.infrastructure.spice.marshaling import from_raw, to_raw

# Kernel pool items holding the SGP4 model, in evsgp4 order (BODY399_J2, ...)
GEOPHYSICAL_ITEMS = ("J2", "J3", "J4", "KE", "QO", "SO", "ER", "AE")

FIRST_YEAR = 1957


@spice_call
def getelm(
    first_line: str, second_line: str, frstyr: int = FIRST_YEAR
) -> TwoLineElements:
    """
    Parse a pair of element lines. Two-digit years are taken to fall in
    the hundred years starting at ``frstyr``.
    """
    lines = [first_line, second_line]
    if any(not line.strip() for line in lines):
        raise ValidationError("both element lines are required")
    lineln = max(len(line) for line in lines) + 1
    _, elems = spice.getelm(frstyr, lineln, lines)
    return from_raw(TwoLineElements, elems)


@spice_call
def evsgp4(
    et: EphemerisTime,
    elems: TwoLineElements,
    geophs: TLEGeophysicalConstants = TLEGeophysicalConstants(),
) -> StateVector:
    """State in the TEME frame of the element set at ``et``."""
    return from_raw(StateVector, spice.evsgp4(float(et), to_raw(geophs), to_raw(elems)))


@spice_call
def getgeophs(body: str = "EARTH") -> TLEGeophysicalConstants:
    values = []
    for item in GEOPHYSICAL_ITEMS:
        _, value = spice.bodvrd(body, item, 1)
        values.append(float(value[0]))
    return from_raw(TLEGeophysicalConstants, values)
