"""
Spacecraft clock conversions.

Every call needs the spacecraft's SCLK kernel loaded. Encoded clock values
("ticks") are plain floats counted from the start of the first partition;
``sce2c`` gives continuous ticks, suitable for C-kernel production.
"""

import spiceypy as spice

from spicebridge.domain.models.units import EphemerisTime
from spicebridge.infrastructure.spice.decorators import spice_call

STRING_LEN = 256


@spice_call
def scs2e(sc: int, sclkch: str) -> EphemerisTime:
    """Spacecraft clock string to ephemeris time."""
    return EphemerisTime(spice.scs2e(sc, sclkch))


@spice_call
def sce2s(sc: int, et: EphemerisTime) -> str:
    return spice.sce2s(sc, float(et), STRING_LEN)


@spice_call
def sce2c(sc: int, et: EphemerisTime) -> float:
    """Ephemeris time to continuous (possibly fractional) encoded ticks."""
    return float(spice.sce2c(sc, float(et)))


@spice_call
def sct2e(sc: int, sclkdp: float) -> EphemerisTime:
    return EphemerisTime(spice.sct2e(sc, sclkdp))


@spice_call
def scencd(sc: int, sclkch: str) -> float:
    """Encode a clock string, partition prefix optional, as ticks."""
    return float(spice.scencd(sc, sclkch))


@spice_call
def scdecd(sc: int, sclkdp: float) -> str:
    """Decode ticks to a clock string with its partition prefix."""
    return spice.scdecd(sc, sclkdp, STRING_LEN)


@spice_call
def scfmt(sc: int, ticks: float) -> str:
    """Format ticks as a clock string without a partition prefix."""
    return spice.scfmt(sc, ticks, STRING_LEN)


@spice_call
def sctiks(sc: int, clkstr: str) -> float:
    """Number of ticks represented by a clock duration string."""
    return float(spice.sctiks(sc, clkstr))


@spice_call
def scpart(sc: int) -> list[tuple[float, float]]:
    """Start and stop ticks of every clock partition."""
    pstart, pstop = spice.scpart(sc)
    return [(float(start), float(stop)) for start, stop in zip(pstart, pstop)]
