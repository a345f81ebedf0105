"""Toolkit constants. None of these touch the error state, so none are bridged."""

import spiceypy as spice

from spicebridge.domain.models.enums import Units
from spicebridge.domain.models.units import Angle, EphemerisPeriod, Speed
from spicebridge.domain.validators import option_word
from spicebridge.infrastructure.spice.decorators import spice_call


def j2000() -> float:
    """Julian date of J2000."""
    return spice.j2000()


def b1950() -> float:
    """Julian date of the Besselian epoch 1950.0."""
    return spice.b1950()


def spd() -> EphemerisPeriod:
    return EphemerisPeriod(spice.spd())


def jyear() -> EphemerisPeriod:
    return EphemerisPeriod(spice.jyear())


def tyear() -> EphemerisPeriod:
    return EphemerisPeriod(spice.tyear())


def clight() -> Speed:
    return Speed(spice.clight())


def pi() -> Angle:
    return Angle(spice.pi())


def halfpi() -> Angle:
    return Angle(spice.halfpi())


def twopi() -> Angle:
    return Angle(spice.twopi())


def rpd() -> float:
    """Radians per degree."""
    return spice.rpd()


def dpr() -> float:
    """Degrees per radian."""
    return spice.dpr()


@spice_call
def convrt(x: float, in_units: Units | str, out_units: Units | str) -> float:
    """Convert a measurement between units; incompatible units fail."""
    return spice.convrt(x, option_word(Units, in_units), option_word(Units, out_units))
