"""Two-body orbit propagation and osculating elements."""

import spiceypy as spice

from spicebridge.domain.models.geometry import ConicElements
from spicebridge.domain.models.units import EphemerisPeriod, EphemerisTime, MassConstant
from spicebridge.domain.models.vectors import StateVector
from spicebridge.infrastructure.spice.decorators import spice_call
from spicebridge.infrastructure.spice.marshaling import from_raw, to_raw


@spice_call
def conics(elts: ConicElements, et: EphemerisTime) -> StateVector:
    """State at ``et`` of the orbit described by osculating elements."""
    return from_raw(StateVector, spice.conics(to_raw(elts), float(et)))


@spice_call
def oscelt(state: StateVector, et: EphemerisTime, mu: MassConstant) -> ConicElements:
    return from_raw(ConicElements, spice.oscelt(to_raw(state), float(et), float(mu)))


@spice_call
def prop2b(gm: MassConstant, pvinit: StateVector, dt: EphemerisPeriod) -> StateVector:
    """Propagate a state by ``dt`` under two-body motion."""
    return from_raw(StateVector, spice.prop2b(float(gm), to_raw(pvinit), float(dt)))
