"""Vector algebra on typed 3-vectors."""

from typing import TypeVar

import spiceypy as spice

from spicebridge.domain.exceptions import ValidationError
from spicebridge.domain.models.units import Angle, AngularRate, Distance, Speed
from spicebridge.domain.models.vectors import (
    AngularVelocity,
    DimensionlessVector,
    DistanceVector,
    VelocityVector,
)
from spicebridge.infrastructure.spice.decorators import spice_call
from spicebridge.infrastructure.spice.marshaling import from_raw, to_raw

V = TypeVar("V")

# Scalar type of each vector's magnitude
_MAGNITUDE = {
    DimensionlessVector: float,
    DistanceVector: Distance,
    VelocityVector: Speed,
    AngularVelocity: AngularRate,
}


def _same_kind(v1, v2) -> None:
    if type(v1) is not type(v2):
        raise ValidationError(
            f"Vectors must share a type, got {type(v1).__name__} and {type(v2).__name__}"
        )


@spice_call
def vsep(v1, v2) -> Angle:
    """Angle between two vectors of the same type."""
    _same_kind(v1, v2)
    return Angle(spice.vsep(to_raw(v1), to_raw(v2)))


@spice_call
def vnorm(v):
    """Magnitude of a vector, typed by the vector's quantity."""
    try:
        magnitude = _MAGNITUDE[type(v)]
    except KeyError:
        raise ValidationError(f"No magnitude type for {type(v).__name__}") from None
    return magnitude(spice.vnorm(to_raw(v)))


@spice_call
def vhat(v) -> DimensionlessVector:
    """Unit vector along ``v``; the zero vector maps to itself."""
    return from_raw(DimensionlessVector, spice.vhat(to_raw(v)))


@spice_call
def vcrss(v1: DimensionlessVector, v2: DimensionlessVector) -> DimensionlessVector:
    return from_raw(DimensionlessVector, spice.vcrss(to_raw(v1), to_raw(v2)))


@spice_call
def ucrss(v1, v2) -> DimensionlessVector:
    """Unit cross product of two vectors of any type."""
    return from_raw(DimensionlessVector, spice.ucrss(to_raw(v1), to_raw(v2)))


@spice_call
def vdot(v1, v2) -> float:
    """Dot product in canonical units."""
    return float(spice.vdot(to_raw(v1), to_raw(v2)))


@spice_call
def vrotv(v: V, axis: DimensionlessVector, theta: Angle) -> V:
    """Rotate ``v`` about ``axis`` by ``theta``, keeping its type."""
    return from_raw(type(v), spice.vrotv(to_raw(v), to_raw(axis), float(theta)))
