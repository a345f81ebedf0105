"""
Conversion between typed quantities and the raw arrays the toolkit uses.

``to_raw`` turns any composite into a float64 numpy array in canonical
units; ``from_raw`` turns such an array back into the requested type. Both
directions are order preserving and lossless, so a round trip reproduces
the original value exactly.

The cell helpers at the bottom build and read toolkit ``SpiceCell`` buffers.
They call into the toolkit (window insertion, cardinality) and therefore
must only run inside a bridged call.
"""

from collections.abc import Callable, Iterable
from functools import singledispatch
from typing import Any, TypeVar

import numpy as np
import spiceypy as spice
from numpy.typing import ArrayLike, NDArray
from spiceypy.utils import support_types as stypes

from spicebridge.domain.models.geometry import (
    ConicElements,
    EphemerisTimeWindowSegment,
    TLEGeophysicalConstants,
    TwoLineElements,
    WindowSegment,
)
from spicebridge.domain.models.matrices import (
    EulerAngles,
    EulerAngularState,
    Quaternion,
    RotationMatrix,
    StateTransform,
)
from spicebridge.domain.models.units import (
    Angle,
    AngularRate,
    Distance,
    EphemerisTime,
    MassConstant,
    Speed,
)
from spicebridge.domain.models.vectors import (
    AngularVelocity,
    AzElVector,
    CylindricalVector,
    DimensionlessStateVector,
    DimensionlessVector,
    DistanceVector,
    GeodeticVector,
    GeodeticVectorRates,
    LatitudinalVector,
    PlanetographicVector,
    RADecVector,
    SphericalVector,
    StateVector,
    VelocityVector,
)
from spicebridge.domain.validators import validate_capacity, validate_shape

T = TypeVar("T")


def _array(values: Iterable[float]) -> NDArray[np.float64]:
    return np.array([float(v) for v in values], dtype=np.float64)


# ───────────────────────────── typed -> raw ─────────────────────────────


@singledispatch
def to_raw(value: Any) -> NDArray[np.float64]:
    """Flatten a typed composite into the array layout the toolkit expects."""
    raise TypeError(f"No raw form registered for {type(value).__name__}")


@to_raw.register(DimensionlessVector)
@to_raw.register(DistanceVector)
@to_raw.register(VelocityVector)
@to_raw.register(AngularVelocity)
@to_raw.register(LatitudinalVector)
@to_raw.register(SphericalVector)
@to_raw.register(CylindricalVector)
@to_raw.register(GeodeticVector)
@to_raw.register(GeodeticVectorRates)
@to_raw.register(PlanetographicVector)
@to_raw.register(RADecVector)
@to_raw.register(AzElVector)
@to_raw.register(TwoLineElements)
@to_raw.register(TLEGeophysicalConstants)
@to_raw.register(EulerAngles)
def _(value) -> NDArray[np.float64]:
    return _array(getattr(value, name) for name in value.__dataclass_fields__)


@to_raw.register(StateVector)
def _(value: StateVector) -> NDArray[np.float64]:
    return np.concatenate((to_raw(value.r), to_raw(value.v)))


@to_raw.register(DimensionlessStateVector)
def _(value: DimensionlessStateVector) -> NDArray[np.float64]:
    return np.concatenate((to_raw(value.r), to_raw(value.dr)))


@to_raw.register(RotationMatrix)
def _(value: RotationMatrix) -> NDArray[np.float64]:
    return np.vstack([to_raw(row) for row in value.rows])


@to_raw.register(StateTransform)
def _(value: StateTransform) -> NDArray[np.float64]:
    return np.vstack([to_raw(row) for row in value.rows])


@to_raw.register(Quaternion)
def _(value: Quaternion) -> NDArray[np.float64]:
    return _array((value.w, value.x, value.y, value.z))


@to_raw.register(EulerAngularState)
def _(value: EulerAngularState) -> NDArray[np.float64]:
    return np.concatenate(
        (to_raw(value.angles), _array((value.rate3, value.rate2, value.rate1)))
    )


@to_raw.register(ConicElements)
def _(value: ConicElements) -> NDArray[np.float64]:
    return _array(
        (
            value.rp,
            value.ecc,
            value.inc,
            value.lnode,
            value.argp,
            value.m0,
            value.epoch,
            value.mu,
        )
    )


# ───────────────────────────── raw -> typed ─────────────────────────────


def _triple(factory: Callable[[float], Any], cls: type) -> Callable[[NDArray[np.float64]], Any]:
    def convert(raw: NDArray[np.float64]):
        validate_shape(raw, (3,), cls.__name__)
        return cls(*(factory(float(v)) for v in raw))

    return convert


def _coordinates(cls: type, *factories: Callable[[float], Any]) -> Callable[[NDArray[np.float64]], Any]:
    def convert(raw: NDArray[np.float64]):
        validate_shape(raw, (3,), cls.__name__)
        return cls(*(f(float(v)) for f, v in zip(factories, raw)))

    return convert


def _state(raw: NDArray[np.float64]) -> StateVector:
    validate_shape(raw, (6,), "StateVector")
    return StateVector(
        _FROM_RAW[DistanceVector](raw[:3]), _FROM_RAW[VelocityVector](raw[3:])
    )


def _dimensionless_state(raw: NDArray[np.float64]) -> DimensionlessStateVector:
    validate_shape(raw, (6,), "DimensionlessStateVector")
    return DimensionlessStateVector(
        _FROM_RAW[DimensionlessVector](raw[:3]),
        _FROM_RAW[DimensionlessVector](raw[3:]),
    )


def _euler_state(raw: NDArray[np.float64]) -> EulerAngularState:
    validate_shape(raw, (6,), "EulerAngularState")
    return EulerAngularState(
        _FROM_RAW[EulerAngles](raw[:3]), *(AngularRate(float(v)) for v in raw[3:])
    )


def _two_line_elements(raw: NDArray[np.float64]) -> TwoLineElements:
    validate_shape(raw, (10,), "TwoLineElements")
    ndt20, ndd60, bstar, incl, node0, ecc, omega, m0, n0, epoch = (float(v) for v in raw)
    return TwoLineElements(
        ndt20=ndt20,
        ndd60=ndd60,
        bstar=bstar,
        incl=Angle(incl),
        node0=Angle(node0),
        ecc=ecc,
        omega=Angle(omega),
        m0=Angle(m0),
        n0=n0,
        epoch=EphemerisTime(epoch),
    )


def _geophysical_constants(raw: NDArray[np.float64]) -> TLEGeophysicalConstants:
    validate_shape(raw, (8,), "TLEGeophysicalConstants")
    j2, j3, j4, ke, qo, so, er, ae = (float(v) for v in raw)
    return TLEGeophysicalConstants(
        j2, j3, j4, ke, Distance(qo), Distance(so), Distance(er), ae
    )


def _rotation(raw: NDArray[np.float64]) -> RotationMatrix:
    validate_shape(raw, (3, 3), "RotationMatrix")
    return RotationMatrix(*(_FROM_RAW[DimensionlessVector](row) for row in raw))


def _state_transform(raw: NDArray[np.float64]) -> StateTransform:
    validate_shape(raw, (6, 6), "StateTransform")
    return StateTransform(tuple(_dimensionless_state(row) for row in raw))


def _quaternion(raw: NDArray[np.float64]) -> Quaternion:
    validate_shape(raw, (4,), "Quaternion")
    return Quaternion(*(float(v) for v in raw))


def _conic(raw: NDArray[np.float64]) -> ConicElements:
    validate_shape(raw, (8,), "ConicElements")
    rp, ecc, inc, lnode, argp, m0, epoch, mu = (float(v) for v in raw)
    return ConicElements(
        rp=Distance(rp),
        ecc=ecc,
        inc=Angle(inc),
        lnode=Angle(lnode),
        argp=Angle(argp),
        m0=Angle(m0),
        epoch=EphemerisTime(epoch),
        mu=MassConstant(mu),
    )


_FROM_RAW: dict[type, Callable[[NDArray[np.float64]], Any]] = {
    DimensionlessVector: _triple(float, DimensionlessVector),
    DistanceVector: _triple(Distance, DistanceVector),
    VelocityVector: _triple(Speed, VelocityVector),
    AngularVelocity: _triple(AngularRate, AngularVelocity),
    EulerAngles: _triple(Angle, EulerAngles),
    LatitudinalVector: _coordinates(LatitudinalVector, Distance, Angle, Angle),
    SphericalVector: _coordinates(SphericalVector, Distance, Angle, Angle),
    CylindricalVector: _coordinates(CylindricalVector, Distance, Angle, Distance),
    GeodeticVector: _coordinates(GeodeticVector, Angle, Angle, Distance),
    GeodeticVectorRates: _coordinates(GeodeticVectorRates, AngularRate, AngularRate, Speed),
    PlanetographicVector: _coordinates(PlanetographicVector, Angle, Angle, Distance),
    RADecVector: _coordinates(RADecVector, Distance, Angle, Angle),
    AzElVector: _coordinates(AzElVector, Distance, Angle, Angle),
    EulerAngularState: _euler_state,
    TwoLineElements: _two_line_elements,
    TLEGeophysicalConstants: _geophysical_constants,
    StateVector: _state,
    DimensionlessStateVector: _dimensionless_state,
    RotationMatrix: _rotation,
    StateTransform: _state_transform,
    Quaternion: _quaternion,
    ConicElements: _conic,
}


def from_raw(cls: type[T], raw: ArrayLike) -> T:
    """Build a typed composite of class ``cls`` from a raw toolkit array.

    Raises:
        MarshalingError: If the array shape does not match ``cls``
        TypeError: If ``cls`` has no raw form
    """
    try:
        convert = _FROM_RAW[cls]
    except KeyError:
        raise TypeError(f"No raw form registered for {cls.__name__}") from None
    return convert(np.asarray(raw, dtype=np.float64))


def to_raw_list(values: Iterable[Any]) -> NDArray[np.float64]:
    """Stack several composites of the same type into one 2-D array."""
    return np.array([to_raw(v) for v in values], dtype=np.float64)


def from_raw_list(cls: type[T], raw: ArrayLike) -> list[T]:
    """Split a 2-D raw array into composites, one per row."""
    return [from_raw(cls, row) for row in np.asarray(raw, dtype=np.float64)]


# ───────────────────────────── variable-length buffers ─────────────────────────────


def new_double_cell(capacity: int) -> stypes.SpiceCell:
    validate_capacity(capacity)
    return stypes.SPICEDOUBLE_CELL(capacity)


def new_int_cell(capacity: int) -> stypes.SpiceCell:
    validate_capacity(capacity)
    return stypes.SPICEINT_CELL(capacity)


def window_to_cell(
    segments: Iterable[WindowSegment | EphemerisTimeWindowSegment],
    capacity: int,
) -> stypes.SpiceCell:
    """Build a toolkit window from (start, stop) segments.

    The toolkit merges overlapping segments while inserting. Capacity counts
    endpoints, so a window of N intervals needs a capacity of at least 2N.
    """
    cell = new_double_cell(capacity)
    for segment in segments:
        spice.wninsd(float(segment.start), float(segment.stop), cell)
    return cell


def cell_to_windows(
    cell: stypes.SpiceCell,
    factory: Callable[[float, float], T],
) -> list[T]:
    """Read every interval of a toolkit window, sized to the interval count."""
    count = spice.wncard(cell)
    return [factory(*spice.wnfetd(cell, i)) for i in range(count)]


def cell_to_ints(cell: stypes.SpiceCell) -> list[int]:
    """Read the populated elements of an integer cell."""
    return [int(cell[i]) for i in range(spice.card(cell))]


def et_segment(start: float, stop: float) -> EphemerisTimeWindowSegment:
    return EphemerisTimeWindowSegment(EphemerisTime(start), EphemerisTime(stop))


def raw_segment(start: float, stop: float) -> WindowSegment:
    return WindowSegment(start, stop)
