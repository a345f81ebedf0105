"""
Rotation matrices, quaternions and Euler angles.

Axis numbers are handed to the toolkit unchecked. An axis outside 1..3
is reported as a toolkit Failure (SPICE(BADAXISNUMBERS)); repeated axes
such as 3, 3, 1 are accepted.
"""

from typing import TypeVar

import spiceypy as spice

from spicebridge.domain.models.enums import Axis
from spicebridge.domain.models.matrices import EulerAngles, Quaternion, RotationMatrix
from spicebridge.domain.models.units import Angle
from spicebridge.domain.models.vectors import AngularVelocity, DimensionlessVector
from spicebridge.infrastructure.spice.decorators import spice_call
from spicebridge.infrastructure.spice.marshaling import from_raw, to_raw

V = TypeVar("V")


@spice_call
def axisar(axis: DimensionlessVector, angle: Angle) -> RotationMatrix:
    """Rotation by ``angle`` about ``axis``."""
    return from_raw(RotationMatrix, spice.axisar(to_raw(axis), float(angle)))


@spice_call
def raxisa(matrix: RotationMatrix) -> tuple[DimensionlessVector, Angle]:
    axis, angle = spice.raxisa(to_raw(matrix))
    return from_raw(DimensionlessVector, axis), Angle(angle)


@spice_call
def rotate(angle: Angle, iaxis: Axis | int) -> RotationMatrix:
    """Frame rotation by ``angle`` about coordinate axis ``iaxis``."""
    return from_raw(RotationMatrix, spice.rotate(float(angle), int(iaxis)))


@spice_call
def rotmat(m: RotationMatrix, angle: Angle, iaxis: Axis | int) -> RotationMatrix:
    return from_raw(RotationMatrix, spice.rotmat(to_raw(m), float(angle), int(iaxis)))


@spice_call
def m2q(r: RotationMatrix) -> Quaternion:
    return from_raw(Quaternion, spice.m2q(to_raw(r)))


@spice_call
def q2m(q: Quaternion) -> RotationMatrix:
    return from_raw(RotationMatrix, spice.q2m(to_raw(q)))


@spice_call
def qxq(q1: Quaternion, q2: Quaternion) -> Quaternion:
    return from_raw(Quaternion, spice.qxq(to_raw(q1), to_raw(q2)))


@spice_call
def qdq2av(q: Quaternion, dq: Quaternion) -> AngularVelocity:
    """Angular velocity from a unit quaternion and its time derivative."""
    return from_raw(AngularVelocity, spice.qdq2av(to_raw(q), to_raw(dq)))


@spice_call
def eul2m(
    eulang: EulerAngles,
    axis3: Axis | int = Axis.Z,
    axis2: Axis | int = Axis.Y,
    axis1: Axis | int = Axis.X,
) -> RotationMatrix:
    """Rotation matrix from Euler angles about the given axis sequence."""
    return from_raw(
        RotationMatrix,
        spice.eul2m(
            float(eulang.angle3),
            float(eulang.angle2),
            float(eulang.angle1),
            int(axis3),
            int(axis2),
            int(axis1),
        ),
    )


@spice_call
def m2eul(
    r: RotationMatrix,
    axis3: Axis | int = Axis.Z,
    axis2: Axis | int = Axis.Y,
    axis1: Axis | int = Axis.X,
) -> EulerAngles:
    angle3, angle2, angle1 = spice.m2eul(to_raw(r), int(axis3), int(axis2), int(axis1))
    return EulerAngles(Angle(angle3), Angle(angle2), Angle(angle1))


@spice_call
def twovec(
    axdef: DimensionlessVector,
    indexa: Axis | int,
    plndef: DimensionlessVector,
    indexp: Axis | int,
) -> RotationMatrix:
    """Frame with ``axdef`` along axis ``indexa`` and ``plndef`` in the indexa-indexp plane."""
    return from_raw(
        RotationMatrix, spice.twovec(to_raw(axdef), int(indexa), to_raw(plndef), int(indexp))
    )


@spice_call
def invert(m: RotationMatrix) -> RotationMatrix:
    return from_raw(RotationMatrix, spice.invert(to_raw(m)))


@spice_call
def xpose(m: RotationMatrix) -> RotationMatrix:
    return from_raw(RotationMatrix, spice.xpose(to_raw(m)))


@spice_call
def det(m: RotationMatrix) -> float:
    return float(spice.det(to_raw(m)))


@spice_call
def mxv(m: RotationMatrix, vin: V) -> V:
    """Rotate a 3-vector of any quantity type, keeping its type."""
    return from_raw(type(vin), spice.mxv(to_raw(m), to_raw(vin)))


@spice_call
def mtxv(m: RotationMatrix, vin: V) -> V:
    """Rotate by the transpose of ``m``."""
    return from_raw(type(vin), spice.mtxv(to_raw(m), to_raw(vin)))


@spice_call
def mxm(m1: RotationMatrix, m2: RotationMatrix) -> RotationMatrix:
    return from_raw(RotationMatrix, spice.mxm(to_raw(m1), to_raw(m2)))


@spice_call
def mtxm(m1: RotationMatrix, m2: RotationMatrix) -> RotationMatrix:
    """Product of the transpose of ``m1`` with ``m2``."""
    return from_raw(RotationMatrix, spice.mtxm(to_raw(m1), to_raw(m2)))
