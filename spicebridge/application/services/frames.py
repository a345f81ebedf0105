"""Reference frame transformations."""

import spiceypy as spice

from spicebridge.domain.models.enums import Axis, FrameClass
from spicebridge.domain.models.matrices import EulerAngularState, RotationMatrix, StateTransform
from spicebridge.domain.models.records import FrameInfo
from spicebridge.domain.models.units import EphemerisTime
from spicebridge.domain.models.vectors import AngularVelocity
from spicebridge.infrastructure.spice.decorators import spice_call, spice_lookup
from spicebridge.infrastructure.spice.marshaling import from_raw, to_raw


@spice_call
def pxform(
    et: EphemerisTime, from_frame: str = "J2000", to_frame: str = "ECLIPJ2000"
) -> RotationMatrix:
    """Position transformation from one frame to another at ``et``."""
    return from_raw(RotationMatrix, spice.pxform(from_frame, to_frame, float(et)))


@spice_call
def sxform(
    et: EphemerisTime, from_frame: str = "J2000", to_frame: str = "ECLIPJ2000"
) -> StateTransform:
    return from_raw(StateTransform, spice.sxform(from_frame, to_frame, float(et)))


@spice_call
def pxfrm2(
    etfrom: EphemerisTime,
    etto: EphemerisTime,
    from_frame: str = "J2000",
    to_frame: str = "ECLIPJ2000",
) -> RotationMatrix:
    """Position transformation between frames evaluated at two different epochs."""
    return from_raw(
        RotationMatrix, spice.pxfrm2(from_frame, to_frame, float(etfrom), float(etto))
    )


@spice_call
def xf2rav(xform: StateTransform) -> tuple[RotationMatrix, AngularVelocity]:
    """Split a state transformation into rotation and angular velocity."""
    rot, av = spice.xf2rav(to_raw(xform))
    return from_raw(RotationMatrix, rot), from_raw(AngularVelocity, av)


@spice_call
def rav2xf(rot: RotationMatrix, av: AngularVelocity) -> StateTransform:
    return from_raw(StateTransform, spice.rav2xf(to_raw(rot), to_raw(av)))


@spice_call
def invstm(mat: StateTransform) -> StateTransform:
    return from_raw(StateTransform, spice.invstm(to_raw(mat)))


@spice_call
def tisbod(
    et: EphemerisTime, body: int = 399, ref: str = "J2000"
) -> StateTransform:
    """State transformation from ``ref`` to the body-fixed frame of ``body``."""
    return from_raw(StateTransform, spice.tisbod(ref, body, float(et)))


@spice_lookup("frame {frcode}")
def frinfo(frcode: int):
    """Center, class and class ID of a frame."""
    cent, frclss, clssid, found = spice.frinfo(frcode)
    if not found:
        return None, found
    return FrameInfo(int(cent), FrameClass(frclss), int(clssid)), found


@spice_call
def eul2xf(
    eulang: EulerAngularState,
    axisa: Axis | int = Axis.Z,
    axisb: Axis | int = Axis.Y,
    axisc: Axis | int = Axis.X,
) -> StateTransform:
    """State transformation from Euler angles and their rates."""
    return from_raw(
        StateTransform, spice.eul2xf(to_raw(eulang), int(axisa), int(axisb), int(axisc))
    )


@spice_call
def xf2eul(
    xform: StateTransform,
    axisa: Axis | int = Axis.Z,
    axisb: Axis | int = Axis.Y,
    axisc: Axis | int = Axis.X,
) -> tuple[EulerAngularState, bool]:
    """
    Euler angles and rates of a state transformation. The flag is False
    when the angles are not uniquely determined (gimbal lock).
    """
    eulang, unique = spice.xf2eul(to_raw(xform), int(axisa), int(axisb), int(axisc))
    return from_raw(EulerAngularState, eulang), bool(unique)
