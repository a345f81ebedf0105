"""Multi-valued outputs of toolkit calls, grouped under field names."""

from dataclasses import dataclass

from .enums import FrameClass
from .matrices import Quaternion, RotationMatrix
from .units import Angle, EphemerisTime
from .vectors import AngularVelocity, DimensionlessVector, DistanceVector, StateVector


@dataclass(frozen=True, slots=True)
class KernelInfo:
    file: str
    kind: str
    source: str
    handle: int


@dataclass(frozen=True, slots=True)
class LocalSolarTime:
    hour: int
    minute: int
    second: int
    time: str  # "HR:MN:SC"
    ampm: str  # 12-hour form with AM/PM suffix


@dataclass(frozen=True, slots=True)
class SurfacePoint:
    """Surface point, target epoch and observer-to-point vector."""

    spoint: DistanceVector
    trgepc: EphemerisTime
    srfvec: DistanceVector


@dataclass(frozen=True, slots=True)
class IlluminationAngles:
    trgepc: EphemerisTime
    srfvec: DistanceVector
    phase: Angle
    incdnc: Angle
    emissn: Angle


@dataclass(frozen=True, slots=True)
class Pointing:
    """C-matrix at the output clock time; av only when requested."""

    cmat: RotationMatrix
    clkout: float
    av: AngularVelocity | None = None


@dataclass(frozen=True, slots=True)
class SpkType5Observation:
    et: EphemerisTime
    state: StateVector


@dataclass(frozen=True, slots=True)
class IlluminationConditions:
    """Illumination angles plus the visibility flags illumf adds."""

    angles: IlluminationAngles
    visible: bool
    lit: bool


@dataclass(frozen=True, slots=True)
class CkPointingRecord:
    """One discrete pointing instance for CK types 1 and 3."""

    sclkdp: float
    quat: Quaternion
    av: AngularVelocity = AngularVelocity()


@dataclass(frozen=True, slots=True)
class CkType2Record:
    """Constant-rate pointing over [start, stop], in encoded SCLK."""

    start: float
    stop: float
    quat: Quaternion
    av: AngularVelocity = AngularVelocity()
    rate: float = 1.0  # seconds per tick


@dataclass(frozen=True, slots=True)
class FieldOfView:
    shape: str  # CIRCLE, ELLIPSE, RECTANGLE or POLYGON
    frame: str
    bsight: DimensionlessVector
    bounds: tuple[DimensionlessVector, ...]


@dataclass(frozen=True, slots=True)
class FrameInfo:
    center: int
    frame_class: FrameClass
    class_id: int
