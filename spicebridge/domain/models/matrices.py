"""Rotation and state-transformation composites."""

from dataclasses import dataclass

from .units import Angle, AngularRate
from .vectors import DimensionlessStateVector, DimensionlessVector


@dataclass(frozen=True, slots=True)
class RotationMatrix:
    """3x3 matrix stored as three row vectors."""

    x: DimensionlessVector = DimensionlessVector.x_axis()
    y: DimensionlessVector = DimensionlessVector.y_axis()
    z: DimensionlessVector = DimensionlessVector.z_axis()

    @classmethod
    def identity(cls) -> "RotationMatrix":
        return cls()

    @property
    def rows(self) -> tuple[DimensionlessVector, DimensionlessVector, DimensionlessVector]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True, slots=True)
class StateTransform:
    """6x6 state transformation matrix stored as six 6-vector rows."""

    rows: tuple[DimensionlessStateVector, ...]

    @classmethod
    def identity(cls) -> "StateTransform":
        unit = [
            DimensionlessVector.x_axis(),
            DimensionlessVector.y_axis(),
            DimensionlessVector.z_axis(),
        ]
        zero = DimensionlessVector.zero()
        upper = [DimensionlessStateVector(u, zero) for u in unit]
        lower = [DimensionlessStateVector(zero, u) for u in unit]
        return cls(tuple(upper + lower))


@dataclass(frozen=True, slots=True)
class Quaternion:
    """Unit quaternion in the scalar-first SPICE convention."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls()


@dataclass(frozen=True, slots=True)
class EulerAngles:
    """Angles for a 3-2-1 (or other) Euler sequence, outermost first."""

    angle3: Angle = Angle()
    angle2: Angle = Angle()
    angle1: Angle = Angle()


@dataclass(frozen=True, slots=True)
class EulerAngularState:
    """Euler angles and their time derivatives, as used by eul2xf/xf2eul."""

    angles: EulerAngles = EulerAngles()
    rate3: AngularRate = AngularRate()
    rate2: AngularRate = AngularRate()
    rate1: AngularRate = AngularRate()
