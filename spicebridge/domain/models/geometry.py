"""Geometric primitives, orbital elements and time windows."""

from dataclasses import dataclass

from .units import Angle, Distance, EphemerisPeriod, EphemerisTime, MassConstant
from .vectors import DimensionlessVector, DistanceVector


@dataclass(frozen=True, slots=True)
class Plane:
    """Plane in normal/constant form: <normal, x> = constant."""

    normal: DimensionlessVector = DimensionlessVector.z_axis()
    constant: Distance = Distance()


@dataclass(frozen=True, slots=True)
class Ellipse:
    center: DistanceVector = DistanceVector()
    major: DistanceVector = DistanceVector()
    minor: DistanceVector = DistanceVector()


@dataclass(frozen=True, slots=True)
class ConicElements:
    """Osculating conic elements as ordered by oscelt/conics."""

    rp: Distance = Distance()  # perifocal distance
    ecc: float = 0.0
    inc: Angle = Angle()
    lnode: Angle = Angle()
    argp: Angle = Angle()
    m0: Angle = Angle()  # mean anomaly at epoch
    epoch: EphemerisTime = EphemerisTime()
    mu: MassConstant = MassConstant()


@dataclass(frozen=True, slots=True)
class WindowSegment:
    """Interval of a double precision window in the file's own time system."""

    start: float = 0.0
    stop: float = 0.0


@dataclass(frozen=True, slots=True)
class EphemerisTimeWindowSegment:
    start: EphemerisTime = EphemerisTime()
    stop: EphemerisTime = EphemerisTime()

    @property
    def duration(self) -> EphemerisPeriod:
        return self.stop - self.start


@dataclass(frozen=True, slots=True)
class TwoLineElements:
    """
    NORAD two-line elements in the order getelm produces them.

    Angles are radians; the mean motion and its derivatives keep the
    toolkit's per-minute units.
    """

    ndt20: float = 0.0  # rad/min**2, first derivative of mean motion / 2
    ndd60: float = 0.0  # rad/min**3, second derivative of mean motion / 6
    bstar: float = 0.0
    incl: Angle = Angle()
    node0: Angle = Angle()
    ecc: float = 0.0
    omega: Angle = Angle()
    m0: Angle = Angle()
    n0: float = 0.0  # rad/min
    epoch: EphemerisTime = EphemerisTime()


@dataclass(frozen=True, slots=True)
class TLEGeophysicalConstants:
    """Earth model used by SGP4, in the order evsgp4 expects."""

    j2: float = 1.082616e-3
    j3: float = -2.53881e-6
    j4: float = -1.65597e-6
    ke: float = 7.43669161e-2  # sqrt(GM) in earth radii**1.5 / min
    qo: Distance = Distance(120.0)
    so: Distance = Distance(78.0)
    er: Distance = Distance(6378.135)
    ae: float = 1.0  # distance units per earth radius
