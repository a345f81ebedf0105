"""Vector, state and coordinate-tuple composites built from scalar quantities."""

from dataclasses import dataclass, fields

from .units import Angle, AngularRate, Distance, Speed


class _Composite:
    """Componentwise value semantics for fixed-size aggregates."""

    __slots__ = ()

    def __iter__(self):
        return iter(tuple(getattr(self, f.name) for f in fields(self)))

    def __add__(self, other):
        if type(other) is type(self):
            return type(self)(*(a + b for a, b in zip(self, other)))
        return NotImplemented

    def __sub__(self, other):
        if type(other) is type(self):
            return type(self)(*(a - b for a, b in zip(self, other)))
        return NotImplemented

    def __neg__(self):
        return type(self)(*(-c for c in self))

    def __mul__(self, other):
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return type(self)(*(c * other for c in self))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return type(self)(*(c / other for c in self))
        return NotImplemented


@dataclass(frozen=True, slots=True)
class DimensionlessVector(_Composite):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> "DimensionlessVector":
        return cls()

    @classmethod
    def x_axis(cls) -> "DimensionlessVector":
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def y_axis(cls) -> "DimensionlessVector":
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def z_axis(cls) -> "DimensionlessVector":
        return cls(0.0, 0.0, 1.0)


@dataclass(frozen=True, slots=True)
class DistanceVector(_Composite):
    x: Distance = Distance()
    y: Distance = Distance()
    z: Distance = Distance()

    @classmethod
    def from_km(cls, x: float, y: float, z: float) -> "DistanceVector":
        return cls(Distance(x), Distance(y), Distance(z))


@dataclass(frozen=True, slots=True)
class VelocityVector(_Composite):
    dx: Speed = Speed()
    dy: Speed = Speed()
    dz: Speed = Speed()

    @classmethod
    def from_kmps(cls, dx: float, dy: float, dz: float) -> "VelocityVector":
        return cls(Speed(dx), Speed(dy), Speed(dz))


@dataclass(frozen=True, slots=True)
class AngularVelocity(_Composite):
    x: AngularRate = AngularRate()
    y: AngularRate = AngularRate()
    z: AngularRate = AngularRate()


@dataclass(frozen=True, slots=True)
class StateVector(_Composite):
    """Position paired with velocity, in km and km/s."""

    r: DistanceVector = DistanceVector()
    v: VelocityVector = VelocityVector()


@dataclass(frozen=True, slots=True)
class DimensionlessStateVector(_Composite):
    r: DimensionlessVector = DimensionlessVector()
    dr: DimensionlessVector = DimensionlessVector()


# Coordinate tuples: named components, no vector arithmetic.


@dataclass(frozen=True, slots=True)
class LatitudinalVector:
    r: Distance = Distance()
    lon: Angle = Angle()
    lat: Angle = Angle()


@dataclass(frozen=True, slots=True)
class SphericalVector:
    r: Distance = Distance()
    colat: Angle = Angle()
    lon: Angle = Angle()


@dataclass(frozen=True, slots=True)
class CylindricalVector:
    r: Distance = Distance()
    lon: Angle = Angle()
    z: Distance = Distance()


@dataclass(frozen=True, slots=True)
class GeodeticVector:
    lon: Angle = Angle()
    lat: Angle = Angle()
    alt: Distance = Distance()


@dataclass(frozen=True, slots=True)
class GeodeticVectorRates:
    dlon: AngularRate = AngularRate()
    dlat: AngularRate = AngularRate()
    dalt: Speed = Speed()


@dataclass(frozen=True, slots=True)
class PlanetographicVector:
    lon: Angle = Angle()
    lat: Angle = Angle()
    alt: Distance = Distance()


@dataclass(frozen=True, slots=True)
class RADecVector:
    """Range, right ascension and declination."""

    r: Distance = Distance()
    ra: Angle = Angle()
    dec: Angle = Angle()


@dataclass(frozen=True, slots=True)
class AzElVector:
    """Range, azimuth and elevation in a topocentric frame."""

    r: Distance = Distance()
    az: Angle = Angle()
    el: Angle = Angle()
