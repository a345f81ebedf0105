# spicebridge/domain/models/units.py
"""
Type-safe physical quantities passed across the toolkit boundary.

Every quantity stores exactly one float in a canonical unit (km, radians,
seconds past J2000 TDB, km/s, rad/s, km^3/s^2). Other units are reached
through explicit constructors and read-only accessors, never by storing a
second representation.

Usage:
    from spicebridge.domain.models.units import Angle, Distance

    half_turn = Angle.from_degrees(180.0)
    half_turn.radians           # 3.141592653589793
    Distance(1.0) + Distance(2.0)   # Distance(km=3.0)
    Distance(1.0) + half_turn       # TypeError
"""

import math
from dataclasses import dataclass
from typing import ClassVar

from spicebridge.domain.constants import (
    ARCSECONDS_PER_DEGREE,
    AU_KM,
    J2000_JULIAN_DATE,
    METERS_PER_KM,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Quantity:
    """Value semantics shared by all scalar quantities."""

    __slots__ = ()
    _canonical: ClassVar[str]

    def __float__(self) -> float:
        return getattr(self, self._canonical)

    def _same(self, other: object) -> bool:
        return type(other) is type(self)


class _LinearQuantity(Quantity):
    """Quantities closed under addition and scaling (everything but instants)."""

    __slots__ = ()

    def __add__(self, other):
        if self._same(other):
            return type(self)(float(self) + float(other))
        return NotImplemented

    def __sub__(self, other):
        if self._same(other):
            return type(self)(float(self) - float(other))
        return NotImplemented

    def __neg__(self):
        return type(self)(-float(self))

    def __abs__(self):
        return type(self)(abs(float(self)))

    def __mul__(self, other):
        if _is_number(other):
            return type(self)(float(self) * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if _is_number(other):
            return type(self)(float(self) / other)
        if self._same(other):
            return float(self) / float(other)
        return NotImplemented


@dataclass(frozen=True, slots=True, order=True)
class Distance(_LinearQuantity):
    km: float = 0.0

    _canonical: ClassVar[str] = "km"

    @classmethod
    def from_meters(cls, meters: float) -> "Distance":
        return cls(meters / METERS_PER_KM)

    @classmethod
    def from_au(cls, au: float) -> "Distance":
        return cls(au * AU_KM)

    @property
    def meters(self) -> float:
        return self.km * METERS_PER_KM

    @property
    def au(self) -> float:
        return self.km / AU_KM

    def __truediv__(self, other):
        if isinstance(other, EphemerisPeriod):
            return Speed(self.km / other.seconds)
        return _LinearQuantity.__truediv__(self, other)


@dataclass(frozen=True, slots=True, order=True)
class Angle(_LinearQuantity):
    radians: float = 0.0

    _canonical: ClassVar[str] = "radians"

    @classmethod
    def from_degrees(cls, degrees: float) -> "Angle":
        return cls(math.radians(degrees))

    @classmethod
    def from_arcseconds(cls, arcseconds: float) -> "Angle":
        return cls(math.radians(arcseconds / ARCSECONDS_PER_DEGREE))

    @property
    def degrees(self) -> float:
        return math.degrees(self.radians)

    @property
    def arcseconds(self) -> float:
        return math.degrees(self.radians) * ARCSECONDS_PER_DEGREE

    def __truediv__(self, other):
        if isinstance(other, EphemerisPeriod):
            return AngularRate(self.radians / other.seconds)
        return _LinearQuantity.__truediv__(self, other)


@dataclass(frozen=True, slots=True, order=True)
class EphemerisPeriod(_LinearQuantity):
    """A duration in ephemeris (TDB) seconds."""

    seconds: float = 0.0

    _canonical: ClassVar[str] = "seconds"

    @classmethod
    def from_minutes(cls, minutes: float) -> "EphemerisPeriod":
        return cls(minutes * SECONDS_PER_MINUTE)

    @classmethod
    def from_hours(cls, hours: float) -> "EphemerisPeriod":
        return cls(hours * SECONDS_PER_HOUR)

    @classmethod
    def from_days(cls, days: float) -> "EphemerisPeriod":
        return cls(days * SECONDS_PER_DAY)

    @property
    def minutes(self) -> float:
        return self.seconds / SECONDS_PER_MINUTE

    @property
    def hours(self) -> float:
        return self.seconds / SECONDS_PER_HOUR

    @property
    def days(self) -> float:
        return self.seconds / SECONDS_PER_DAY


@dataclass(frozen=True, slots=True, order=True)
class EphemerisTime(Quantity):
    """
    An instant, as ephemeris seconds past J2000 TDB.

    Instants are not additive: the difference of two instants is an
    EphemerisPeriod and an instant may only be shifted by a period.
    """

    seconds: float = 0.0

    _canonical: ClassVar[str] = "seconds"

    @classmethod
    def from_julian_date(cls, julian_date: float) -> "EphemerisTime":
        return cls((julian_date - J2000_JULIAN_DATE) * SECONDS_PER_DAY)

    @classmethod
    def from_days_past_j2000(cls, days: float) -> "EphemerisTime":
        return cls(days * SECONDS_PER_DAY)

    @property
    def julian_date(self) -> float:
        return J2000_JULIAN_DATE + self.seconds / SECONDS_PER_DAY

    @property
    def days_past_j2000(self) -> float:
        return self.seconds / SECONDS_PER_DAY

    def __add__(self, other):
        if isinstance(other, EphemerisPeriod):
            return EphemerisTime(self.seconds + other.seconds)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, EphemerisPeriod):
            return EphemerisTime(self.seconds - other.seconds)
        if isinstance(other, EphemerisTime):
            return EphemerisPeriod(self.seconds - other.seconds)
        return NotImplemented


@dataclass(frozen=True, slots=True, order=True)
class Speed(_LinearQuantity):
    kmps: float = 0.0

    _canonical: ClassVar[str] = "kmps"

    @classmethod
    def from_mps(cls, mps: float) -> "Speed":
        return cls(mps / METERS_PER_KM)

    @property
    def mps(self) -> float:
        return self.kmps * METERS_PER_KM

    def __mul__(self, other):
        if isinstance(other, EphemerisPeriod):
            return Distance(self.kmps * other.seconds)
        return _LinearQuantity.__mul__(self, other)

    __rmul__ = __mul__


@dataclass(frozen=True, slots=True, order=True)
class AngularRate(_LinearQuantity):
    radians_per_second: float = 0.0

    _canonical: ClassVar[str] = "radians_per_second"

    @classmethod
    def from_degrees_per_second(cls, degrees_per_second: float) -> "AngularRate":
        return cls(math.radians(degrees_per_second))

    @property
    def degrees_per_second(self) -> float:
        return math.degrees(self.radians_per_second)

    def __mul__(self, other):
        if isinstance(other, EphemerisPeriod):
            return Angle(self.radians_per_second * other.seconds)
        return _LinearQuantity.__mul__(self, other)

    __rmul__ = __mul__


@dataclass(frozen=True, slots=True, order=True)
class MassConstant(_LinearQuantity):
    """Gravitational parameter GM in km^3/s^2."""

    gm: float = 0.0

    _canonical: ClassVar[str] = "gm"
