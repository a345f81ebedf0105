import math

import pytest

from spicebridge.domain.models.units import (
    Angle,
    AngularRate,
    Distance,
    EphemerisPeriod,
    EphemerisTime,
    MassConstant,
    Speed,
)


class TestUnitConversions:
    @pytest.mark.parametrize(
        "build, read, value",
        [
            (Distance.from_meters, lambda d: d.meters, 1234.5),
            (Distance.from_au, lambda d: d.au, 1.5),
            (Angle.from_degrees, lambda a: a.degrees, 45.0),
            (Angle.from_arcseconds, lambda a: a.arcseconds, 3600.0),
            (EphemerisPeriod.from_minutes, lambda p: p.minutes, 90.0),
            (EphemerisPeriod.from_hours, lambda p: p.hours, 2.5),
            (EphemerisPeriod.from_days, lambda p: p.days, 3.0),
            (EphemerisTime.from_julian_date, lambda t: t.julian_date, 2451545.5),
            (EphemerisTime.from_days_past_j2000, lambda t: t.days_past_j2000, -10.0),
            (Speed.from_mps, lambda s: s.mps, 7500.0),
            (AngularRate.from_degrees_per_second, lambda r: r.degrees_per_second, 0.25),
        ],
    )
    def test_round_trip_within_tolerance(self, build, read, value):
        assert read(build(value)) == pytest.approx(value, rel=1e-12)

    def test_canonical_units(self):
        assert Distance.from_meters(1000.0).km == 1.0
        assert Angle.from_degrees(180.0).radians == pytest.approx(math.pi)
        assert EphemerisPeriod.from_days(1.0).seconds == 86400.0
        assert EphemerisTime.from_julian_date(2451545.0).seconds == 0.0

    def test_defaults_are_zero(self):
        assert Distance().km == 0.0
        assert Angle().radians == 0.0
        assert EphemerisTime().seconds == 0.0
        assert MassConstant().gm == 0.0

    def test_nan_passes_through(self):
        assert math.isnan(Distance(float("nan")).km)


class TestQuantityArithmetic:
    def test_same_dimension(self):
        assert Distance(1.0) + Distance(2.0) == Distance(3.0)
        assert Distance(5.0) - Distance(2.0) == Distance(3.0)
        assert -Angle(1.0) == Angle(-1.0)
        assert abs(Speed(-2.0)) == Speed(2.0)

    def test_scaling(self):
        assert Distance(2.0) * 3 == Distance(6.0)
        assert 3 * Distance(2.0) == Distance(6.0)
        assert Distance(6.0) / 3 == Distance(2.0)

    def test_ratio_of_same_dimension_is_float(self):
        ratio = Distance(6.0) / Distance(3.0)
        assert isinstance(ratio, float)
        assert ratio == 2.0

    def test_ordering(self):
        assert Distance(1.0) < Distance(2.0)
        assert sorted([Angle(3.0), Angle(1.0)]) == [Angle(1.0), Angle(3.0)]

    def test_cross_dimension_products(self):
        period = EphemerisPeriod(10.0)
        assert Distance(100.0) / period == Speed(10.0)
        assert Speed(10.0) * period == Distance(100.0)
        assert period * Speed(10.0) == Distance(100.0)
        assert Angle(1.0) / period == AngularRate(0.1)
        assert (AngularRate(0.1) * period).radians == pytest.approx(1.0)

    def test_instants_and_periods(self):
        t0 = EphemerisTime(100.0)
        t1 = t0 + EphemerisPeriod(50.0)
        assert t1 == EphemerisTime(150.0)
        assert t1 - t0 == EphemerisPeriod(50.0)
        assert t1 - EphemerisPeriod(150.0) == EphemerisTime(0.0)

    def test_mixed_dimensions_are_rejected(self):
        with pytest.raises(TypeError):
            Distance(1.0) + Angle(1.0)
        with pytest.raises(TypeError):
            EphemerisTime(1.0) + EphemerisTime(2.0)
        with pytest.raises(TypeError):
            Speed(1.0) - Distance(1.0)

    def test_quantities_are_immutable(self):
        d = Distance(1.0)
        with pytest.raises(AttributeError):
            d.km = 2.0

    def test_float_conversion(self):
        assert float(Angle(0.5)) == 0.5
        assert float(EphemerisTime(-3.0)) == -3.0
