"""Ephemeris, coverage and search calls against a generated type 5 SPK."""

import pytest
from numpy.testing import assert_allclose

from spicebridge.application.services import coverage, ephemeris, files, kernels, search
from spicebridge.domain.models.enums import (
    AberrationCorrection,
    CoordinateName,
    CoordinateSystem,
    RelationalOperator,
)
from spicebridge.domain.models.geometry import EphemerisTimeWindowSegment
from spicebridge.domain.models.results import Failure
from spicebridge.domain.models.units import Distance, EphemerisPeriod, EphemerisTime, MassConstant, Speed
from spicebridge.domain.models.vectors import DistanceVector, StateVector
from spicebridge.infrastructure.spice.marshaling import et_segment, to_raw
from tests.mocks import ORBIT_RADIUS_KM, SPK_SPAN, TEST_BODY, circular_orbit_state

TARGET = str(TEST_BODY)
SPAN = [EphemerisTimeWindowSegment(EphemerisTime(0.0), EphemerisTime(0.0) + SPK_SPAN)]


@pytest.fixture
def loaded_spk(spk_path):
    kernels.furnsh(spk_path).unwrap()
    return spk_path


class TestEphemeris:
    def test_spkpos_at_first_epoch(self, loaded_spk):
        position, light_time = ephemeris.spkpos(
            EphemerisTime(0.0), targ=TARGET, obs="EARTH", ref="J2000"
        ).unwrap()
        assert isinstance(position, DistanceVector)
        assert_allclose(to_raw(position), [ORBIT_RADIUS_KM, 0.0, 0.0], atol=1e-6)
        assert light_time.seconds == pytest.approx(ORBIT_RADIUS_KM / 299792.458)

    def test_spkezr_returns_state(self, loaded_spk):
        state, _ = ephemeris.spkezr(EphemerisTime(0.0), targ=TARGET, obs="EARTH", ref="J2000").unwrap()
        assert isinstance(state, StateVector)
        assert_allclose(to_raw(state), to_raw(circular_orbit_state()), atol=1e-6)

    def test_integer_id_variants(self, loaded_spk):
        et = EphemerisTime(3600.0)
        state, _ = ephemeris.spkgeo(TEST_BODY, et, "J2000", 399).unwrap()
        position, _ = ephemeris.spkgps(TEST_BODY, et, "J2000", 399).unwrap()
        assert_allclose(to_raw(position), to_raw(state.r), atol=1e-9)
        assert state.r.x.km ** 2 + state.r.y.km ** 2 == pytest.approx(ORBIT_RADIUS_KM**2, rel=1e-9)

    def test_spkezp_matches_spkgps(self, loaded_spk):
        et = EphemerisTime(600.0)
        position, _ = ephemeris.spkezp(TEST_BODY, et, "J2000", AberrationCorrection.NONE, 399).unwrap()
        expected, _ = ephemeris.spkgps(TEST_BODY, et, "J2000", 399).unwrap()
        assert_allclose(to_raw(position), to_raw(expected), atol=1e-9)

    def test_fixed_observer_at_center(self, loaded_spk):
        et = EphemerisTime(0.0)
        common = dict(target=TARGET, outref="J2000", abcorr=AberrationCorrection.NONE, obsctr="EARTH", obsref="J2000")
        state, _ = ephemeris.spkcpo(et, DistanceVector(), **common).unwrap()
        moving, _ = ephemeris.spkcvo(et, StateVector(), et, **common).unwrap()
        assert_allclose(to_raw(state), to_raw(circular_orbit_state()), atol=1e-6)
        assert_allclose(to_raw(moving), to_raw(state), atol=1e-9)

    def test_fixed_target_at_center(self, loaded_spk):
        et = EphemerisTime(0.0)
        common = dict(trgctr="EARTH", trgref="J2000", outref="J2000", abcorr=AberrationCorrection.NONE, obsrvr=TARGET)
        state, _ = ephemeris.spkcpt(et, DistanceVector(), **common).unwrap()
        moving, _ = ephemeris.spkcvt(et, StateVector(), et, **common).unwrap()
        assert_allclose(to_raw(state), -to_raw(circular_orbit_state()), atol=1e-6)
        assert_allclose(to_raw(moving), to_raw(state), atol=1e-9)

    def test_reference_location_word(self, loaded_spk):
        outcome = ephemeris.spkcpo(EphemerisTime(0.0), DistanceVector(), target=TARGET, refloc="NOWHERE")
        assert outcome.code == "SPICEBRIDGE(INVALIDARGUMENT)"

    def test_outside_coverage_fails(self, loaded_spk):
        outcome = ephemeris.spkpos(EphemerisTime(-1000.0), targ=TARGET, obs="EARTH", ref="J2000")
        assert isinstance(outcome, Failure)
        assert outcome.code == "SPICE(SPKINSUFFDATA)"

    def test_no_kernels_loaded(self):
        outcome = ephemeris.spkpos(EphemerisTime(0.0), targ=TARGET, obs="EARTH", ref="J2000")
        assert outcome.code == "SPICE(NOLOADEDFILES)"


class TestCoverage:
    def test_spkcov(self, spk_path):
        assert coverage.spkcov(spk_path, TEST_BODY).unwrap() == [et_segment(0.0, SPK_SPAN.seconds)]

    def test_spkcov_merges_into_existing_window(self, spk_path):
        later = et_segment(200000.0, 300000.0)
        windows = coverage.spkcov(spk_path, TEST_BODY, merge_to=[later]).unwrap()
        assert windows == [et_segment(0.0, SPK_SPAN.seconds), later]

    def test_spkcov_unknown_body_is_empty(self, spk_path):
        assert coverage.spkcov(spk_path, 12345).unwrap() == []

    def test_spkobj(self, spk_path):
        assert coverage.spkobj(spk_path) == coverage.spkobj(spk_path, capacity=10)
        assert coverage.spkobj(spk_path).unwrap() == [TEST_BODY]

    def test_missing_file(self, kernel_dir):
        outcome = coverage.spkcov(kernel_dir / "missing.bsp", TEST_BODY)
        assert not outcome.ok

    def test_zero_capacity(self, spk_path):
        assert coverage.spkobj(spk_path, capacity=0).code == "SPICEBRIDGE(INVALIDARGUMENT)"


class TestSearch:
    def test_gfdist_condition_always_met(self, loaded_spk):
        windows = search.gfdist(
            SPAN,
            EphemerisPeriod.from_hours(1.0),
            Distance(ORBIT_RADIUS_KM - 1000.0),
            target=TARGET,
            obsrvr="EARTH",
        ).unwrap()
        assert len(windows) == 1
        assert windows[0].start.seconds == pytest.approx(0.0)
        assert windows[0].stop.seconds == pytest.approx(SPK_SPAN.seconds)

    def test_gfdist_condition_never_met(self, loaded_spk):
        windows = search.gfdist(
            SPAN,
            EphemerisPeriod.from_hours(1.0),
            Distance(ORBIT_RADIUS_KM + 1000.0),
            target=TARGET,
            obsrvr="EARTH",
        ).unwrap()
        assert windows == []

    def test_gfposc_finds_each_revolution(self, loaded_spk):
        windows = search.gfposc(
            EphemerisPeriod.from_minutes(5.0),
            SPAN,
            target=TARGET,
            frame="J2000",
            obsrvr="EARTH",
            crdsys=CoordinateSystem.RECTANGULAR,
            coord=CoordinateName.X,
            relate=RelationalOperator.GREATER_THAN,
            refval=0.0,
        ).unwrap()
        assert 14 <= len(windows) <= 16
        assert all(EphemerisTime(0.0) <= w.start < w.stop for w in windows)

    def test_gfrr_circular_orbit_has_no_range_rate(self, loaded_spk):
        windows = search.gfrr(
            SPAN,
            EphemerisPeriod.from_hours(1.0),
            Speed(0.001),
            target=TARGET,
            obsrvr="EARTH",
            relate=RelationalOperator.LESS_THAN,
        ).unwrap()
        assert len(windows) == 1
        assert windows[0].start.seconds == pytest.approx(0.0)
        assert windows[0].stop.seconds == pytest.approx(SPK_SPAN.seconds)

    def test_bad_relation_word(self, loaded_spk):
        outcome = search.gfdist(SPAN, EphemerisPeriod(60.0), Distance(1.0), relate="!=", target=TARGET)
        assert outcome.code == "SPICEBRIDGE(INVALIDARGUMENT)"


class TestWriting:
    def test_spkopn_refuses_existing_file(self, spk_path):
        outcome = files.spkopn(spk_path)
        assert not outcome.ok

    def test_spkw05_requires_observations(self, kernel_dir):
        handle = files.spkopn(kernel_dir / "empty.bsp", "empty", 0).unwrap()
        outcome = files.spkw05(
            handle, TEST_BODY, 399, "J2000", EphemerisTime(0.0), EphemerisTime(1.0), "EMPTY", MassConstant(1.0), []
        )
        files.dafcls(handle).unwrap()
        assert outcome.code == "SPICEBRIDGE(INVALIDARGUMENT)"

    def test_daf_handles(self, spk_path):
        handle = files.dafopr(spk_path).unwrap()
        assert files.dafcls(handle).ok
