import pytest
from numpy.testing import assert_allclose

from spicebridge.application.services import frames, pool, rotation
from spicebridge.domain.models.enums import Axis, FrameClass
from spicebridge.domain.models.matrices import EulerAngles, EulerAngularState, StateTransform
from spicebridge.domain.models.records import FrameInfo
from spicebridge.domain.models.units import Angle, AngularRate, EphemerisTime
from spicebridge.domain.models.vectors import AngularVelocity
from spicebridge.infrastructure.spice.marshaling import to_raw

J2000_EPOCH = EphemerisTime(0.0)
OBLIQUITY = Angle.from_arcseconds(84381.448)


class TestInertialFrames:
    def test_pxform_to_ecliptic(self):
        m = frames.pxform(J2000_EPOCH).unwrap()
        expected = rotation.rotate(OBLIQUITY, Axis.X).unwrap()
        assert_allclose(to_raw(m), to_raw(expected), atol=1e-12)

    def test_pxfrm2_between_inertial_frames(self):
        m = frames.pxfrm2(J2000_EPOCH, EphemerisTime(86400.0)).unwrap()
        assert_allclose(to_raw(m), to_raw(frames.pxform(J2000_EPOCH).unwrap()), atol=1e-12)

    def test_state_transform_of_inertial_frames(self):
        xform = frames.sxform(J2000_EPOCH).unwrap()
        rot, av = frames.xf2rav(xform).unwrap()
        assert_allclose(to_raw(rot), to_raw(frames.pxform(J2000_EPOCH).unwrap()), atol=1e-12)
        assert_allclose(to_raw(av), [0.0, 0.0, 0.0], atol=1e-15)

        rebuilt = frames.rav2xf(rot, AngularVelocity()).unwrap()
        assert_allclose(to_raw(rebuilt), to_raw(xform), atol=1e-12)

    def test_invstm(self):
        xform = frames.sxform(J2000_EPOCH).unwrap()
        inverse = frames.invstm(xform).unwrap()
        expected = frames.sxform(J2000_EPOCH, "ECLIPJ2000", "J2000").unwrap()
        assert_allclose(to_raw(inverse), to_raw(expected), atol=1e-12)

    def test_unknown_frame(self):
        outcome = frames.pxform(J2000_EPOCH, "J2000", "NOT_A_FRAME")
        assert not outcome.ok
        assert outcome.code == "SPICE(UNKNOWNFRAME)"
        assert outcome.message

    @pytest.mark.parametrize("frame", ["J2000", "ECLIPJ2000", "B1950"])
    def test_identity_to_self(self, frame):
        m = frames.pxform(J2000_EPOCH, frame, frame).unwrap()
        assert rotation.det(m).unwrap() == pytest.approx(1.0)


class TestFrameInfo:
    def test_j2000(self):
        assert frames.frinfo(1).unwrap() == FrameInfo(0, FrameClass.INERTIAL, 1)

    def test_unknown_frame_code(self):
        assert not frames.frinfo(-987654).found


class TestEulerStates:
    def test_zero_angles_and_rates(self):
        xform = frames.eul2xf(EulerAngularState()).unwrap()
        assert_allclose(to_raw(xform), to_raw(StateTransform.identity()), atol=1e-15)

    def test_xf2eul_recovers_rates(self):
        state = EulerAngularState(
            EulerAngles(Angle(0.3), Angle(0.2), Angle(0.1)),
            AngularRate(1e-3),
            AngularRate(-2e-4),
            AngularRate(5e-5),
        )
        xform = frames.eul2xf(state, Axis.Z, Axis.X, Axis.Z).unwrap()
        recovered, unique = frames.xf2eul(xform, Axis.Z, Axis.X, Axis.Z).unwrap()
        assert unique
        assert_allclose(to_raw(recovered), to_raw(state), atol=1e-12)


class TestBodyFixed:
    @pytest.fixture
    def earth_orientation(self):
        pool.pdpool("BODY399_POLE_RA", [0.0, -0.641, 0.0]).unwrap()
        pool.pdpool("BODY399_POLE_DEC", [90.0, -0.557, 0.0]).unwrap()
        pool.pdpool("BODY399_PM", [190.147, 360.9856235, 0.0]).unwrap()

    def test_tisbod_matches_iau_frame(self, earth_orientation):
        et = EphemerisTime(3600.0)
        xform = frames.tisbod(et, 399, "J2000").unwrap()
        expected = frames.sxform(et, "J2000", "IAU_EARTH").unwrap()
        assert_allclose(to_raw(xform), to_raw(expected), atol=1e-12)

    def test_tisbod_without_constants(self):
        assert not frames.tisbod(J2000_EPOCH).ok
