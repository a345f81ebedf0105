"""Writing, loading and reading back C-kernel pointing."""

import pytest
from numpy.testing import assert_allclose

from spicebridge.application.services import coverage, ephemeris, files
from spicebridge.domain.models.enums import Ck05Subtype
from spicebridge.domain.models.geometry import WindowSegment
from spicebridge.domain.models.matrices import Quaternion, RotationMatrix
from spicebridge.domain.models.records import CkPointingRecord, CkType2Record
from spicebridge.infrastructure.spice.marshaling import to_raw
from tests.mocks import TEST_CK_INSTRUMENT

TICKS = (0.0, 1000.0, 2000.0)


def write_ck(path, writer, *args):
    handle = files.ckopn(path, "test pointing", 0).unwrap()
    outcome = writer(handle, TICKS[0], TICKS[-1], TEST_CK_INSTRUMENT, "J2000", "TEST POINTING", *args)
    files.ckcls(handle).unwrap()
    return outcome


@pytest.fixture
def ck_path(kernel_dir):
    path = kernel_dir / "test_pointing.bc"
    records = [CkPointingRecord(t, Quaternion.identity()) for t in TICKS]
    write_ck(path, files.ckw03, records).unwrap()
    return path


class TestWriters:
    def test_ckw03_coverage(self, ck_path):
        assert coverage.ckcov(ck_path, TEST_CK_INSTRUMENT).unwrap() == [WindowSegment(0.0, 2000.0)]
        assert coverage.ckobj(ck_path).unwrap() == [TEST_CK_INSTRUMENT]

    def test_ckw01(self, kernel_dir):
        records = [CkPointingRecord(t, Quaternion.identity()) for t in TICKS]
        path = kernel_dir / "discrete.bc"
        assert write_ck(path, files.ckw01, records).ok
        assert coverage.ckobj(path).unwrap() == [TEST_CK_INSTRUMENT]

    def test_ckw02(self, kernel_dir):
        records = [
            CkType2Record(0.0, 1000.0, Quaternion.identity()),
            CkType2Record(1000.0, 2000.0, Quaternion.identity()),
        ]
        path = kernel_dir / "constant_rate.bc"
        assert write_ck(path, files.ckw02, records).ok
        assert coverage.ckcov(path, TEST_CK_INSTRUMENT).unwrap() == [WindowSegment(0.0, 2000.0)]

    def test_ckw05(self, kernel_dir):
        packets = [to_raw(Quaternion.identity()) for _ in TICKS]
        handle = files.ckopn(kernel_dir / "packets.bc", "packets", 0).unwrap()
        outcome = files.ckw05(
            handle, Ck05Subtype.LAGRANGE, 1, TICKS[0], TICKS[-1], TEST_CK_INSTRUMENT,
            "J2000", "PACKETS", TICKS, packets, 1.0, avflag=False,
        )
        files.ckcls(handle).unwrap()
        assert outcome.ok

    def test_ckw05_packet_size_is_checked(self, kernel_dir):
        handle = files.ckopn(kernel_dir / "short.bc", "short", 0).unwrap()
        outcome = files.ckw05(
            handle, Ck05Subtype.HERMITE, 1, TICKS[0], TICKS[-1], TEST_CK_INSTRUMENT,
            "J2000", "SHORT", TICKS, [[1.0, 0.0, 0.0, 0.0]] * 3, 1.0,
        )
        files.ckcls(handle).unwrap()
        assert outcome.code == "SPICEBRIDGE(INVALIDARGUMENT)"

    def test_empty_record_list(self, kernel_dir):
        outcome = write_ck(kernel_dir / "empty.bc", files.ckw03, [])
        assert outcome.code == "SPICEBRIDGE(INVALIDARGUMENT)"


class TestReading:
    def test_cklpf_then_ckgp(self, ck_path):
        handle = files.cklpf(ck_path).unwrap()
        pointing = ephemeris.ckgp(TEST_CK_INSTRUMENT, 1000.0, 0.0).unwrap()
        assert_allclose(to_raw(pointing.cmat), to_raw(RotationMatrix.identity()), atol=1e-12)
        assert pointing.clkout == pytest.approx(1000.0)
        files.ckupf(handle).unwrap()

    def test_unloaded_ck_has_no_pointing(self, ck_path):
        handle = files.cklpf(ck_path).unwrap()
        files.ckupf(handle).unwrap()
        assert not ephemeris.ckgp(TEST_CK_INSTRUMENT, 1000.0, 0.0).found

    def test_spklef_then_spkuef(self, spk_path):
        handle = files.spklef(spk_path).unwrap()
        assert files.spkuef(handle).ok
