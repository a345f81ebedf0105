"""Spacecraft clock conversions against a generated type 1 SCLK kernel."""

import pytest

from spicebridge.application.services import kernels, sclk
from spicebridge.domain.models.results import Failure
from spicebridge.domain.models.units import EphemerisTime
from tests.mocks import TEST_BODY


@pytest.fixture
def loaded_sclk(sclk_path):
    kernels.furnsh(sclk_path).unwrap()


class TestEncoding:
    def test_scencd_counts_ticks(self, loaded_sclk):
        assert sclk.scencd(TEST_BODY, "1/100.000").unwrap() == pytest.approx(100000.0)

    def test_partition_prefix_is_optional(self, loaded_sclk):
        assert sclk.scencd(TEST_BODY, "100.000") == sclk.scencd(TEST_BODY, "1/100.000")

    def test_scdecd_inverts_scencd(self, loaded_sclk):
        clock = sclk.scdecd(TEST_BODY, 123456.0).unwrap()
        assert clock.startswith("1/")
        assert sclk.scencd(TEST_BODY, clock).unwrap() == pytest.approx(123456.0)

    def test_sctiks_and_scfmt(self, loaded_sclk):
        assert sclk.sctiks(TEST_BODY, "100.000").unwrap() == pytest.approx(100000.0)
        text = sclk.scfmt(TEST_BODY, 2500.0).unwrap()
        assert "/" not in text
        assert sclk.sctiks(TEST_BODY, text).unwrap() == pytest.approx(2500.0)

    def test_scpart(self, loaded_sclk):
        assert sclk.scpart(TEST_BODY).unwrap() == [(0.0, 9.9e11)]


class TestEphemerisTime:
    def test_zero_ticks_is_j2000(self, loaded_sclk):
        assert sclk.sct2e(TEST_BODY, 0.0).unwrap().seconds == pytest.approx(0.0, abs=1e-9)

    def test_continuous_ticks_round_trip(self, loaded_sclk):
        et = EphemerisTime(1234.5)
        ticks = sclk.sce2c(TEST_BODY, et).unwrap()
        assert sclk.sct2e(TEST_BODY, ticks).unwrap().seconds == pytest.approx(1234.5, abs=1e-6)

    def test_clock_strings(self, loaded_sclk):
        clock = sclk.sce2s(TEST_BODY, EphemerisTime(60.0)).unwrap()
        assert sclk.scs2e(TEST_BODY, clock).unwrap().seconds == pytest.approx(60.0, abs=1e-3)

    def test_missing_clock_kernel(self):
        outcome = sclk.scencd(TEST_BODY, "1/100.000")
        assert isinstance(outcome, Failure)
        assert outcome.code.startswith("SPICE(")
