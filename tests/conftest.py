import pytest

from spicebridge.application.services import admin, files, orbits
from spicebridge.domain.models.records import SpkType5Observation
from spicebridge.domain.models.units import EphemerisTime
from tests.mocks import (
    EARTH_GM,
    SPK_SPAN,
    TEST_BODY,
    circular_orbit_state,
    leapseconds_kernel_text,
    sclk_kernel_text,
)


@pytest.fixture(autouse=True)
def clean_toolkit():
    """Every test starts and ends with no kernels loaded and a clear error state."""
    admin.init_all()
    yield
    admin.init_all()


@pytest.fixture
def kernel_dir(tmp_path):
    directory = tmp_path / "kernels"
    directory.mkdir()
    return directory


@pytest.fixture
def lsk_path(kernel_dir):
    path = kernel_dir / "naif0012.tls"
    path.write_text(leapseconds_kernel_text())
    return path


@pytest.fixture
def sclk_path(kernel_dir):
    path = kernel_dir / "test_clock.tsc"
    path.write_text(sclk_kernel_text())
    return path


@pytest.fixture
def spk_path(kernel_dir):
    """Type 5 SPK for TEST_BODY circling the Earth for one day from J2000."""
    path = kernel_dir / "test_orbit.bsp"
    first = EphemerisTime(0.0)
    last = first + SPK_SPAN
    start = circular_orbit_state()
    end = orbits.prop2b(EARTH_GM, start, SPK_SPAN).unwrap()

    handle = files.spkopn(path, "test orbit", 0).unwrap()
    files.spkw05(
        handle,
        TEST_BODY,
        399,
        "J2000",
        first,
        last,
        "TEST ORBIT",
        EARTH_GM,
        [SpkType5Observation(first, start), SpkType5Observation(last, end)],
    ).unwrap()
    files.spkcls(handle).unwrap()
    return path
