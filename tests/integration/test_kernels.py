from spicebridge.application.services import kernels
from spicebridge.domain.models.enums import KernelType
from spicebridge.domain.models.records import KernelInfo
from spicebridge.domain.models.results import NotFound, Success


class TestLoading:
    def test_furnsh_and_unload(self, lsk_path):
        assert kernels.furnsh(lsk_path) == Success(None)
        assert kernels.ktotal() == Success(1)
        assert kernels.unload(lsk_path).ok
        assert kernels.ktotal() == Success(0)

    def test_missing_file(self, kernel_dir):
        outcome = kernels.furnsh(kernel_dir / "missing.tls")
        assert not outcome.ok
        assert outcome.code.startswith("SPICE(")
        assert kernels.ktotal().unwrap() == 0

    def test_furnsh_list_counts(self, lsk_path, spk_path):
        assert kernels.furnsh_list([lsk_path, spk_path]) == Success(2)

    def test_furnsh_list_stops_at_first_failure(self, lsk_path, kernel_dir):
        outcome = kernels.furnsh_list([lsk_path, kernel_dir / "missing.bsp", lsk_path])
        assert not outcome.ok
        assert kernels.ktotal().unwrap() == 1

    def test_ktotal_by_kind(self, lsk_path, spk_path):
        kernels.furnsh_list([lsk_path, spk_path]).unwrap()
        assert kernels.ktotal(KernelType.SPK) == Success(1)
        assert kernels.ktotal(KernelType.TEXT) == Success(1)
        assert kernels.ktotal([KernelType.SPK, KernelType.TEXT]) == Success(2)
        assert kernels.ktotal("SPK CK") == Success(1)

    def test_unknown_kind(self):
        assert kernels.ktotal("FOO").code == "SPICEBRIDGE(INVALIDARGUMENT)"


class TestKernelInfo:
    def test_kdata(self, lsk_path):
        kernels.furnsh(lsk_path).unwrap()
        info = kernels.kdata(0).unwrap()
        assert isinstance(info, KernelInfo)
        assert info.file == str(lsk_path)
        assert info.kind == "TEXT"
        assert info.source == ""

    def test_kdata_past_the_end(self, lsk_path):
        kernels.furnsh(lsk_path).unwrap()
        assert kernels.kdata(1) == NotFound("kernel #1 of kind ALL")

    def test_kinfo(self, spk_path):
        kernels.furnsh(spk_path).unwrap()
        info = kernels.kinfo(spk_path).unwrap()
        assert info.kind == "SPK"
        assert info.handle != 0

    def test_kinfo_unloaded_file(self, lsk_path):
        assert isinstance(kernels.kinfo(lsk_path), NotFound)
