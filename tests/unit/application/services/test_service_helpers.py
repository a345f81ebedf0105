import pytest

from spicebridge.application.services.geometry import with_surfaces
from spicebridge.application.services.kernels import _kinds
from spicebridge.domain.exceptions import ValidationError
from spicebridge.domain.models.enums import KernelType


class TestWithSurfaces:
    def test_no_surfaces(self):
        assert with_surfaces("ELLIPSOID") == "ELLIPSOID"

    def test_surface_list(self):
        assert with_surfaces("DSK/UNPRIORITIZED", ["HIGH", "LOW"]) == (
            "DSK/UNPRIORITIZED/SURFACES = HIGH, LOW"
        )


class TestKernelKinds:
    @pytest.mark.parametrize(
        "kind, words",
        [
            (KernelType.ALL, "ALL"),
            ("spk", None),
            ("SPK CK", "SPK CK"),
            ([KernelType.PCK, "DSK"], "PCK DSK"),
        ],
    )
    def test_words(self, kind, words):
        if words is None:
            with pytest.raises(ValidationError):
                _kinds(kind)
        else:
            assert _kinds(kind) == words
