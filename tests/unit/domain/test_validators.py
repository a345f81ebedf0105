import numpy as np
import pytest

from spicebridge.domain.exceptions import MarshalingError, ValidationError
from spicebridge.domain.models.enums import AberrationCorrection, Axis, KernelType
from spicebridge.domain.validators import (
    option_word,
    validate_capacity,
    validate_option,
    validate_shape,
)


class TestValidateShape:
    def test_matching_shape(self):
        validate_shape(np.zeros(3), (3,), "DistanceVector")

    def test_wrong_shape(self):
        with pytest.raises(MarshalingError, match="RotationMatrix"):
            validate_shape(np.zeros(6), (3, 3), "RotationMatrix")

    def test_marshaling_error_is_a_validation_error(self):
        assert issubclass(MarshalingError, ValidationError)
        assert MarshalingError.code != ValidationError.code


class TestValidateCapacity:
    @pytest.mark.parametrize("capacity", [1, 2, 10_000])
    def test_positive(self, capacity):
        validate_capacity(capacity)

    @pytest.mark.parametrize("capacity", [0, -1, 2.5, True, "10"])
    def test_rejected(self, capacity):
        with pytest.raises(ValidationError):
            validate_capacity(capacity)


class TestOptions:
    def test_member_passes(self):
        assert validate_option(KernelType, KernelType.SPK) is KernelType.SPK

    def test_word_is_coerced(self):
        assert validate_option(AberrationCorrection, "LT+S") is AberrationCorrection.LT_S
        assert option_word(AberrationCorrection, "CN") == "CN"

    def test_int_options(self):
        assert validate_option(Axis, 3) is Axis.Z

    def test_unknown_word_lists_allowed_values(self):
        with pytest.raises(ValidationError, match="LT\\+S"):
            validate_option(AberrationCorrection, "LT+Q")
