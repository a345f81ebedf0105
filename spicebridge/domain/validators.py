"""Input validation utilities for the raw-array boundary."""

from enum import Enum
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from spicebridge.domain.exceptions import MarshalingError, ValidationError

E = TypeVar("E", bound=Enum)


def validate_shape(raw: NDArray[np.float64], shape: tuple[int, ...], name: str) -> None:
    """Validate the shape of a raw array before converting it to a typed value.

    Args:
        raw: Array produced by (or destined for) the toolkit
        shape: Expected shape, e.g. (3,) or (3, 3)
        name: Name of the target type, for error messages

    Raises:
        MarshalingError: If the array does not have the expected shape
    """
    if raw.shape != shape:
        raise MarshalingError(
            f"{name} expects an array of shape {shape}, got {raw.shape}"
        )


def validate_capacity(capacity: int, name: str = "capacity") -> None:
    """Validate the size of an output buffer handed to the toolkit.

    Args:
        capacity: Maximum number of elements the toolkit may write
        name: Name for error messages

    Raises:
        ValidationError: If capacity is not a positive integer
    """
    if not isinstance(capacity, int) or isinstance(capacity, bool):
        raise ValidationError(f"{name} must be an integer, got {type(capacity)}")

    if capacity <= 0:
        raise ValidationError(f"{name} must be positive, got {capacity}")


def validate_option(enum_cls: type[E], value: E | str) -> E:
    """Coerce an option word to its enumeration member.

    Raises:
        ValidationError: If the word is not a member of ``enum_cls``
    """
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(str(m.value) for m in enum_cls)
        raise ValidationError(
            f"{value!r} is not a valid {enum_cls.__name__} (expected one of: {allowed})"
        ) from None


def option_word(enum_cls: type[E], value: E | str) -> str:
    """The toolkit word for an option, validated against ``enum_cls``."""
    return validate_option(enum_cls, value).value
