"""
spicebridge - typed, error-state-safe bindings over the SPICE toolkit.

Quick start:
    >>> from spicebridge import services, Success
    >>> from spicebridge.domain.models import EphemerisTime
    >>> services.kernels.furnsh("kernels/naif0012.tls")
    >>> match services.time.et2utc(EphemerisTime(0.0)):
    ...     case Success(value=utc):
    ...         print(utc)
"""

from spicebridge.adapter import SpiceAPI
from spicebridge.application import services
from spicebridge.domain.exceptions import (
    NotFoundError,
    SpiceBridgeException,
    SpiceCallError,
    ValidationError,
)
from spicebridge.domain.models.results import (
    CallResult,
    Failure,
    LookupResult,
    NotFound,
    Success,
)

__version__ = "0.1.0"

__all__ = [
    "SpiceAPI",
    "services",
    "CallResult",
    "Failure",
    "LookupResult",
    "NotFound",
    "Success",
    "NotFoundError",
    "SpiceBridgeException",
    "SpiceCallError",
    "ValidationError",
]
